import sys

from .commandline import CLOptions
from .exceptions import OptionException

SHORT_SPEC = "t:qf:d:"
LONG_SPEC = "test:,raar"


def main(argv=None) -> int:
    options = CLOptions(SHORT_SPEC, LONG_SPEC)
    try:
        options.init(sys.argv if argv is None else argv)
    except OptionException as e:
        print(e, file=sys.stderr)
        return 2

    print(options.to_string())
    for arg in options.get_mass_opts():
        print(f"mass: {arg}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO

from .convert import convert
from .exceptions import MissingArgumentException, OptionNotExistsException
from .spec import Arity, compile_long_spec, compile_short_spec, is_long_name, is_short_name, merge_tables
from .store import OptionName, OptionStore, ParsedOption
from .tokenizer import quote_arg, split_args, split_command

DEBUG_SWITCH = "--SetCommandLineDebug"
END_OF_OPTIONS = "--"
INTRODUCERS = {"-": True, "+": False}


def looks_like_option(arg: str) -> bool:
    return len(arg) > 1 and arg[0] in INTRODUCERS


class CLOptions:
    def __init__(self, short_spec: str = "", long_spec: str = "", debug: bool = False,
                 debug_stream: Optional[TextIO] = None):
        self.short_options: Dict[str, Arity] = {}
        self.long_options: Dict[str, Arity] = {}
        self.short_specs: List[str] = []
        self.long_specs: List[str] = []
        self.store = OptionStore()
        self.is_debug = debug
        self.debug_stream = debug_stream
        self.allow_args(short_spec, long_spec)

    # registration

    def allow_args(self, short_spec: str = "", long_spec: str = "") -> None:
        if short_spec:
            self.add_short_options(short_spec)
        if long_spec:
            self.add_long_options(long_spec)

    def add_short_options(self, spec: str) -> None:
        merge_tables(self.short_options, compile_short_spec(spec))
        self.short_specs.append(spec)

    def add_long_options(self, spec: str) -> None:
        merge_tables(self.long_options, compile_long_spec(spec))
        self.long_specs.append(spec)

    def get_short_options(self) -> str:
        return "".join(self.short_specs)

    def get_long_options(self) -> str:
        return ",".join(self.long_specs)

    @property
    def is_open(self) -> bool:
        """No spec registered: every option is accepted with an optional argument."""
        return not self.short_options and not self.long_options

    def set_debug(self, debug: bool = True) -> None:
        self.is_debug = debug

    @property
    def debug(self) -> bool:
        return self.is_debug

    def _log(self, message: str) -> None:
        if self.is_debug:
            stream = sys.stderr if self.debug_stream is None else self.debug_stream
            print(f"[CLOptions] {message}", file=stream)

    # parsing

    def init(self, argv: Sequence[str], skip_program: bool = True) -> None:
        """Parse a real argument vector, by default skipping ``argv[0]``."""
        self.parse(split_args(argv, skip_program))

    def parse_args(self, text: str) -> None:
        """Parse one free-form command string."""
        self.parse(split_command(text))

    def parse(self, args: List[str]) -> None:
        self._log(f"parse {args}")
        current = 0
        while current < len(args):
            arg = args[current]
            if arg == DEBUG_SWITCH:
                self.is_debug = True
                self._log("debugging switched on from the command line")
                current += 1
                continue

            if arg == END_OF_OPTIONS:
                for rest in args[current + 1:]:
                    self._log(f"mass argument after {END_OF_OPTIONS}: ‘{rest}’")
                    self.store.add_mass(rest)
                break

            if arg.startswith("--"):
                current = self._parse_long_option(arg, args, current)
            elif looks_like_option(arg):
                current = self._parse_short_option(arg, args, current)
            else:
                self._log(f"mass argument ‘{arg}’")
                self.store.add_mass(arg)

            current += 1

    def _short_arity(self, opt: str) -> Arity:
        if self.is_open and is_short_name(opt):
            return Arity.OPTIONAL
        arity = self.short_options.get(opt)
        if arity is None:
            raise OptionNotExistsException(f"-{opt}")
        return arity

    def _long_arity(self, opt: str) -> Arity:
        if not opt:
            raise OptionNotExistsException("--")
        if self.is_open and is_long_name(opt):
            return Arity.OPTIONAL
        arity = self.long_options.get(opt)
        if arity is None:
            raise OptionNotExistsException(f"--{opt}")
        return arity

    def _parse_short_option(self, arg: str, args: List[str], current: int) -> int:
        polarity = INTRODUCERS[arg[0]]
        cluster = arg[1:]
        # the token is stored only once every letter in it is known
        found = []
        for pos, opt in enumerate(cluster):
            arity = self._short_arity(opt)
            name = OptionName(opt, False)
            if arity is Arity.NONE:
                self._log(f"short option ‘{arg[0]}{opt}’")
                found.append((name, ""))
                continue

            value = cluster[pos + 1:]
            if value:
                self._log(f"short option ‘{arg[0]}{opt}’ with attached value ‘{value}’")
            elif current + 1 < len(args) and not looks_like_option(args[current + 1]):
                current += 1
                value = args[current]
                self._log(f"short option ‘{arg[0]}{opt}’ takes next argument ‘{value}’")
            elif arity is Arity.REQUIRED:
                raise MissingArgumentException(f"-{opt}")
            else:
                self._log(f"short option ‘{arg[0]}{opt}’ without its optional value")
            found.append((name, value))
            break
        for name, value in found:
            self.store.add(name, value, polarity)
        return current

    def _parse_long_option(self, arg: str, args: List[str], current: int) -> int:
        opt, sep, value = arg[2:].partition("=")
        arity = self._long_arity(opt)
        name = OptionName(opt, True)

        if arity is Arity.NONE:
            if sep:
                self._log(f"long option ‘--{opt}’ takes no value, ignoring ‘{value}’")
            else:
                self._log(f"long option ‘--{opt}’")
            self.store.add(name, "")
        elif arity is Arity.REQUIRED:
            if not value:
                if current + 1 >= len(args):
                    raise MissingArgumentException(f"--{opt}")
                current += 1
                value = args[current]
                self._log(f"long option ‘--{opt}’ takes next argument ‘{value}’")
            else:
                self._log(f"long option ‘--{opt}’ with value ‘{value}’")
            self.store.add(name, value)
        else:
            if sep:
                self._log(f"long option ‘--{opt}’ with value ‘{value}’")
            elif current + 1 < len(args) and not looks_like_option(args[current + 1]):
                current += 1
                value = args[current]
                self._log(f"long option ‘--{opt}’ takes next argument ‘{value}’")
            else:
                self._log(f"long option ‘--{opt}’ without its optional value")
            self.store.add(name, value)
        return current

    # queries

    def is_present(self, name: str) -> bool:
        return self.store.has(OptionName.lookup(name))

    def __contains__(self, name: str) -> bool:
        return self.is_present(name)

    def __len__(self):
        return len(self.store)

    def peek(self, name: str, value_type: Any = None) -> Optional[ParsedOption]:
        """Return the oldest unconsumed occurrence of ``name`` without removing it."""
        found = self.store.first(OptionName.lookup(name))
        if found is None or value_type is None:
            return found
        return found._replace(value=convert(found.value, value_type))

    def extract(self, name: str, value_type: Any = None) -> Optional[ParsedOption]:
        """Remove and return the oldest occurrence of ``name``.

        The occurrence is consumed even when converting it to ``value_type``
        raises ``ArgumentIncorrectType``.
        """
        found = self.store.pop(OptionName.lookup(name))
        if found is None or value_type is None:
            return found
        return found._replace(value=convert(found.value, value_type))

    def extract_all(self, name: str, value_type: Any = None) -> List[Any]:
        values = []
        found = self.extract(name, value_type)
        while found is not None:
            values.append(found.value)
            found = self.extract(name, value_type)
        return values

    def get_value(self, name: str, value_type: Any = str, default: Any = None) -> Any:
        found = self.peek(name, value_type)
        return default if found is None else found.value

    def extract_value(self, name: str, value_type: Any = str, default: Any = None) -> Any:
        found = self.extract(name, value_type)
        return default if found is None else found.value

    def get_polarity(self, name: str) -> Optional[bool]:
        found = self.peek(name)
        return None if found is None else found.polarity

    def get_mass_opts(self) -> List[str]:
        return list(self.store.mass)

    # serializing

    def _arity_of(self, name: OptionName) -> Arity:
        if self.is_open:
            return Arity.OPTIONAL
        table = self.long_options if name.is_long else self.short_options
        return table.get(name.name, Arity.OPTIONAL)

    def _render(self, option: ParsedOption) -> str:
        name, value = option.name, option.value
        arity = self._arity_of(name)
        if name.is_long:
            if arity is Arity.NONE:
                return f"--{name.name}"
            if value == "" and arity is Arity.REQUIRED:
                return f'--{name.name} ""'
            return f"--{name.name}={quote_arg(value) if value else ''}"

        introducer = "-" if option.polarity else "+"
        if arity is Arity.NONE or (value == "" and arity is Arity.OPTIONAL):
            return f"{introducer}{name.name}"
        if value and value[0] in INTRODUCERS:
            return f"{introducer}{name.name}{quote_arg(value)}"
        return f"{introducer}{name.name} {quote_arg(value)}"

    def _may_swallow(self, option: ParsedOption) -> bool:
        # an optional value rendered as absent would take the next token
        if option.value != "":
            return False
        arity = self._arity_of(option.name)
        return arity is Arity.OPTIONAL and not option.name.is_long

    def to_string(self) -> str:
        parts = []
        last = None
        for option in self.store.entries():
            parts.append(self._render(option))
            last = option
        mass = self.store.mass
        if mass:
            if any(looks_like_option(arg) or arg == END_OF_OPTIONS for arg in mass) or \
                    (last is not None and self._may_swallow(last)):
                parts.append(END_OF_OPTIONS)
            parts.extend(quote_arg(arg) for arg in mass)
        return " ".join(parts)

    def __str__(self):
        return self.to_string()

    def dump(self) -> str:
        lines = [f"short options: {self.get_short_options()!r}",
                 f"long options: {self.get_long_options()!r}"]
        for option in self.store.entries():
            polarity = "" if option.name.is_long else f" (polarity {option.polarity})"
            lines.append(f"  {option.name} = {option.value!r}{polarity}")
        lines.append(f"mass options: {self.store.mass}")
        return "\n".join(lines)

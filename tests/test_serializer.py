from hypothesis import assume, given
from hypothesis import strategies as st

from cl_options import CLOptions, OptionNotExistsException
from cl_options.spec import is_long_name, is_short_name

SHORT_SPEC = "ab:c::"
LONG_SPEC = "flag,req:,opt::"


def reparse(opts, short_spec="", long_spec=""):
    again = CLOptions(short_spec, long_spec)
    again.parse_args(opts.to_string())
    return again


def test_canonical_form():
    opts = CLOptions()
    opts.parse_args("-a b -a c oke -dfiets --appel peer --fout=goed toch")
    assert opts.to_string() == "-a b -a c -d fiets --appel=peer --fout=goed oke toch"
    assert str(opts) == opts.to_string()


def test_quoted_value_with_leading_dash():
    opts = CLOptions()
    opts.parse_args('-a b -a c oke -d"-fiets --appel peer " --fout=goed toch')
    assert opts.get_value("d") == "-fiets --appel peer "
    assert opts.to_string() == '-a b -a c -d"-fiets --appel peer " --fout=goed oke toch'
    assert len(opts.get_mass_opts()) == 2


def test_backslashes_are_escaped_on_output():
    opts = CLOptions()
    opts.parse_args(r"--fout=goed\\mis --jan=gek")
    assert opts.to_string() == r'--fout="goed\\mis" --jan=gek'
    assert opts.extract_value("fout") == "goed\\mis"
    assert opts.extract_value("jan") == "gek"


def test_arity_specific_rendering():
    opts = CLOptions(SHORT_SPEC, LONG_SPEC)
    opts.parse(["-a", "+a", "-b", "", "-c", "--flag=x", "--req", "", "--opt="])
    assert opts.to_string() == '-a +a -b "" -c --flag --req "" --opt='


def test_optional_short_before_mass_gets_separator():
    opts = CLOptions(SHORT_SPEC, LONG_SPEC)
    opts.parse(["-c", "--", "file"])
    assert opts.to_string() == "-c -- file"
    assert reparse(opts, SHORT_SPEC, LONG_SPEC).get_mass_opts() == ["file"]


def test_dashed_mass_gets_separator():
    opts = CLOptions(SHORT_SPEC, LONG_SPEC)
    opts.parse(["-a", "--", "-b", "x"])
    assert opts.to_string() == "-a -- -b x"


def test_only_mass():
    opts = CLOptions("a")
    opts.parse_args("x y")
    assert opts.to_string() == "x y"


def test_extracted_entries_are_not_rendered():
    opts = CLOptions("t:")
    opts.parse_args("-t1 -t2")
    opts.extract("t")
    assert opts.to_string() == "-t 2"


values = st.text()
items = st.one_of(
    st.tuples(st.just("a"), st.booleans()),
    st.tuples(st.just("b"), values),
    st.tuples(st.just("c"), values),
    st.tuples(st.just("flag"), st.none()),
    st.tuples(st.just("req"), values),
    st.tuples(st.just("opt"), values),
)


def build_argv(options, mass):
    argv = []
    for name, value in options:
        if name == "a":
            argv.append("-a" if value else "+a")
        elif name == "b":
            argv.extend(["-b" + value] if value else ["-b", ""])
        elif name == "c":
            argv.append("-c" + value)
        elif name == "flag":
            argv.append("--flag")
        elif name == "req":
            argv.extend(["--req=" + value] if value else ["--req", ""])
        else:
            argv.append("--opt=" + value)
    return argv + ["--"] + mass


@given(st.lists(items), st.lists(st.text()))
def test_round_trip(options, mass):
    opts = CLOptions(SHORT_SPEC, LONG_SPEC)
    opts.parse(build_argv(options, mass))
    again = reparse(opts, SHORT_SPEC, LONG_SPEC)
    assert list(again.store.entries()) == list(opts.store.entries())
    assert again.get_mass_opts() == opts.get_mass_opts() == mass


@given(st.lists(st.tuples(st.sampled_from("xyz"), st.text())), st.lists(st.text()))
def test_open_mode_round_trip(options, mass):
    opts = CLOptions()
    opts.parse([f"--{name}={value}" for name, value in options] + ["--"] + mass)
    again = reparse(opts)
    assert list(again.store.entries()) == list(opts.store.entries())
    assert again.get_mass_opts() == mass


@given(st.lists(st.tuples(st.characters(), st.text())),
       st.lists(st.tuples(st.text(min_size=1), st.text())),
       st.lists(st.text()))
def test_open_mode_round_trip_with_any_name(shorts, longs, mass):
    argv = [f"-{name}{value}" for name, value in shorts] + [f"--{name}={value}" for name, value in longs]
    assume("--" not in argv)
    opts = CLOptions()
    try:
        opts.parse(argv + ["--"] + mass)
    except OptionNotExistsException:
        # names a spec could not declare are refused, never stored
        assert all(is_short_name(entry.name.name) for entry in opts.store.entries()
                   if not entry.name.is_long)
        assert all(is_long_name(entry.name.name) for entry in opts.store.entries()
                   if entry.name.is_long)
        return
    again = reparse(opts)
    assert list(again.store.entries()) == list(opts.store.entries())
    assert again.get_mass_opts() == mass

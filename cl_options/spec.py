import re
from enum import Enum
from typing import Dict, NamedTuple

from .exceptions import InvalidOptionFormatError, OptionExistsError

LONG_NAME = re.compile(r"\w[\w-]*")
# characters that can never be a short option
RESERVED_SHORT = set(":,-+=\"\\")


def is_short_name(ch: str) -> bool:
    return len(ch) == 1 and not ch.isspace() and ch not in RESERVED_SHORT


def is_long_name(name: str) -> bool:
    return LONG_NAME.fullmatch(name) is not None


class Arity(Enum):
    NONE = 0      # -x
    REQUIRED = 1  # -x value
    OPTIONAL = 2  # -x [value]

    @classmethod
    def from_colons(cls, count: int) -> 'Arity':
        return (cls.NONE, cls.REQUIRED, cls.OPTIONAL)[count]

    def colons(self) -> str:
        return ":" * self.value


class OptionSpec(NamedTuple):
    name: str
    arity: Arity

    def __str__(self):
        return self.name + self.arity.colons()


def _count_colons(text: str, pos: int) -> int:
    end = pos
    while end < len(text) and text[end] == ":":
        end += 1
    return end - pos


def _declare(table: Dict[str, Arity], name: str, arity: Arity) -> None:
    old = table.get(name)
    if old is not None and old is not arity:
        raise OptionExistsError(name, OptionSpec(name, old), OptionSpec(name, arity))
    table[name] = arity


def compile_short_spec(text: str) -> Dict[str, Arity]:
    """Compile a short option spec like ``"t:fh"`` or ``"t::,f:"``.

    Every character is an option, one trailing colon makes the argument
    required, two make it optional. Commas between entries are ignored.
    """
    table: Dict[str, Arity] = {}
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == ",":
            i += 1
            continue
        if ch == ":":
            raise InvalidOptionFormatError(text, f"colon without option at position {i}")
        if not is_short_name(ch):
            raise InvalidOptionFormatError(text, f"‘{ch}’ cannot be a short option")
        colons = _count_colons(text, i + 1)
        if colons > 2:
            raise InvalidOptionFormatError(text, f"too many colons after ‘{ch}’")
        _declare(table, ch, Arity.from_colons(colons))
        i += 1 + colons
    return table


def compile_long_spec(text: str) -> Dict[str, Arity]:
    """Compile a long option spec like ``"test::,qed,data:"``."""
    table: Dict[str, Arity] = {}
    if not text:
        return table
    for entry in text.split(","):
        name = entry.rstrip(":")
        colons = len(entry) - len(name)
        if not name:
            raise InvalidOptionFormatError(text, "empty option name")
        if colons > 2:
            raise InvalidOptionFormatError(text, f"too many colons after ‘{name}’")
        if not is_long_name(name):
            raise InvalidOptionFormatError(text, f"‘{name}’ is not a valid long option name")
        _declare(table, name, Arity.from_colons(colons))
    return table


def render_short_spec(table: Dict[str, Arity]) -> str:
    return "".join(str(OptionSpec(name, arity)) for name, arity in table.items())


def render_long_spec(table: Dict[str, Arity]) -> str:
    return ",".join(str(OptionSpec(name, arity)) for name, arity in table.items())


def merge_tables(target: Dict[str, Arity], extra: Dict[str, Arity]) -> None:
    # check everything first so a conflict leaves target untouched
    for name, arity in extra.items():
        old = target.get(name)
        if old is not None and old is not arity:
            raise OptionExistsError(name, OptionSpec(name, old), OptionSpec(name, arity))
    target.update(extra)

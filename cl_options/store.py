from collections import deque
from typing import Any, Deque, Dict, Iterator, List, NamedTuple, Optional, Tuple


class OptionName(NamedTuple):
    name: str
    is_long: bool

    @classmethod
    def lookup(cls, text: str) -> 'OptionName':
        """Map a query name to the short or long namespace.

        ``"--a"`` and ``"-a"`` pick the namespace explicitly; otherwise a
        single character is short and anything longer is long. ``"--"``
        is the empty long name, which the parser never stores.
        """
        if text.startswith("--"):
            return cls(text[2:], True)
        if text.startswith("-") and len(text) == 2:
            return cls(text[1:], False)
        return cls(text, len(text) > 1)

    def __str__(self):
        return ("--" if self.is_long else "-") + self.name


class ParsedOption(NamedTuple):
    name: OptionName
    value: Any
    polarity: bool = True


class OptionStore:
    """Parsed options per name, oldest first, plus the mass arguments."""

    def __init__(self):
        self.options: Dict[OptionName, Deque[Tuple[str, bool]]] = {}
        self.mass: List[str] = []

    def add(self, name: OptionName, value: str, polarity: bool = True) -> None:
        self.options.setdefault(name, deque()).append((value, polarity))

    def add_mass(self, arg: str) -> None:
        self.mass.append(arg)

    def has(self, name: OptionName) -> bool:
        return bool(self.options.get(name))

    def first(self, name: OptionName) -> Optional[ParsedOption]:
        queue = self.options.get(name)
        if not queue:
            return None
        value, polarity = queue[0]
        return ParsedOption(name, value, polarity)

    def pop(self, name: OptionName) -> Optional[ParsedOption]:
        queue = self.options.get(name)
        if not queue:
            return None
        value, polarity = queue.popleft()
        return ParsedOption(name, value, polarity)

    def entries(self) -> Iterator[ParsedOption]:
        for name, queue in self.options.items():
            for value, polarity in queue:
                yield ParsedOption(name, value, polarity)

    def __len__(self):
        return sum(len(queue) for queue in self.options.values())

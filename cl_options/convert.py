from typing import Any, Callable, Dict

from .exceptions import ArgumentIncorrectType

TRUE_WORDS = ("true", "yes", "on", "1")
FALSE_WORDS = ("false", "no", "off", "0")


def _to_bool(text: str) -> bool:
    word = text.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {text!r}")


_converters: Dict[Any, Callable[[str], Any]] = {
    str: str,
    bool: _to_bool,
}


def register_converter(value_type: Any, func: Callable[[str], Any]) -> None:
    _converters[value_type] = func


def convert(text: str, value_type: Any = str) -> Any:
    """Convert an option value to ``value_type``.

    Types without a registered converter are called with the text, the way
    ``int(text)`` would be.
    """
    func = _converters.get(value_type, value_type)
    try:
        return func(text)
    except (ValueError, TypeError):
        raise ArgumentIncorrectType(text, value_type)

from typing import List, Sequence

QUOTE = '"'
ESCAPE = "\\"


def split_args(argv: Sequence[str], skip_program: bool = False) -> List[str]:
    """Wrap an already split argument vector, optionally without ``argv[0]``."""
    args = list(argv)
    if skip_program and args:
        del args[0]
    return args


def split_command(text: str) -> List[str]:
    """Split one free-form command string into argv-like tokens.

    Whitespace separates tokens except inside double quotes. A backslash
    makes the next character literal, inside quotes as well. Quotes are
    removed and glue to their neighbours, so ``-d"a b"`` is one token ``-da b``.
    """
    tokens: List[str] = []
    current: List[str] = []
    in_token = False
    in_quote = False
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == ESCAPE:
            if i + 1 < len(text):
                current.append(text[i + 1])
                i += 2
            else:
                current.append(ch)
                i += 1
            in_token = True
            continue
        if ch == QUOTE:
            in_quote = not in_quote
            in_token = True
        elif ch.isspace() and not in_quote:
            if in_token:
                tokens.append("".join(current))
                current = []
                in_token = False
        else:
            current.append(ch)
            in_token = True
        i += 1
    if in_token:
        tokens.append("".join(current))
    return tokens


def needs_quoting(value: str) -> bool:
    return value == "" or any(ch.isspace() or ch in (QUOTE, ESCAPE) for ch in value)


def quote_arg(value: str) -> str:
    """Quote ``value`` so that ``split_command`` gives it back as one token."""
    if not needs_quoting(value):
        return value
    escaped = value.replace(ESCAPE, ESCAPE * 2).replace(QUOTE, ESCAPE + QUOTE)
    return QUOTE + escaped + QUOTE

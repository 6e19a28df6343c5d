from __future__ import annotations

QUOTE_CHARS = frozenset({'"', "'"})
SEPARATOR_CHARS = frozenset({" ", ";"})
ESCAPE_CHAR = "\\"


def tokenize_paths(text: str) -> list[str]:
    """Split pasted text into candidate path tokens.

    Spaces and semicolons separate tokens unless they sit inside quotes.
    ``"`` and ``'`` both toggle quoting (either one closes the other) and are
    never kept. A backslash makes the next character literal, so Windows
    paths have to be quoted-and-escaped or use forward slashes.
    """
    tokens: list[str] = []
    buffer: list[str] = []
    in_quotes = False
    escape_next = False

    def flush() -> None:
        token = "".join(buffer).strip()
        buffer.clear()
        if token:
            tokens.append(token)

    for char in text or "":
        if escape_next:
            buffer.append(char)
            escape_next = False
        elif char == ESCAPE_CHAR:
            escape_next = True
        elif char in QUOTE_CHARS:
            in_quotes = not in_quotes
        elif char in SEPARATOR_CHARS and not in_quotes:
            flush()
        else:
            buffer.append(char)

    # 未闭合的引号按已读内容处理，悬空的转义符直接丢弃
    flush()
    return tokens

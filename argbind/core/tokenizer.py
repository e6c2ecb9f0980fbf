"""Splitting of command text into argument tokens."""

from typing import Iterator, Optional

QUOTE = '"'
ESCAPED_QUOTE = '\\"'


def _is_escaped_close(piece: str) -> bool:
    return piece.endswith(ESCAPED_QUOTE)


def split_arguments(text: str) -> Iterator[str]:
    """Yield argument tokens from ``text``.

    Tokens are separated by single spaces, so consecutive spaces produce empty
    tokens. Double quotes group several words into one token; a quote preceded by
    a backslash at the end of a word is kept as a literal quote. A quote left open
    at the end of the input yields nothing for the unfinished fragment.
    """
    if not text or text.isspace():
        return

    pending: Optional[str] = None
    for piece in text.split(" "):
        if pending is None:
            if len(piece) >= 2 and piece.startswith(QUOTE) and piece.endswith(QUOTE):
                if _is_escaped_close(piece):
                    pending = piece[1:-2] + QUOTE
                else:
                    yield piece[1:-1]
            elif piece.startswith(QUOTE):
                pending = piece[1:]
            else:
                yield piece
        elif piece.endswith(QUOTE):
            if _is_escaped_close(piece):
                pending = f"{pending} {piece[:-2]}{QUOTE}"
            else:
                yield f"{pending} {piece[:-1]}"
                pending = None
        else:
            pending = f"{pending} {piece}"

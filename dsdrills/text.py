"""Character search within strings."""

from __future__ import annotations

NUL = "\0"


def rfind_char(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None if it is absent.

    ``s`` is read up to its first NUL character; searching for NUL itself
    finds the end of that text.
    """
    if len(c) != 1:
        raise ValueError("c must be a single character")
    text = s.split(NUL, 1)[0]
    if c == NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index
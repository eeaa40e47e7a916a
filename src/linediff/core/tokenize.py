"""Split text buffers into line sequences"""

from typing import Optional


def split_lines(text: Optional[str]) -> tuple[str, ...]:
    """Normalize CRLF to LF and split on LF. A trailing newline yields a trailing empty line.

    An empty (or None) buffer has no lines at all.
    """
    text = ("" if text is None else str(text)).replace("\r\n", "\n")
    if not text:
        return ()
    return tuple(text.split("\n"))

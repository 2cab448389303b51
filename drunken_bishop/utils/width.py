"""Terminal display width helpers.

Widths come from ``wcwidth.wcwidth``: East Asian wide and fullwidth characters
count as two columns, combining marks and other zero-width code points as zero.
Non-printable code points (``wcwidth`` returns -1) are counted as zero columns
as well. Results follow the Unicode tables of the installed ``wcwidth``
release.
"""

from typing import Tuple

from wcwidth import wcwidth


def char_width(ch: str) -> int:
    """Return the number of terminal columns ``ch`` occupies (0, 1 or 2)."""
    return max(wcwidth(ch), 0)


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def truncate_to_width(text: str, max_width: int) -> Tuple[str, int]:
    """Cut ``text`` to at most ``max_width`` columns on a character boundary.

    A wide character that would straddle the limit is dropped entirely, as is
    everything after it.

    Returns:
        Tuple[str, int]: The kept prefix and its display width.
    """
    size = 0
    end = 0
    for i, ch in enumerate(text):
        next_size = size + char_width(ch)
        if next_size > max_width:
            break
        size = next_size
        end = i + 1
    return text[:end], size

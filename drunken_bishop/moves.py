"""Bishop movement.

Each input byte carries four moves, two bits apiece, read from the least
significant pair to the most significant one (the order OpenSSH uses). Within a
pair the low bit selects the horizontal direction and the high bit the vertical
one:

====  =========  ==========
bits  direction  (dx, dy)
====  =========  ==========
00    NW         (-1, -1)
01    NE         (+1, -1)
10    SW         (-1, +1)
11    SE         (+1, +1)
====  =========  ==========

The bishop cannot leave the field. When a step would cross an edge only the
offending axis is dropped, so a bishop against the left wall asked to go NW
moves straight up, and one sitting in a corner may not move at all.
"""

from typing import Iterator, Tuple

from drunken_bishop.position import Position

BitPair = Tuple[bool, bool]
Step = Tuple[int, int]


def bit_pairs(byte: int) -> Tuple[BitPair, BitPair, BitPair, BitPair]:
    """Split ``byte`` into four ``(vertical, horizontal)`` flag pairs.

    The first pair comes from bits 1 and 0, the last from bits 7 and 6.

    >>> bit_pairs(0xF4)
    ((False, False), (False, True), (True, True), (True, True))
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"Not a byte: {byte}")
    pairs = []
    for _ in range(4):
        pairs.append((bool(byte & 0x2), bool(byte & 0x1)))
        byte >>= 2
    return (pairs[0], pairs[1], pairs[2], pairs[3])


def iter_bit_pairs(data: bytes) -> Iterator[BitPair]:
    """Yield every bit pair of ``data`` in walking order."""
    for byte in data:
        yield from bit_pairs(byte)


def pair_to_step(pair: BitPair) -> Step:
    """Unclamped ``(dx, dy)`` for a ``(vertical, horizontal)`` pair."""
    a, b = pair
    return (1 if b else -1, 1 if a else -1)


def clamp_step(pos: Position, step: Step, width: int, height: int) -> Step:
    """Zero each axis of ``step`` that would push ``pos`` off the field."""
    dx, dy = step
    if (pos.x == 0 and dx < 0) or (pos.x == width - 1 and dx > 0):
        dx = 0
    if (pos.y == 0 and dy < 0) or (pos.y == height - 1 and dy > 0):
        dy = 0
    return dx, dy


def bishop_move(pos: Position, pair: BitPair, width: int, height: int) -> Position:
    """Return where the bishop lands after one move from ``pos``.

    The result is always inside ``[0, width) x [0, height)`` provided ``pos``
    was.
    """
    dx, dy = clamp_step(pos, pair_to_step(pair), width, height)
    return Position(pos.x + dx, pos.y + dy)

"""
Position arithmetic shared by both cursor kinds.

A cursor over a sequence of length ``n`` sits on one of ``n + 1`` slots: a valid
index ``0 <= i < n`` or the ghost slot ``n``, which is both "before the first" and
"after the last" element. Every helper here classifies the raw index first and only
subtracts once the tag rules out the zero boundary.
"""
import typing
from typing import Tuple, Union


class Ghost:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'GHOST'


GHOST = Ghost()


class Valid(typing.NamedTuple):
    index: int


Position = Union[Valid, Ghost]


def locate(index: int, length: int) -> Position:
    if index < length:
        return Valid(index)
    else:
        return GHOST


def in_range(index: int, length: int) -> bool:
    return 0 <= index <= length


def next_index(index: int, length: int) -> int:
    position = locate(index, length)
    if isinstance(position, Valid):
        return position.index + 1
    else:
        return 0


def prev_index(index: int, length: int) -> int:
    position = locate(index, length)
    if isinstance(position, Valid):
        if position.index == 0:
            return length  # wrap onto the ghost slot
        return position.index - 1
    elif index == 0:
        return 0
    else:
        return index - 1


def peek_prev_index(index: int, length: int) -> typing.Optional[int]:
    """
    :return: The index ``peek_prev`` looks at, or None when the previous slot is the ghost.
    """
    position = locate(index, length)
    if isinstance(position, Valid) and position.index == 0:
        return None
    return prev_index(index, length)


def after_point(index: int, length: int) -> Tuple[int, bool]:
    """
    :return: The insertion point just after the current slot, and whether the cursor
        has to be reset onto the ghost slot once the sequence length changes.
    """
    position = locate(index, length)
    if isinstance(position, Valid):
        return position.index + 1, False
    else:
        return 0, True


def before_point(index: int, length: int) -> int:
    position = locate(index, length)
    if isinstance(position, Valid) and position.index == 0:
        return 0
    elif index == 0:
        return 0
    else:
        return index - 1

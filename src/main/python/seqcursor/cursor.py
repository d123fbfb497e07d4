from __future__ import annotations

import typing
from typing import Callable, Iterable, List, Optional, TypeVar

from . import position
from .errors import BorrowError


T = TypeVar('T')


class BaseCursor(typing.Generic[T]):
    """
    Navigation and read access shared by :class:`ReadCursor` and :class:`WriteCursor`.

    The cursor holds the list it was lent and a single integer index. At rest the index
    is either a valid element index or exactly ``len(list)``, the ghost slot.
    """
    _vec: List[T]
    _index: int

    def __init__(self, vec: List[T], index: Optional[int] = None,
                 on_release: Optional[Callable[[BaseCursor[T]], None]] = None):
        from .cursor_vec import CursorVec

        if on_release is None and isinstance(vec, CursorVec):
            raise BorrowError("CursorVec cursors must be lent through cursor() or cursor_mut()")

        if index is None:
            index = len(vec)
        if not position.in_range(index, len(vec)):
            raise IndexError("Cursor out of range")

        self._vec = vec
        self._index = index
        self._on_release = on_release
        self._released = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()

    def __repr__(self):
        return f"{type(self).__name__}({list(self._vec)!r}, {self._current_index()!r})"

    def release(self):
        if self._released:
            return

        self._released = True
        if self._on_release is not None:
            self._on_release(self)

    @property
    def released(self) -> bool:
        return self._released

    def _check_live(self):
        if self._released:
            raise BorrowError(f"{type(self).__name__} has already been released")

    def _current_index(self) -> Optional[int]:
        found = position.locate(self._index, len(self._vec))
        if isinstance(found, position.Valid):
            return found.index
        return None

    def _get(self, index: Optional[int]) -> Optional[T]:
        if index is None or not 0 <= index < len(self._vec):
            return None
        return self._vec[index]

    def is_valid(self) -> bool:
        self._check_live()
        return self._index < len(self._vec)

    def current_index(self) -> Optional[int]:
        self._check_live()
        return self._current_index()

    def move_next(self):
        self._check_live()
        self._index = position.next_index(self._index, len(self._vec))

    def move_prev(self):
        self._check_live()
        self._index = position.prev_index(self._index, len(self._vec))

    def current(self) -> Optional[T]:
        self._check_live()
        return self._get(self._current_index())

    def peek_next(self) -> Optional[T]:
        self._check_live()
        return self._get(position.next_index(self._index, len(self._vec)))

    def peek_prev(self) -> Optional[T]:
        self._check_live()
        return self._get(position.peek_prev_index(self._index, len(self._vec)))


class ReadCursor(BaseCursor[T]):
    """A shared view of a list with its own position."""


class WriteCursor(BaseCursor[T]):
    """
    An exclusive view of a list that can edit it around the current position.

    Edits go through the base ``list`` methods, so a :class:`seqcursor.CursorVec`
    accepts them while it refuses direct mutation for the lifetime of the cursor.
    """
    _views: List[ReadCursor[T]]

    def __init__(self, vec: List[T], index: Optional[int] = None,
                 on_release: Optional[Callable[[BaseCursor[T]], None]] = None):
        super().__init__(vec, index, on_release)
        self._views = []

    def release(self):
        # open views borrow through this cursor and end with it
        for view in list(self._views):
            view.release()
        super().release()

    def _check_exclusive(self):
        self._check_live()
        if self._views:
            raise BorrowError(f"WriteCursor is shared by {len(self._views)} open read view(s)")

    def _release_view(self, view: ReadCursor[T]):
        self._views.remove(view)

    def as_cursor(self) -> ReadCursor[T]:
        """
        :return: A read view of the same list starting at this cursor's position. It is a
            snapshot: moving or editing through this cursor afterwards is not reflected in its
            position. Edits are refused until the view is released, and releasing this cursor
            releases the view too.
        """
        self._check_live()
        view = ReadCursor(self._vec, self._index, on_release=self._release_view)
        self._views.append(view)
        return view

    def replace_current(self, item: T) -> Optional[T]:
        self._check_exclusive()
        index = self._current_index()
        if index is None:
            return None

        previous = self._vec[index]
        list.__setitem__(self._vec, index, item)
        return previous

    def insert_after(self, item: T):
        self._check_exclusive()
        point, reset = position.after_point(self._index, len(self._vec))
        list.insert(self._vec, point, item)
        if reset:
            self._index = len(self._vec)

    def insert_before(self, item: T):
        self._check_exclusive()
        point = position.before_point(self._index, len(self._vec))
        list.insert(self._vec, point, item)
        self._index += 1

    def remove_current(self) -> Optional[T]:
        self._check_exclusive()
        index = self._current_index()
        if index is None:
            return None
        return list.pop(self._vec, index)

    def splice_after(self, items: Iterable[T]):
        self._check_exclusive()
        items = list(items)
        if not items:
            return

        point, reset = position.after_point(self._index, len(self._vec))
        list.__setitem__(self._vec, slice(point, point), items)
        if reset:
            self._index = len(self._vec)

    def splice_before(self, items: Iterable[T]):
        self._check_exclusive()
        items = list(items)
        if not items:
            return

        list.__setitem__(self._vec, slice(self._index, self._index), items)
        self._index += len(items)

    def split_after(self) -> List[T]:
        self._check_exclusive()
        point, reset = position.after_point(self._index, len(self._vec))
        tail = self._vec[point:]
        list.__delitem__(self._vec, slice(point, None))
        if reset:
            self._index = len(self._vec)
        return tail

    def split_before(self) -> List[T]:
        self._check_exclusive()
        head = self._vec[:self._index]
        list.__delitem__(self._vec, slice(None, self._index))
        self._index = 0
        return head

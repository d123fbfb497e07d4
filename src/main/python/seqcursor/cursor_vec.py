import logging
import typing

from .cursor import BaseCursor, ReadCursor, WriteCursor
from .errors import BorrowError


T = typing.TypeVar('T')


class CursorVec(list, typing.List[T]):
    """
    A list that lends cursors over itself: either one :class:`WriteCursor` or any number
    of :class:`ReadCursor` instances, never both. While anything is lent, the list's own
    mutating methods refuse to run.
    """
    _readers: int
    _writer: bool

    def __init__(self, initial: typing.Optional[typing.Iterable] = None):
        list.__init__(self, () if initial is None else initial)
        self._readers = 0
        self._writer = False

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def is_borrowed(self) -> bool:
        return self._writer or self._readers > 0

    @property
    def is_borrowed_mut(self) -> bool:
        return self._writer

    def cursor(self, index: typing.Optional[int] = None) -> ReadCursor[T]:
        if self._writer:
            logging.warning("[CONFLICT] read cursor requested while a write cursor is open")
            raise BorrowError("CursorVec is already lent to a WriteCursor")

        cursor = ReadCursor(self, index, on_release=self._release)
        self._readers += 1
        logging.debug(f"[LEND] {cursor!r}")
        return cursor

    def cursor_front(self) -> ReadCursor[T]:
        return self.cursor(0)

    def cursor_back(self) -> ReadCursor[T]:
        return self.cursor(max(len(self) - 1, 0))

    def cursor_mut(self, index: typing.Optional[int] = None) -> WriteCursor[T]:
        if self.is_borrowed:
            logging.warning("[CONFLICT] write cursor requested while the list is lent")
            if self._writer:
                raise BorrowError("CursorVec is already lent to a WriteCursor")
            raise BorrowError(f"CursorVec is lent to {self._readers} ReadCursor(s)")

        cursor = WriteCursor(self, index, on_release=self._release)
        self._writer = True
        logging.debug(f"[LEND] {cursor!r}")
        return cursor

    def cursor_front_mut(self) -> WriteCursor[T]:
        return self.cursor_mut(0)

    def cursor_back_mut(self) -> WriteCursor[T]:
        return self.cursor_mut(max(len(self) - 1, 0))

    def _release(self, cursor: BaseCursor[T]):
        if isinstance(cursor, WriteCursor):
            self._writer = False
        else:
            self._readers -= 1
        logging.debug(f"[RELEASE] {cursor!r}")

    def _check_unborrowed(self):
        if self.is_borrowed:
            raise BorrowError("CursorVec cannot be modified while a cursor is lent")

    def append(self, item):
        self._check_unborrowed()
        list.append(self, item)

    def extend(self, items):
        self._check_unborrowed()
        list.extend(self, items)

    def insert(self, index: int, item):
        self._check_unborrowed()
        list.insert(self, index, item)

    def remove(self, x):
        self._check_unborrowed()
        list.remove(self, x)

    def pop(self, index: int = -1):
        self._check_unborrowed()
        return list.pop(self, index)

    def clear(self):
        self._check_unborrowed()
        list.clear(self)

    def reverse(self):
        self._check_unborrowed()
        list.reverse(self)

    def sort(self, *, key=None, reverse=False):
        self._check_unborrowed()
        list.sort(self, key=key, reverse=reverse)

    def __setitem__(self, index, value):
        self._check_unborrowed()
        list.__setitem__(self, index, value)

    def __delitem__(self, indexes):
        self._check_unborrowed()
        list.__delitem__(self, indexes)

    def __iadd__(self, other):
        self._check_unborrowed()
        return list.__iadd__(self, other)

    def __imul__(self, n):
        self._check_unborrowed()
        return list.__imul__(self, n)

    def copy(self):
        base = list.copy(self)
        return CursorVec(base)

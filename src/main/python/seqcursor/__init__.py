from .config import LIBRARY_VERSION as __version__
from .cursor import BaseCursor, ReadCursor, WriteCursor
from .cursor_vec import CursorVec
from .errors import BorrowError
from .position import GHOST, Valid

__all__ = ['BaseCursor', 'ReadCursor', 'WriteCursor', 'CursorVec', 'BorrowError', 'GHOST', 'Valid']

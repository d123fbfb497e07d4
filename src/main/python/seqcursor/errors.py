class BorrowError(RuntimeError):
    """Raised when a cursor would alias a sequence that is already lent incompatibly."""

    def __init__(self, message):
        super().__init__(message)

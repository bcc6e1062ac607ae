"""Exceptions raised when a conversion cannot continue."""


class ConversionError(Exception):
    """Fatal stream-level failure. ``count`` is the number of records already written."""

    def __init__(self, message: str, count: int = 0):
        super().__init__(message)
        self.count = count


class InputReadError(ConversionError):
    """Raised when the next line cannot be read from the input stream."""


class OutputWriteError(ConversionError):
    """Raised when a record segment cannot be written to the output stream."""

    def __init__(self, segment: str, message: str, count: int = 0):
        super().__init__(message, count)
        self.segment = segment

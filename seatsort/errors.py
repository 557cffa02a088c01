"""
Error Types

Exceptions raised by the seat sorting pipeline. All of them are local,
recoverable conditions: the caller re-acquires data or re-specifies the
configuration and runs again.
"""


class SeatSortError(Exception):
    """Base class for all seat sorting errors"""
    pass


class CapacityExceeded(SeatSortError):
    """Raised when a dataset would grow beyond its maximum capacity"""
    pass


class InsufficientData(SeatSortError):
    """Raised when too few raw values are available to run the pipeline"""
    pass


class InvalidConfiguration(SeatSortError):
    """Raised when layout dimensions, modes or strategy names are invalid"""
    pass

class IntervalValidationError(Exception):
    """Base exception for interval validation errors"""
    pass


class EmptyIntervalError(IntervalValidationError):
    """Raised when an interval's start is not strictly before its end"""
    pass


class AmbiguousOrderError(IntervalValidationError):
    """Raised when two boundary values cannot be totally ordered"""
    pass


class InvalidDataTypeError(IntervalValidationError):
    """Raised when data is not of expected type"""
    pass


class ErrorMessages:
    """Centralized error message definitions for consistent error handling"""
    EMPTY_INTERVAL = "Interval [{}, {}) is empty: start must be strictly before end"
    AMBIGUOUS_ORDER = "Cannot order boundary values {!r} and {!r}"
    UNSUPPORTED_BOUNDARY = "Unsupported boundary type: {}"
    UNPARSEABLE_TIMESTAMP = "Cannot parse {!r} as a timestamp"
    NO_SUCCESSOR = "Values of type {} have no successor in a {} domain"
    INVALID_INCLUSIVE = "inclusive must be one of {}, got {!r}"
    INVALID_STEP = "Only contiguous ranges (step of 1) can be converted to intervals, got step {}"
    NOT_NON_EMPTY = "Expected a NonEmptyInterval, got {}"
    NOT_INTERVAL = "Expected an Interval, got {}"
    UNKNOWN_RELATION = "Unknown relation label: {!r}"
    UNCLASSIFIED = "Unable to determine interval relationship"

class InvariantViolation(Exception):
    """
    Raised when an `Or` value is asked for the side it doesn't hold.

    This signals a programming error (e.g. calling `unwrap_this` on a `That`
    value), not a recoverable runtime condition.
    """


__all__ = [
    "InvariantViolation",
]

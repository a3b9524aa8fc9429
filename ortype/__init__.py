from .exceptions import InvariantViolation
from .or_ import Or, That, This, from_options, is_or, that_value, this_value
from .result import from_result, into_result

__all__ = [
    "InvariantViolation",
    "Or",
    "That",
    "This",
    "from_options",
    "from_result",
    "into_result",
    "is_or",
    "that_value",
    "this_value",
]

"""Conversions between `Or` and `thelabtyping`'s `Result`.

An `Or` carries no error semantics, but it has the same shape as a `Result`.
`This` lines up with `Ok` and `That` lines up with `Err`.
"""

from thelabtyping.result import Err, Ok, Result

from .or_ import Or, That, This


def into_result[_TT, _UT](value: Or[_TT, _UT]) -> Result[_TT, _UT]:
    """Convert ``This(x)`` into ``Ok(x)`` and ``That(y)`` into ``Err(y)``."""
    if isinstance(value, This):
        return Ok(value.value)
    if isinstance(value, That):
        return Err(value.value)
    raise TypeError(f"Expected This or That, got {type(value)}")


def from_result[_TT, _UT](result: Result[_TT, _UT]) -> Or[_TT, _UT]:
    """Convert ``Ok(x)`` into ``This(x)`` and ``Err(y)`` into ``That(y)``."""
    if isinstance(result, Ok):
        return This(result.ok_value)
    if isinstance(result, Err):
        return That(result.err_value)
    raise TypeError(f"Expected Ok or Err, got {type(result)}")


__all__ = [
    "from_result",
    "into_result",
]

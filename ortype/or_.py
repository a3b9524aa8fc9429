"""The `Or` type: a value holding exactly one of two alternatives.

Unlike a `Result`, neither side of an `Or` means failure. The two variants are
simply called `This` and `That`::

    >>> from ortype import This, That, this_value
    >>> this_value(5).map_this(lambda x: x + 1).unwrap_this()
    6
    >>> That("err").is_this
    False
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar, Literal, Never
import logging

from .exceptions import InvariantViolation

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

logger = logging.getLogger(__name__)


class _Or[_TT, _UT](ABC):
    __slots__ = ("_value",)
    __match_args__ = ("value",)

    #: Sort position of the variant. Every `This` sorts before every `That`.
    _rank: ClassVar[int]

    #: Key used for this variant in the tagged wire form (``{"this": ...}``).
    #: Override in a subclass to customize serialization.
    tag: ClassVar[str]

    _value: Any

    def __init__(self, value: Any) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type["_Or[_TT, _UT]"], tuple[Any]]:
        # Slot state can't be restored through __setattr__, so rebuild
        # through the constructor for pickle and copy.
        return (type(self), (self._value,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Or):
            return NotImplemented
        return self._rank == other._rank and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._rank, self._value))

    def _sort_key(self) -> tuple[int, Any]:
        return (self._rank, self._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _Or):
            return NotImplemented
        return self._sort_key() < other._sort_key()  # type:ignore[no-any-return]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, _Or):
            return NotImplemented
        return self._sort_key() <= other._sort_key()  # type:ignore[no-any-return]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, _Or):
            return NotImplemented
        return self._sort_key() > other._sort_key()  # type:ignore[no-any-return]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, _Or):
            return NotImplemented
        return self._sort_key() >= other._sort_key()  # type:ignore[no-any-return]

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: "GetCoreSchemaHandler",
    ) -> "CoreSchema":
        from .pydantic import build_variant_schema

        return build_variant_schema(cls, source_type, handler)

    @property
    def value(self) -> _TT | _UT:
        """The payload of whichever side is present."""
        return self._value  # type:ignore[no-any-return]

    @property
    def is_this(self) -> bool:
        return False

    @property
    def is_that(self) -> bool:
        return False

    @abstractmethod
    def map_this[_T2](self, fn: Callable[[_TT], _T2]) -> "_Or[_T2, _UT]":
        ...

    @abstractmethod
    def map_that[_U2](self, fn: Callable[[_UT], _U2]) -> "_Or[_TT, _U2]":
        ...

    @abstractmethod
    def swap(self) -> "_Or[_UT, _TT]":
        ...

    @abstractmethod
    def unwrap_this(self) -> _TT:
        ...

    @abstractmethod
    def unwrap_that(self) -> _UT:
        ...

    def this_or_none(self) -> _TT | None:
        return None

    def that_or_none(self) -> _UT | None:
        return None

    def to_options(self) -> tuple[_TT | None, _UT | None]:
        """
        Convert into a ``(this, that)`` pair where only one slot is populated
        and the other is ``None``.
        """
        return (self.this_or_none(), self.that_or_none())


class This[_TT](_Or[_TT, Never]):
    """The "this" side of an `Or`."""

    __slots__ = ()
    _rank = 0
    tag = "this"

    def __init__(self, value: _TT) -> None:
        super().__init__(value)

    @property
    def value(self) -> _TT:
        return self._value  # type:ignore[no-any-return]

    @property
    def is_this(self) -> Literal[True]:
        return True

    @property
    def is_that(self) -> Literal[False]:
        return False

    def map_this[_T2](self, fn: Callable[[_TT], _T2]) -> "This[_T2]":
        return This(fn(self._value))

    def map_that(self, fn: Callable[[Any], Any]) -> "This[_TT]":
        return self

    def swap(self) -> "That[_TT]":
        return That(self._value)

    def unwrap_this(self) -> _TT:
        return self._value  # type:ignore[no-any-return]

    def unwrap_that(self) -> Never:
        logger.debug("unwrap_that() called on %r", self)
        raise InvariantViolation(f"Called unwrap_that() on {self!r}")

    def this_or_none(self) -> _TT:
        return self._value  # type:ignore[no-any-return]


class That[_UT](_Or[Never, _UT]):
    """The "that" side of an `Or`."""

    __slots__ = ()
    _rank = 1
    tag = "that"

    def __init__(self, value: _UT) -> None:
        super().__init__(value)

    @property
    def value(self) -> _UT:
        return self._value  # type:ignore[no-any-return]

    @property
    def is_this(self) -> Literal[False]:
        return False

    @property
    def is_that(self) -> Literal[True]:
        return True

    def map_this(self, fn: Callable[[Any], Any]) -> "That[_UT]":
        return self

    def map_that[_U2](self, fn: Callable[[_UT], _U2]) -> "That[_U2]":
        return That(fn(self._value))

    def swap(self) -> "This[_UT]":
        return This(self._value)

    def unwrap_this(self) -> Never:
        logger.debug("unwrap_this() called on %r", self)
        raise InvariantViolation(f"Called unwrap_this() on {self!r}")

    def unwrap_that(self) -> _UT:
        return self._value  # type:ignore[no-any-return]

    def that_or_none(self) -> _UT:
        return self._value  # type:ignore[no-any-return]


type Or[_TT, _UT] = This[_TT] | That[_UT]


def this_value[_TT](value: _TT) -> This[_TT]:
    """Build the "this" side of an `Or`."""
    return This(value)


def that_value[_UT](value: _UT) -> That[_UT]:
    """Build the "that" side of an `Or`."""
    return That(value)


def from_options[_TT, _UT](this: _TT | None, that: _UT | None) -> Or[_TT, _UT]:
    """
    Rebuild an `Or` from a ``(this, that)`` pair as produced by
    `_Or.to_options`. Exactly one of the two must be non-``None``.
    """
    if this is not None and that is None:
        return This(this)
    if this is None and that is not None:
        return That(that)
    raise InvariantViolation(
        f"Expected exactly one populated side, got this={this!r}, that={that!r}"
    )


def is_or(value: object) -> bool:
    """Return ``True`` if *value* is a `This` or a `That`."""
    return isinstance(value, _Or)


__all__ = [
    "Or",
    "That",
    "This",
    "from_options",
    "is_or",
    "that_value",
    "this_value",
]

"""Pydantic support for `Or` values.

`This[T]`, `That[U]` and `Or[T, U]` can be used directly as field types on a
pydantic model. On the wire an `Or` is an object with exactly one key, the tag
of the variant it holds::

    {"this": 5}
    {"that": "some text"}
"""

from typing import TYPE_CHECKING, Any, get_args
import logging

from pydantic_core import PydanticSerializationUnexpectedValue, core_schema
from thelabtyping.result import Err, Ok, Result
import pydantic
import pydantic_core

if TYPE_CHECKING:
    from .or_ import _Or

logger = logging.getLogger(__name__)


def build_variant_schema(
    cls: "type[_Or[Any, Any]]",
    source_type: Any,
    handler: pydantic.GetCoreSchemaHandler,
) -> core_schema.CoreSchema:
    """
    Build the core schema for one variant class (`This` or `That`).

    The payload type comes from the parametrization of *source_type*, e.g.
    ``int`` for ``This[int]``. An unparametrized variant accepts any payload.

    Validated values are always instances of *cls*, the class named in the
    field annotation, so they carry its tag. An instance of a subclass with a
    different tag is rebuilt as *cls*.
    """
    args = get_args(source_type)
    if args:
        payload_schema = handler.generate_schema(args[0])
    else:
        payload_schema = core_schema.any_schema()

    tag = cls.tag
    tagged_schema = core_schema.typed_dict_schema(
        {
            tag: core_schema.typed_dict_field(payload_schema, required=True),
        },
        extra_behavior="forbid",
    )
    # {"this": 5} -> This(5)
    from_tagged = core_schema.chain_schema(
        [
            tagged_schema,
            core_schema.no_info_plain_validator_function(lambda data: cls(data[tag])),
        ]
    )
    # This(5) -> This(5), re-validating the payload on the way through
    from_instance = core_schema.chain_schema(
        [
            core_schema.is_instance_schema(cls),
            core_schema.no_info_plain_validator_function(lambda inst: inst.value),
            payload_schema,
            core_schema.no_info_plain_validator_function(cls),
        ]
    )

    def serialize(value: Any) -> dict[str, Any]:
        # Lets a union serializer move on to the other variant.
        if not isinstance(value, cls):
            raise PydanticSerializationUnexpectedValue(
                f"Expected {cls.__name__}, got {type(value)}"
            )
        return {tag: value.value}

    return core_schema.json_or_python_schema(
        json_schema=from_tagged,
        python_schema=core_schema.union_schema([from_instance, from_tagged]),
        serialization=core_schema.plain_serializer_function_ser_schema(
            serialize,
            return_schema=core_schema.typed_dict_schema(
                {
                    tag: core_schema.typed_dict_field(payload_schema, required=True),
                }
            ),
        ),
    )


def validate_or[T](
    adapter: pydantic.TypeAdapter[T],
    value: str | bytes | Any,
) -> Result[T, pydantic_core.ValidationError]:
    """
    Validate *value* with *adapter*, returning the outcome as a `Result`
    instead of raising. Strings and bytes are parsed as JSON.
    """
    try:
        if isinstance(value, str) or isinstance(value, bytes):
            return Ok(adapter.validate_json(value))
        return Ok(adapter.validate_python(value))
    except pydantic_core.ValidationError as e:
        logger.debug("Validation of %r failed: %s", value, e)
        return Err(e)


__all__ = [
    "build_variant_schema",
    "validate_or",
]

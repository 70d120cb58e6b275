"""Avro emitter - record schemas rendered as indented JSON.

The schema is first built as a small typed tree (AvroRecord, AvroArray and
primitive type names) and converted to ordered dicts only for printing.
"""

from dataclasses import dataclass
from typing import Any, Union

from protoschema.config import GeneratorConfig
from protoschema.descriptors.base import MessageDescriptor
from protoschema.descriptors.index import DescriptorIndex
from protoschema.emitters.base import run_emitter
from protoschema.emitters.printer import render
from protoschema.schemas.resolver import (
    ArrayType,
    FieldTypeToken,
    PrimitiveType,
    ResolvedField,
    StructType,
)
from protoschema.schemas.types import Dialect, NestingPolicy


@dataclass(frozen=True)
class AvroArray:
    items: "AvroType"

    def to_dict(self) -> dict[str, Any]:
        return {"type": "array", "items": _type_to_json(self.items)}


@dataclass(frozen=True)
class AvroField:
    name: str
    type: "AvroType"

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": _type_to_json(self.type)}


@dataclass(frozen=True)
class AvroRecord:
    name: str
    fields: tuple[AvroField, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "record",
            "name": self.name,
            "fields": [f.to_dict() for f in self.fields],
        }


# A primitive type name, an inline record or an array
AvroType = Union[str, AvroRecord, AvroArray]


def _type_to_json(avro_type: AvroType) -> Any:
    if isinstance(avro_type, str):
        return avro_type
    return avro_type.to_dict()


def to_avro_type(token: FieldTypeToken) -> AvroType:
    """Convert a resolved type into its Avro form."""
    if isinstance(token, PrimitiveType):
        return token.name
    if isinstance(token, ArrayType):
        return AvroArray(items=to_avro_type(token.items))
    if isinstance(token, StructType):
        return AvroRecord(name=token.name, fields=to_avro_fields(list(token.fields)))
    raise TypeError(f"Unknown type token: {token!r}")


def to_avro_fields(fields: list[ResolvedField]) -> tuple[AvroField, ...]:
    return tuple(AvroField(name=f.name, type=to_avro_type(f.type)) for f in fields)


def build_avro_schema(fields: list[ResolvedField], message: MessageDescriptor) -> AvroRecord:
    """Build the Avro record for the resolved fields of a message.

    The top-level record is named after the message's simple name.
    """
    return AvroRecord(name=message.name, fields=to_avro_fields(fields))


def render_avro(fields: list[ResolvedField], message: MessageDescriptor, config: GeneratorConfig) -> str:
    return render(build_avro_schema(fields, message).to_dict())


def emit_avro(
    message: MessageDescriptor,
    index: DescriptorIndex,
    policy: NestingPolicy | str | None = None,
    config: GeneratorConfig | None = None,
    message_name: str | None = None,
) -> str:
    """Generate the Avro schema text for a message."""
    return run_emitter(render_avro, Dialect.AVRO, message, index, policy, config, message_name).text

"""Base classes for descriptor representation.

Provides a small, immutable model of a compiled protobuf descriptor set. Only
the parts needed for schema generation are kept: files, messages (with their
nested messages) and fields.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class FieldType(IntEnum):
    """Protobuf field type codes, as used by FieldDescriptorProto.Type."""

    DOUBLE = 1
    FLOAT = 2
    INT64 = 3
    UINT64 = 4
    INT32 = 5
    FIXED64 = 6
    FIXED32 = 7
    BOOL = 8
    STRING = 9
    GROUP = 10
    MESSAGE = 11
    BYTES = 12
    UINT32 = 13
    ENUM = 14
    SFIXED32 = 15
    SFIXED64 = 16
    SINT32 = 17
    SINT64 = 18


class FieldLabel(IntEnum):
    """Protobuf field labels, as used by FieldDescriptorProto.Label."""

    OPTIONAL = 1
    REQUIRED = 2
    REPEATED = 3


class FieldDescriptor(BaseModel):
    """A single field of a message.

    The type is kept as a raw integer code so that codes outside FieldType
    survive loading and can degrade to a string type later.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name")
    number: int = Field(default=0, description="Field number")
    type: int = Field(..., description="Field type code (FieldType)")
    label: int = Field(default=FieldLabel.OPTIONAL, description="Field label code (FieldLabel)")
    type_name: str = Field(default="", description="Referenced type name for message/enum fields")

    @property
    def repeated(self) -> bool:
        return self.label == FieldLabel.REPEATED

    @property
    def is_message(self) -> bool:
        return self.type == FieldType.MESSAGE


class MessageDescriptor(BaseModel):
    """A message with its ordered fields and nested message types."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Simple message name")
    fields: tuple[FieldDescriptor, ...] = Field(default=(), description="Fields in declaration order")
    nested_types: tuple["MessageDescriptor", ...] = Field(default=(), description="Nested message types")

    def get_field(self, name: str) -> FieldDescriptor | None:
        """Get a field by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None


class FileDescriptor(BaseModel):
    """A .proto file: a package and its top-level messages."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Source .proto file name")
    package: str = Field(default="", description="Protobuf package")
    message_types: tuple[MessageDescriptor, ...] = Field(default=(), description="Top-level messages")


class DescriptorSet(BaseModel):
    """A set of files, as produced by protoc --descriptor_set_out."""

    model_config = ConfigDict(frozen=True)

    files: tuple[FileDescriptor, ...] = Field(default=(), description="Files in the set")

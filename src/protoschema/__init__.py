"""
protoschema - Generate table schemas from protobuf descriptor sets.

Translates a protobuf message (loaded from a compiled FileDescriptorSet) into a
Hive REPLACE COLUMNS statement, an Avro record schema, or an Iceberg CREATE
TABLE statement, with configurable handling of nested messages.
"""

__version__ = "0.1.0"

from protoschema.descriptors.base import DescriptorSet, FieldDescriptor, MessageDescriptor
from protoschema.descriptors.index import DescriptorIndex
from protoschema.schemas.types import Dialect, NestingPolicy
from protoschema.engine.generator import SchemaGenerator

__all__ = [
    "DescriptorSet",
    "FieldDescriptor",
    "MessageDescriptor",
    "DescriptorIndex",
    "Dialect",
    "NestingPolicy",
    "SchemaGenerator",
]

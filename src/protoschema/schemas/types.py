"""Scalar type mapping from protobuf field types to target dialect types."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from protoschema.errors import UnknownDialectError


class Dialect(str, Enum):
    """Supported output schema dialects."""

    HIVE = "hive"
    AVRO = "avro"
    ICEBERG = "iceberg"

    @classmethod
    def parse(cls, name: "Dialect | str") -> "Dialect":
        """Parse a dialect name case-insensitively.

        Raises:
            UnknownDialectError: If the name is not a known dialect
        """
        if isinstance(name, Dialect):
            return name
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnknownDialectError(name) from None


class NestingPolicy(str, Enum):
    """How message-typed fields are represented in the output."""

    # Message fields become a single opaque string column
    FLATTEN_DISABLED = "flatten-disabled"
    # Message fields are replaced by their own fields, prefixed with the parent name
    FLATTEN_INTO_PARENT = "flatten-into-parent"
    # Message fields become a nested struct / record type
    NEST_AS_STRUCT = "nest-as-struct"


# Type used for unmapped field types and for message fields that are not expanded
PLACEHOLDER_TYPE = "string"

HIVE_TYPES: Mapping[int, str] = MappingProxyType({
    1: "double",     # double
    2: "float",      # float
    3: "bigint",     # int64
    4: "bigint",     # uint64
    5: "int",        # int32
    6: "bigint",     # fixed64
    7: "int",        # fixed32
    8: "boolean",    # bool
    9: "string",     # string
    12: "binary",    # bytes
    13: "int",       # uint32
    15: "int",       # sfixed32
    16: "bigint",    # sfixed64
    17: "int",       # sint32
    18: "bigint",    # sint64
})

AVRO_TYPES: Mapping[int, str] = MappingProxyType({
    1: "double",
    2: "float",
    3: "long",
    4: "long",
    5: "int",
    6: "long",
    7: "int",
    8: "boolean",
    9: "string",
    12: "bytes",
    13: "int",
    15: "int",
    16: "long",
    17: "int",
    18: "long",
})

# Iceberg shares Hive's primitive names
ICEBERG_TYPES: Mapping[int, str] = MappingProxyType(dict(HIVE_TYPES))

TYPE_TABLES: Mapping[Dialect, Mapping[int, str]] = MappingProxyType({
    Dialect.HIVE: HIVE_TYPES,
    Dialect.AVRO: AVRO_TYPES,
    Dialect.ICEBERG: ICEBERG_TYPES,
})

# Joiner between parent and child names when flattening nested messages
FLATTEN_SEPARATORS: Mapping[Dialect, str] = MappingProxyType({
    Dialect.HIVE: ".",
    Dialect.AVRO: "_",
    Dialect.ICEBERG: ".",
})


def map_scalar(field_type: int, dialect: Dialect | str) -> str:
    """Map a protobuf field type code to a dialect primitive type.

    Args:
        field_type: Protobuf field type code
        dialect: Target dialect

    Returns:
        The dialect type name, or the placeholder type for unmapped codes
        (enums, groups, messages and unknown codes)
    """
    table = TYPE_TABLES[Dialect.parse(dialect)]
    return table.get(field_type, PLACEHOLDER_TYPE)

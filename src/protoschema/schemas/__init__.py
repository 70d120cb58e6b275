"""Schema core - scalar type mapping and the recursive field resolver."""

from protoschema.schemas.types import (
    AVRO_TYPES,
    HIVE_TYPES,
    ICEBERG_TYPES,
    PLACEHOLDER_TYPE,
    Dialect,
    NestingPolicy,
    map_scalar,
)
from protoschema.schemas.resolver import (
    ArrayType,
    FieldResolver,
    FieldTypeToken,
    IssueKind,
    PrimitiveType,
    ResolutionIssue,
    ResolvedField,
    StructType,
)

__all__ = [
    "AVRO_TYPES",
    "HIVE_TYPES",
    "ICEBERG_TYPES",
    "PLACEHOLDER_TYPE",
    "Dialect",
    "NestingPolicy",
    "map_scalar",
    "ArrayType",
    "FieldResolver",
    "FieldTypeToken",
    "IssueKind",
    "PrimitiveType",
    "ResolutionIssue",
    "ResolvedField",
    "StructType",
]

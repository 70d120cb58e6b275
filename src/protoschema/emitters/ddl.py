"""Type and column formatting shared by the Hive and Iceberg emitters."""

from protoschema.schemas.resolver import (
    ArrayType,
    FieldTypeToken,
    PrimitiveType,
    ResolvedField,
    StructType,
)


def format_type(token: FieldTypeToken) -> str:
    """Format a resolved type as Hive/Iceberg type text.

    Structs render as ``struct<a:int,b:string>`` with no spaces and arrays
    as ``array<T>``.
    """
    if isinstance(token, PrimitiveType):
        return token.name
    if isinstance(token, ArrayType):
        return f"array<{format_type(token.items)}>"
    if isinstance(token, StructType):
        members = ",".join(f"{f.name}:{format_type(f.type)}" for f in token.fields)
        return f"struct<{members}>"
    raise TypeError(f"Unknown type token: {token!r}")


def format_column(field: ResolvedField) -> str:
    return f"{field.name} {format_type(field.type)}"


def format_column_block(fields: list[ResolvedField]) -> str:
    """Format one indented column per line, comma separated."""
    lines = [f"  {format_column(f)}" for f in fields]
    return ",\n".join(lines)

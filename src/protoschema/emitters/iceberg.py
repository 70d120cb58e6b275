"""Iceberg emitter - CREATE TABLE ... STORED AS ICEBERG statements."""

from protoschema.config import GeneratorConfig
from protoschema.descriptors.base import MessageDescriptor
from protoschema.descriptors.index import DescriptorIndex
from protoschema.emitters.base import run_emitter
from protoschema.emitters.ddl import format_column_block
from protoschema.schemas.resolver import ResolvedField
from protoschema.schemas.types import Dialect, NestingPolicy


def render_iceberg(fields: list[ResolvedField], message: MessageDescriptor, config: GeneratorConfig) -> str:
    block = format_column_block(fields)
    body = f"{block}\n" if block else ""
    return f"CREATE TABLE {config.table_name} (\n{body})\nSTORED AS ICEBERG;"


def emit_iceberg(
    message: MessageDescriptor,
    index: DescriptorIndex,
    policy: NestingPolicy | str | None = None,
    config: GeneratorConfig | None = None,
    message_name: str | None = None,
) -> str:
    """Generate an Iceberg CREATE TABLE statement for a message."""
    return run_emitter(render_iceberg, Dialect.ICEBERG, message, index, policy, config, message_name).text

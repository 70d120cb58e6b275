"""Hive emitter - ALTER TABLE ... REPLACE COLUMNS statements."""

from protoschema.config import GeneratorConfig
from protoschema.descriptors.base import MessageDescriptor
from protoschema.descriptors.index import DescriptorIndex
from protoschema.emitters.base import run_emitter
from protoschema.emitters.ddl import format_column_block
from protoschema.schemas.resolver import ResolvedField
from protoschema.schemas.types import Dialect, NestingPolicy


def render_hive(fields: list[ResolvedField], message: MessageDescriptor, config: GeneratorConfig) -> str:
    block = format_column_block(fields)
    body = f"{block}\n" if block else ""
    return f"ALTER TABLE {config.table_name} REPLACE COLUMNS (\n{body});"


def emit_hive(
    message: MessageDescriptor,
    index: DescriptorIndex,
    policy: NestingPolicy | str | None = None,
    config: GeneratorConfig | None = None,
    message_name: str | None = None,
) -> str:
    """Generate a Hive REPLACE COLUMNS statement for a message.

    Args:
        message: The message to convert
        index: Index used to resolve message-typed fields
        policy: Nesting policy (defaults to the config's policy)
        config: Generator settings
        message_name: Full name of the message, for self-reference detection

    Returns:
        The DDL text
    """
    return run_emitter(render_hive, Dialect.HIVE, message, index, policy, config, message_name).text

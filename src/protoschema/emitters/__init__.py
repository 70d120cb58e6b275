"""Dialect emitters - Hive, Avro and Iceberg schema text.

Each dialect has a renderer of (fields, message, config); the RENDERERS table
maps a Dialect to its renderer and emit_schema() resolves a message and runs
the renderer over it.
"""

from protoschema.config import GeneratorConfig
from protoschema.descriptors.base import MessageDescriptor
from protoschema.descriptors.index import DescriptorIndex
from protoschema.emitters.avro import (
    AvroArray,
    AvroField,
    AvroRecord,
    build_avro_schema,
    emit_avro,
    render_avro,
)
from protoschema.emitters.base import Emission, Renderer, build_resolver, run_emitter
from protoschema.emitters.hive import emit_hive, render_hive
from protoschema.emitters.iceberg import emit_iceberg, render_iceberg
from protoschema.emitters.printer import render
from protoschema.schemas.types import Dialect, NestingPolicy

RENDERERS: dict[Dialect, Renderer] = {
    Dialect.HIVE: render_hive,
    Dialect.AVRO: render_avro,
    Dialect.ICEBERG: render_iceberg,
}


def emit_schema(
    dialect: Dialect | str,
    message: MessageDescriptor,
    index: DescriptorIndex,
    policy: NestingPolicy | str | None = None,
    config: GeneratorConfig | None = None,
    message_name: str | None = None,
) -> Emission:
    """Resolve a message and render it in the given dialect.

    Raises:
        UnknownDialectError: If the dialect name is not recognized
    """
    dialect = Dialect.parse(dialect)
    return run_emitter(RENDERERS[dialect], dialect, message, index, policy, config, message_name)


def emit(
    dialect: Dialect | str,
    message: MessageDescriptor,
    index: DescriptorIndex,
    policy: NestingPolicy | str | None = None,
    config: GeneratorConfig | None = None,
    message_name: str | None = None,
) -> str:
    """Generate schema text for a message in the given dialect."""
    return emit_schema(dialect, message, index, policy, config, message_name).text


__all__ = [
    "AvroArray",
    "AvroField",
    "AvroRecord",
    "Emission",
    "RENDERERS",
    "Renderer",
    "build_avro_schema",
    "build_resolver",
    "emit",
    "emit_avro",
    "emit_hive",
    "emit_iceberg",
    "emit_schema",
    "render",
    "render_avro",
    "render_hive",
    "render_iceberg",
]

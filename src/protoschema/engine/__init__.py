"""Engine module - message lookup and dialect dispatch."""

from protoschema.engine.generator import GenerationResult, SchemaGenerator

__all__ = [
    "GenerationResult",
    "SchemaGenerator",
]

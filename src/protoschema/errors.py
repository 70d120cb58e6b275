"""Exception types raised by protoschema.

The schema core never raises on partial input: unmapped types and unresolved
message references degrade to a placeholder type. These errors cover the
caller side only (loading, lookup, dialect selection, configuration).
"""


class ProtoSchemaError(Exception):
    """Base class for protoschema errors."""


class DescriptorLoadError(ProtoSchemaError):
    """Raised when a descriptor set file cannot be read or parsed."""


class MessageNotFoundError(ProtoSchemaError, ValueError):
    """Raised when the target message is not present in the descriptor index."""

    def __init__(self, message_name: str, available: list[str] | None = None):
        self.message_name = message_name
        self.available = available or []
        text = f"Message not found: {message_name}"
        if self.available:
            text += f". Available: {', '.join(self.available)}"
        super().__init__(text)


class UnknownDialectError(ProtoSchemaError, ValueError):
    """Raised when an output format name does not match a known dialect."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown format: {name}")


class ConfigError(ProtoSchemaError):
    """Raised when a configuration file is missing or invalid."""

"""Schema Generator - looks up a message and runs a dialect emitter over it.

The generator owns the descriptor index for a run. It is the layer that turns
a fully-qualified message name into schema text and reports lookup failures;
the emitters below it never fail on partial input.
"""

import logging
from pathlib import Path
from typing import Any

from protoschema.config import GeneratorConfig
from protoschema.descriptors.base import DescriptorSet, MessageDescriptor
from protoschema.descriptors.index import DescriptorIndex, normalize_type_name
from protoschema.descriptors.loader import load_descriptor_set
from protoschema.emitters import emit_schema
from protoschema.errors import MessageNotFoundError
from protoschema.schemas.resolver import ResolutionIssue, ResolvedField
from protoschema.schemas.types import Dialect, NestingPolicy

logger = logging.getLogger(__name__)


class GenerationResult:
    """Result of a single schema generation."""

    def __init__(
        self,
        message_name: str,
        dialect: Dialect,
        policy: NestingPolicy,
        text: str,
        fields: list[ResolvedField],
        issues: list[ResolutionIssue],
    ):
        self.message_name = message_name
        self.dialect = dialect
        self.policy = policy
        self.text = text
        self.fields = fields
        self.issues = issues

    @property
    def field_count(self) -> int:
        return len(self.fields)

    @property
    def degraded(self) -> bool:
        return bool(self.issues)

    def summary(self) -> dict[str, Any]:
        return {
            "message": self.message_name,
            "dialect": self.dialect.value,
            "policy": self.policy.value,
            "field_count": self.field_count,
            "issues": [i.to_dict() for i in self.issues],
        }


class SchemaGenerator:
    """Generates schemas for messages of one descriptor set.

    The index is built once on construction and shared, read-only, by every
    generate() call.
    """

    def __init__(
        self,
        descriptor_set: DescriptorSet,
        config: GeneratorConfig | None = None,
    ):
        self.descriptor_set = descriptor_set
        self.config = config or GeneratorConfig()
        self.index = DescriptorIndex.build(descriptor_set)
        logger.debug("Indexed %d message(s)", len(self.index))

    @classmethod
    def from_file(
        cls,
        path: Path | str,
        config: GeneratorConfig | None = None,
    ) -> "SchemaGenerator":
        """Create a generator from a descriptor set file.

        Raises:
            DescriptorLoadError: If the file cannot be loaded
        """
        return cls(load_descriptor_set(path), config)

    def list_messages(self) -> list[str]:
        return self.index.list_messages()

    def get_message(self, message_name: str) -> MessageDescriptor:
        """Look up a message by fully-qualified name.

        Raises:
            MessageNotFoundError: If the message is not in the descriptor set
        """
        message = self.index.get(message_name)
        if message is None:
            raise MessageNotFoundError(message_name, self.list_messages())
        return message

    def generate(
        self,
        message_name: str,
        dialect: Dialect | str,
        policy: NestingPolicy | str | None = None,
    ) -> GenerationResult:
        """Generate the schema of a message in one dialect.

        Args:
            message_name: Fully-qualified message name, e.g. ``analytics.UserEvent``
            dialect: Output dialect
            policy: Nesting policy (defaults to the configured policy)

        Returns:
            GenerationResult with the schema text and any degraded fields

        Raises:
            UnknownDialectError: If the dialect is not recognized
            MessageNotFoundError: If the message is not in the descriptor set
        """
        dialect = Dialect.parse(dialect)
        message = self.get_message(message_name)

        emission = emit_schema(dialect, message, self.index, policy, self.config, message_name)

        return GenerationResult(
            message_name=normalize_type_name(message_name),
            dialect=dialect,
            policy=emission.policy,
            text=emission.text,
            fields=emission.fields,
            issues=list(emission.issues),
        )

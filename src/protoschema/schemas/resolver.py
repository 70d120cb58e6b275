"""Field Resolver - turns a message descriptor into an ordered list of typed fields.

The resolver walks a message's fields in declaration order and produces one
ResolvedField per output column. Message-typed fields are handled according to
the NestingPolicy:

- FLATTEN_DISABLED: the field becomes a single placeholder-typed column
- FLATTEN_INTO_PARENT: the field is replaced by the fields of the referenced
  message, each prefixed with the parent field name
- NEST_AS_STRUCT: the field's type becomes a StructType holding the fields of
  the referenced message

Repeated fields are wrapped in an ArrayType after nested resolution, so a
repeated message field nests as array<struct<...>>.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from protoschema.descriptors.base import FieldDescriptor, MessageDescriptor
from protoschema.descriptors.index import DescriptorIndex, normalize_type_name, simple_name
from protoschema.schemas.types import (
    FLATTEN_SEPARATORS,
    PLACEHOLDER_TYPE,
    Dialect,
    NestingPolicy,
    map_scalar,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 32


@dataclass(frozen=True)
class PrimitiveType:
    """A dialect primitive type name such as ``bigint`` or ``long``."""

    name: str


@dataclass(frozen=True)
class StructType:
    """A nested message rendered as a struct (Hive/Iceberg) or record (Avro)."""

    name: str
    fields: tuple["ResolvedField", ...] = ()


@dataclass(frozen=True)
class ArrayType:
    """A repeated value."""

    items: "FieldTypeToken"


FieldTypeToken = Union[PrimitiveType, StructType, ArrayType]


@dataclass(frozen=True)
class ResolvedField:
    """An output column: a (possibly prefixed) name and its type."""

    name: str
    type: FieldTypeToken


class IssueKind(str, Enum):
    """Reasons a message field was degraded to the placeholder type."""

    UNRESOLVED_REFERENCE = "unresolved_reference"
    CYCLE = "cycle"
    DEPTH_LIMIT = "depth_limit"


@dataclass
class ResolutionIssue:
    """A message field that could not be expanded."""

    kind: IssueKind
    path: str
    type_name: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "path": self.path,
            "type_name": self.type_name,
            "message": self.message,
        }


@dataclass
class FieldResolver:
    """Resolves message fields for one dialect under one nesting policy.

    The index is only read. Degradations are collected in ``issues`` and
    logged as warnings; resolution itself never fails. ``issues`` holds the
    degradations of the most recent resolve() call only.
    """

    index: DescriptorIndex
    dialect: Dialect
    policy: NestingPolicy
    separator: str | None = None
    max_depth: int = DEFAULT_MAX_DEPTH
    placeholder: str = PLACEHOLDER_TYPE
    issues: list[ResolutionIssue] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.dialect = Dialect.parse(self.dialect)
        self.policy = NestingPolicy(self.policy)
        if self.separator is None:
            self.separator = FLATTEN_SEPARATORS[self.dialect]

    def resolve(
        self,
        message: MessageDescriptor,
        prefix: str = "",
        message_name: str | None = None,
    ) -> list[ResolvedField]:
        """Resolve the fields of a message.

        Args:
            message: The message to resolve
            prefix: Name prefix for every emitted field (used when flattening)
            message_name: Full name of the message, used to detect references
                back to it

        Returns:
            Resolved fields in declaration order
        """
        self.issues = []
        active = (normalize_type_name(message_name),) if message_name else ()
        return self._resolve_message(message, prefix, active, "", 0)

    def _resolve_message(
        self,
        message: MessageDescriptor,
        prefix: str,
        active: tuple[str, ...],
        path: str,
        depth: int,
    ) -> list[ResolvedField]:
        resolved: list[ResolvedField] = []

        for proto_field in message.fields:
            name = f"{prefix}{self.separator}{proto_field.name}" if prefix else proto_field.name
            field_path = f"{path}.{proto_field.name}" if path else proto_field.name

            if not proto_field.is_message:
                token: FieldTypeToken = PrimitiveType(map_scalar(proto_field.type, self.dialect))
                resolved.append(self._wrap(name, token, proto_field))
                continue

            type_name = normalize_type_name(proto_field.type_name)
            nested = self._expandable(type_name, active, field_path, depth)

            if nested is None:
                resolved.append(self._wrap(name, PrimitiveType(self.placeholder), proto_field))
            elif self.policy == NestingPolicy.NEST_AS_STRUCT:
                children = self._resolve_message(nested, "", active + (type_name,), field_path, depth + 1)
                token = StructType(name=simple_name(type_name), fields=tuple(children))
                resolved.append(self._wrap(name, token, proto_field))
            else:
                # The parent contributes no column and its children take its place
                # unchanged, even when the parent is repeated
                resolved.extend(
                    self._resolve_message(nested, name, active + (type_name,), field_path, depth + 1)
                )

        return resolved

    def _expandable(
        self,
        type_name: str,
        active: tuple[str, ...],
        path: str,
        depth: int,
    ) -> MessageDescriptor | None:
        """Return the referenced message if it should be expanded, else None."""
        nested = self.index.get(type_name)

        if nested is None:
            self._record(IssueKind.UNRESOLVED_REFERENCE, path, type_name,
                         f"Message type '{type_name}' not found in descriptor set")
            return None

        if self.policy == NestingPolicy.FLATTEN_DISABLED:
            return None

        if type_name in active:
            self._record(IssueKind.CYCLE, path, type_name,
                         f"Message type '{type_name}' references itself")
            return None

        if depth >= self.max_depth:
            self._record(IssueKind.DEPTH_LIMIT, path, type_name,
                         f"Nesting deeper than {self.max_depth} levels")
            return None

        return nested

    def _wrap(self, name: str, token: FieldTypeToken, proto_field: FieldDescriptor) -> ResolvedField:
        if proto_field.repeated:
            token = ArrayType(items=token)
        return ResolvedField(name=name, type=token)

    def _record(self, kind: IssueKind, path: str, type_name: str, message: str) -> None:
        self.issues.append(ResolutionIssue(kind=kind, path=path, type_name=type_name, message=message))
        logger.warning("%s: %s; using '%s'", path, message, self.placeholder)

"""Helpers shared by the dialect emitters."""

from dataclasses import dataclass
from typing import Callable

from protoschema.config import GeneratorConfig
from protoschema.descriptors.base import MessageDescriptor
from protoschema.descriptors.index import DescriptorIndex
from protoschema.schemas.resolver import FieldResolver, ResolutionIssue, ResolvedField
from protoschema.schemas.types import Dialect, NestingPolicy

# Turns the resolved fields of a message into schema text
Renderer = Callable[[list[ResolvedField], MessageDescriptor, GeneratorConfig], str]


@dataclass(frozen=True)
class Emission:
    """Schema text together with the fields and degradations behind it."""

    text: str
    fields: list[ResolvedField]
    policy: NestingPolicy
    issues: tuple[ResolutionIssue, ...] = ()


def build_resolver(
    index: DescriptorIndex,
    dialect: Dialect,
    policy: NestingPolicy | str | None = None,
    config: GeneratorConfig | None = None,
) -> FieldResolver:
    """Create a FieldResolver for a dialect from a config.

    An explicit policy takes precedence over the config's policy.
    """
    config = config or GeneratorConfig()
    return FieldResolver(
        index=index,
        dialect=dialect,
        policy=NestingPolicy(policy) if policy is not None else config.policy,
        separator=config.flatten_separator,
        max_depth=config.max_depth,
        placeholder=config.placeholder_type,
    )


def run_emitter(
    renderer: Renderer,
    dialect: Dialect,
    message: MessageDescriptor,
    index: DescriptorIndex,
    policy: NestingPolicy | str | None = None,
    config: GeneratorConfig | None = None,
    message_name: str | None = None,
) -> Emission:
    """Resolve a message for a dialect and render it.

    Args:
        renderer: Renderer for the dialect
        dialect: Dialect the fields are resolved for
        message: The message to convert
        index: Index used to resolve message-typed fields
        policy: Nesting policy (defaults to the config's policy)
        config: Generator settings
        message_name: Full name of the message, for self-reference detection

    Returns:
        Emission with the text, the resolved fields and any degradations
    """
    config = config or GeneratorConfig()
    resolver = build_resolver(index, dialect, policy, config)
    fields = resolver.resolve(message, message_name=message_name)
    return Emission(
        text=renderer(fields, message, config),
        fields=fields,
        policy=resolver.policy,
        issues=tuple(resolver.issues),
    )

"""Descriptor Index for looking up messages by fully-qualified name."""

from typing import Iterator

from protoschema.descriptors.base import DescriptorSet, MessageDescriptor


def normalize_type_name(type_name: str) -> str:
    """Strip the leading dot of an absolute protobuf type reference.

    ``.analytics.Location`` becomes ``analytics.Location``.
    """
    return type_name[1:] if type_name.startswith(".") else type_name


def simple_name(full_name: str) -> str:
    """Return the last segment of a dotted name."""
    return full_name.rsplit(".", 1)[-1]


class DescriptorIndex:
    """Read-only lookup of every message in a descriptor set.

    Top-level messages are keyed as ``package.Name`` (or ``Name`` when the file
    has no package) and nested messages as ``Parent.Nested`` under their
    parent's full name, to any depth.
    """

    def __init__(self, messages: dict[str, MessageDescriptor] | None = None):
        self._messages: dict[str, MessageDescriptor] = dict(messages or {})

    @classmethod
    def build(cls, descriptor_set: DescriptorSet) -> "DescriptorIndex":
        """Build the index from every file in a descriptor set.

        Args:
            descriptor_set: The loaded descriptor set

        Returns:
            A populated DescriptorIndex
        """
        messages: dict[str, MessageDescriptor] = {}
        for file in descriptor_set.files:
            for message in file.message_types:
                full_name = f"{file.package}.{message.name}" if file.package else message.name
                messages[full_name] = message
                cls._collect_nested(full_name, message, messages)
        return cls(messages)

    @classmethod
    def _collect_nested(
        cls,
        parent_name: str,
        message: MessageDescriptor,
        messages: dict[str, MessageDescriptor],
    ) -> None:
        for nested in message.nested_types:
            nested_name = f"{parent_name}.{nested.name}"
            messages[nested_name] = nested
            cls._collect_nested(nested_name, nested, messages)

    def get(self, name: str) -> MessageDescriptor | None:
        """Get a message by full name; leading-dot names are accepted.

        Returns:
            The message or None if not found
        """
        return self._messages.get(normalize_type_name(name))

    def list_messages(self) -> list[str]:
        """List all indexed message names in registration order."""
        return list(self._messages.keys())

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return normalize_type_name(name) in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

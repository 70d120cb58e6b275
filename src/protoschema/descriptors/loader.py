"""Descriptor Set Loader for reading compiled protobuf descriptor sets."""

import logging
from pathlib import Path

from google.protobuf import descriptor_pb2
from google.protobuf.message import DecodeError

from protoschema.descriptors.base import (
    DescriptorSet,
    FieldDescriptor,
    FileDescriptor,
    MessageDescriptor,
)
from protoschema.errors import DescriptorLoadError

logger = logging.getLogger(__name__)


class DescriptorSetLoader:
    """Loads descriptor sets produced by ``protoc --descriptor_set_out``."""

    def load_file(self, path: Path | str) -> DescriptorSet:
        """Load a descriptor set from a binary file.

        Args:
            path: Path to the .desc / .pb file

        Returns:
            Loaded DescriptorSet

        Raises:
            DescriptorLoadError: If the file is missing, unreadable or not a descriptor set
        """
        path = Path(path)
        if not path.exists():
            raise DescriptorLoadError(f"Descriptor file not found: {path}")

        try:
            data = path.read_bytes()
        except OSError as e:
            raise DescriptorLoadError(f"Cannot read descriptor file {path}: {e}") from e

        logger.debug("Read %d bytes from %s", len(data), path)
        return self.load_bytes(data)

    def load_bytes(self, data: bytes) -> DescriptorSet:
        """Load a descriptor set from serialized FileDescriptorSet bytes.

        Args:
            data: Serialized FileDescriptorSet

        Returns:
            Loaded DescriptorSet
        """
        file_set = descriptor_pb2.FileDescriptorSet()
        try:
            file_set.ParseFromString(data)
        except DecodeError as e:
            raise DescriptorLoadError(f"Invalid descriptor set: {e}") from e

        return self.from_proto(file_set)

    def from_proto(self, file_set: descriptor_pb2.FileDescriptorSet) -> DescriptorSet:
        """Convert a parsed FileDescriptorSet message into a DescriptorSet."""
        files = tuple(self._convert_file(fdp) for fdp in file_set.file)
        logger.debug("Loaded %d file(s)", len(files))
        return DescriptorSet(files=files)

    def _convert_file(self, fdp: descriptor_pb2.FileDescriptorProto) -> FileDescriptor:
        return FileDescriptor(
            name=fdp.name,
            package=fdp.package,
            message_types=tuple(self._convert_message(dp) for dp in fdp.message_type),
        )

    def _convert_message(self, dp: descriptor_pb2.DescriptorProto) -> MessageDescriptor:
        fields = tuple(
            FieldDescriptor(
                name=f.name,
                number=f.number,
                type=f.type,
                label=f.label,
                type_name=f.type_name,
            )
            for f in dp.field
        )
        return MessageDescriptor(
            name=dp.name,
            fields=fields,
            nested_types=tuple(self._convert_message(n) for n in dp.nested_type),
        )


def load_descriptor_set(path: Path | str) -> DescriptorSet:
    """Convenience function to load a descriptor set from a file.

    Args:
        path: Path to the descriptor set file

    Returns:
        Loaded DescriptorSet
    """
    loader = DescriptorSetLoader()
    return loader.load_file(path)

"""Descriptor module - the input model, its loader and the message index."""

from protoschema.descriptors.base import (
    DescriptorSet,
    FieldDescriptor,
    FieldLabel,
    FieldType,
    FileDescriptor,
    MessageDescriptor,
)
from protoschema.descriptors.index import DescriptorIndex, normalize_type_name, simple_name
from protoschema.descriptors.loader import DescriptorSetLoader, load_descriptor_set

__all__ = [
    "DescriptorSet",
    "FieldDescriptor",
    "FieldLabel",
    "FieldType",
    "FileDescriptor",
    "MessageDescriptor",
    "DescriptorIndex",
    "normalize_type_name",
    "simple_name",
    "DescriptorSetLoader",
    "load_descriptor_set",
]

"""Shared fixtures: descriptor sets built with descriptor_pb2, no protoc needed."""

import pytest
from google.protobuf import descriptor_pb2

from protoschema.descriptors.index import DescriptorIndex
from protoschema.descriptors.loader import DescriptorSetLoader

FDP = descriptor_pb2.FieldDescriptorProto

OPTIONAL = FDP.LABEL_OPTIONAL
REQUIRED = FDP.LABEL_REQUIRED
REPEATED = FDP.LABEL_REPEATED


def make_field(name, number, field_type, label=OPTIONAL, type_name=""):
    field = FDP(name=name, number=number, type=field_type, label=label)
    if type_name:
        field.type_name = type_name
    return field


def make_message(name, fields=(), nested=()):
    message = descriptor_pb2.DescriptorProto(name=name)
    message.field.extend(fields)
    message.nested_type.extend(nested)
    return message


def build_analytics_file_set():
    """The analytics.UserEvent example: scalars, an enum, nested and repeated messages."""
    fdp = descriptor_pb2.FileDescriptorProto(name="example.proto", package="analytics", syntax="proto2")

    device_type = fdp.enum_type.add(name="DeviceType")
    for number, value in enumerate(["UNKNOWN", "DESKTOP", "MOBILE", "TABLET"]):
        device_type.value.add(name=value, number=number)

    fdp.message_type.extend([
        make_message("Location", [
            make_field("city", 1, FDP.TYPE_STRING),
            make_field("country", 2, FDP.TYPE_STRING),
            make_field("latitude", 3, FDP.TYPE_DOUBLE),
            make_field("longitude", 4, FDP.TYPE_DOUBLE),
        ]),
        make_message("SessionInfo", [
            make_field("session_id", 1, FDP.TYPE_STRING, REQUIRED),
            make_field("start_time", 2, FDP.TYPE_INT64),
            make_field("end_time", 3, FDP.TYPE_INT64),
            make_field("visited_pages", 4, FDP.TYPE_STRING, REPEATED),
        ]),
        make_message("Product", [
            make_field("product_id", 1, FDP.TYPE_STRING, REQUIRED),
            make_field("name", 2, FDP.TYPE_STRING, REQUIRED),
            make_field("price", 3, FDP.TYPE_DOUBLE),
            make_field("quantity", 4, FDP.TYPE_INT32),
        ]),
        make_message("UserProfile", [
            make_field("user_id", 1, FDP.TYPE_STRING, REQUIRED),
            make_field("name", 2, FDP.TYPE_STRING),
            make_field("email", 3, FDP.TYPE_STRING),
            make_field("is_premium", 4, FDP.TYPE_BOOL),
            make_field("interests", 5, FDP.TYPE_STRING, REPEATED),
        ]),
        make_message("UserEvent", [
            make_field("event_id", 1, FDP.TYPE_STRING, REQUIRED),
            make_field("event_timestamp", 2, FDP.TYPE_INT64, REQUIRED),
            make_field("device_type", 3, FDP.TYPE_ENUM, type_name=".analytics.DeviceType"),
            make_field("location", 4, FDP.TYPE_MESSAGE, type_name=".analytics.Location"),
            make_field("session", 5, FDP.TYPE_MESSAGE, type_name=".analytics.SessionInfo"),
            make_field("profile", 6, FDP.TYPE_MESSAGE, type_name=".analytics.UserProfile"),
            make_field("products", 7, FDP.TYPE_MESSAGE, REPEATED, ".analytics.Product"),
            make_field("metadata", 8, FDP.TYPE_MESSAGE, REPEATED, ".analytics.MetadataEntry"),
        ]),
        make_message("MetadataEntry", [
            make_field("key", 1, FDP.TYPE_STRING, REQUIRED),
            make_field("value", 2, FDP.TYPE_STRING, REQUIRED),
        ]),
    ])

    file_set = descriptor_pb2.FileDescriptorSet()
    file_set.file.append(fdp)
    return file_set


def build_shapes_file_set():
    """Nested types, a self-referencing tree, an empty message and a dangling reference."""
    fdp = descriptor_pb2.FileDescriptorProto(name="shapes.proto", package="shapes")

    fdp.message_type.extend([
        make_message(
            "Outer",
            [
                make_field("id", 1, FDP.TYPE_INT32),
                make_field("inner", 2, FDP.TYPE_MESSAGE, type_name=".shapes.Outer.Inner"),
                make_field("label", 3, FDP.TYPE_STRING),
            ],
            nested=[
                make_message(
                    "Inner",
                    [
                        make_field("x", 1, FDP.TYPE_INT32),
                        make_field("deep", 2, FDP.TYPE_MESSAGE, type_name=".shapes.Outer.Inner.Deep"),
                    ],
                    nested=[make_message("Deep", [make_field("flag", 1, FDP.TYPE_BOOL)])],
                ),
            ],
        ),
        make_message("Node", [
            make_field("value", 1, FDP.TYPE_STRING),
            make_field("children", 2, FDP.TYPE_MESSAGE, REPEATED, ".shapes.Node"),
        ]),
        make_message("Empty"),
        make_message("Holder", [
            make_field("empty", 1, FDP.TYPE_MESSAGE, type_name=".shapes.Empty"),
            make_field("missing", 2, FDP.TYPE_MESSAGE, type_name=".other.Missing"),
            make_field("blob", 3, FDP.TYPE_BYTES),
        ]),
    ])

    file_set = descriptor_pb2.FileDescriptorSet()
    file_set.file.append(fdp)
    return file_set


@pytest.fixture
def analytics_file_set():
    return build_analytics_file_set()


@pytest.fixture
def analytics_set(analytics_file_set):
    return DescriptorSetLoader().from_proto(analytics_file_set)


@pytest.fixture
def analytics_index(analytics_set):
    return DescriptorIndex.build(analytics_set)


@pytest.fixture
def shapes_set():
    return DescriptorSetLoader().from_proto(build_shapes_file_set())


@pytest.fixture
def shapes_index(shapes_set):
    return DescriptorIndex.build(shapes_set)


@pytest.fixture
def analytics_desc_file(tmp_path, analytics_file_set):
    """The analytics descriptor set written to disk, as protoc would."""
    path = tmp_path / "example.desc"
    path.write_bytes(analytics_file_set.SerializeToString())
    return path


@pytest.fixture
def shapes_desc_file(tmp_path):
    path = tmp_path / "shapes.desc"
    path.write_bytes(build_shapes_file_set().SerializeToString())
    return path

"""Protobuf messages carried inside an encrypted profile receipt.

The message classes are built from descriptors at import time, so no
generated ``_pb2`` modules are needed. Only the fields the client reads are
declared; anything else on the wire is kept as unknown fields.
"""
from __future__ import annotations

from enum import IntEnum

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_PACKAGE = "yoti_client.attrpubapi"
_Field = descriptor_pb2.FieldDescriptorProto


class ContentType(IntEnum):
    UNDEFINED = 0
    STRING = 1
    JPEG = 2
    DATE = 3
    PNG = 4
    JSON = 5
    MULTI_VALUE = 6
    INT = 7


def _add_field(message, name, number, field_type, label=_Field.LABEL_OPTIONAL, type_name=None):
    field = message.field.add()
    field.name = name
    field.number = number
    field.type = field_type
    field.label = label
    if type_name:
        field.type_name = type_name


def _build_pool() -> descriptor_pool.DescriptorPool:
    file_proto = descriptor_pb2.FileDescriptorProto()
    file_proto.name = "yoti_client/attrpubapi.proto"
    file_proto.package = _PACKAGE
    file_proto.syntax = "proto3"

    encrypted = file_proto.message_type.add()
    encrypted.name = "EncryptedData"
    _add_field(encrypted, "iv", 1, _Field.TYPE_BYTES)
    _add_field(encrypted, "cipher_text", 2, _Field.TYPE_BYTES)

    attribute = file_proto.message_type.add()
    attribute.name = "Attribute"
    _add_field(attribute, "name", 1, _Field.TYPE_STRING)
    _add_field(attribute, "value", 2, _Field.TYPE_BYTES)
    # enum on the wire; decoded as a plain varint
    _add_field(attribute, "content_type", 3, _Field.TYPE_INT32)

    attribute_list = file_proto.message_type.add()
    attribute_list.name = "AttributeList"
    _add_field(
        attribute_list,
        "attributes",
        1,
        _Field.TYPE_MESSAGE,
        _Field.LABEL_REPEATED,
        f".{_PACKAGE}.Attribute",
    )

    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(file_proto.SerializeToString())
    return pool


_POOL = _build_pool()


def _message_class(name: str):
    return message_factory.GetMessageClass(_POOL.FindMessageTypeByName(f"{_PACKAGE}.{name}"))


EncryptedData = _message_class("EncryptedData")
AttributeProto = _message_class("Attribute")
AttributeList = _message_class("AttributeList")

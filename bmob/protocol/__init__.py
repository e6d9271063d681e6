"""
The Bmob REST wire protocol.

Constants, resource paths and the extended JSON codec.  Nothing in this
package does any I/O; pair it with an HTTP library of your choice::

    import requests
    from bmob.protocol import Pointer, api_url, class_uri, encode_write_payload
    from bmob.requests import BmobAuth

    requests.post(
        api_url(class_uri("GameScore")),
        json=encode_write_payload({"score": 1337, "player": Pointer.for_user("a1")}),
        auth=BmobAuth(app_id, api_key),
    )
"""

from bmob.protocol.codec import (
    check_reserved_fields,
    decode,
    decode_op,
    encode,
    encode_op,
    encode_write_payload,
    from_wire,
    strip_reserved_fields,
    to_wire,
)
from bmob.protocol.headers import build_headers
from bmob.protocol.types import (
    Add,
    AddRelation,
    AddUnique,
    Bytes,
    Date,
    Delete,
    EmbeddedObject,
    FieldOperation,
    File,
    GeoPoint,
    Increment,
    Pointer,
    Relation,
    Remove,
    RemoveRelation,
    ResourceKind,
    ResourceRef,
    SpecialValue,
)
from bmob.protocol.uri import (
    api_path,
    api_url,
    batch_request_uri,
    class_uri,
    cloud_function_uri,
    config_uri,
    file_uri,
    installation_uri,
    login_uri,
    password_reset_uri,
    push_uri,
    resource_uri,
    user_uri,
)

__all__ = [
    "Add",
    "AddRelation",
    "AddUnique",
    "Bytes",
    "Date",
    "Delete",
    "EmbeddedObject",
    "FieldOperation",
    "File",
    "GeoPoint",
    "Increment",
    "Pointer",
    "Relation",
    "Remove",
    "RemoveRelation",
    "ResourceKind",
    "ResourceRef",
    "SpecialValue",
    "api_path",
    "api_url",
    "batch_request_uri",
    "build_headers",
    "check_reserved_fields",
    "class_uri",
    "cloud_function_uri",
    "config_uri",
    "decode",
    "decode_op",
    "encode",
    "encode_op",
    "encode_write_payload",
    "file_uri",
    "from_wire",
    "installation_uri",
    "login_uri",
    "password_reset_uri",
    "push_uri",
    "resource_uri",
    "strip_reserved_fields",
    "to_wire",
    "user_uri",
]

"""
Resource paths of the Bmob REST API.

The functions return paths relative to the API version prefix
(``/classes/Foo``, not ``/1/classes/Foo``); use :func:`api_path` or
:func:`api_url` to get the full location.

Names and IDs are embedded verbatim, there is no escaping or validation.
An identifier of ``None`` addresses the collection, anything else
(including the empty string) addresses an instance, so
``class_uri("Foo", "")`` gives ``/classes/Foo/``.  Callers that care must
check for empty IDs themselves.
"""

from __future__ import annotations

from bmob.protocol import constants as c
from bmob.protocol.types import INSTANCE_KINDS, ResourceKind, ResourceRef


def config_uri() -> str:
    return "/config"


def class_uri(class_name: str, object_id: str | None = None) -> str:
    """Uri of a class, or of one of its objects if ``object_id`` is given."""
    if object_id is not None:
        return f"/classes/{class_name}/{object_id}"
    return f"/classes/{class_name}"


def installation_uri(object_id: str | None = None) -> str:
    if object_id is not None:
        return f"/installations/{object_id}"
    return "/installations"


def user_uri(user_id: str | None = None) -> str:
    if user_id is not None:
        return f"/users/{user_id}"
    return "/users"


def file_uri(file_name: str) -> str:
    return f"/files/{file_name}"


def push_uri() -> str:
    return "/push"


def cloud_function_uri(function_name: str) -> str:
    return f"/{c.CLOUD_FUNCTIONS_PATH}/{function_name}"


def batch_request_uri() -> str:
    """Uri the list of batched sub-requests is POSTed to."""
    return f"/{c.BATCH_REQUEST_URI}"


def login_uri() -> str:
    return c.USER_LOGIN_URI


def password_reset_uri() -> str:
    return c.PASSWORD_RESET_URI


def resource_uri(ref: ResourceRef) -> str:
    """Map a :class:`ResourceRef` to its path.

    Raises:
        ValueError: If an ``OBJECT``, ``FILE`` or ``CLOUD_FUNCTION`` ref
            has no ``class_name``, or a ref of a kind without instances
            carries an ``identifier``.
    """
    kind = ref.kind
    if ref.identifier is not None and kind not in INSTANCE_KINDS:
        raise ValueError(f"{kind.value} reference cannot carry an identifier")
    if kind in (ResourceKind.OBJECT, ResourceKind.FILE, ResourceKind.CLOUD_FUNCTION):
        if ref.class_name is None:
            raise ValueError(f"{kind.value} reference needs a class_name")
    if kind is ResourceKind.OBJECT:
        return class_uri(ref.class_name, ref.identifier)
    if kind is ResourceKind.INSTALLATION:
        return installation_uri(ref.identifier)
    if kind is ResourceKind.USER:
        return user_uri(ref.identifier)
    if kind is ResourceKind.FILE:
        return file_uri(ref.class_name)
    if kind is ResourceKind.CLOUD_FUNCTION:
        return cloud_function_uri(ref.class_name)
    return _FIXED_URIS[kind]()


_FIXED_URIS = {
    ResourceKind.BATCH: batch_request_uri,
    ResourceKind.CONFIG: config_uri,
    ResourceKind.PUSH: push_uri,
    ResourceKind.LOGIN: login_uri,
    ResourceKind.PASSWORD_RESET: password_reset_uri,
}


def api_path(uri: str) -> str:
    """Prefix ``uri`` with the API version, ``/users`` -> ``/1/users``."""
    return c.PATH + uri


def api_url(uri: str, host: str = c.HOST) -> str:
    """Absolute URL of ``uri`` on ``host``."""
    return host.rstrip("/") + api_path(uri)

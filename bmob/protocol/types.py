"""
Value types of the Bmob wire protocol.

Special values (``{"__type": ...}``) and field operations
(``{"__op": ...}``) are modelled as frozen dataclasses, one class per
tag.  Each class knows its own tag and how to convert itself to and from
its JSON form; :mod:`bmob.protocol.codec` does the dispatching.

These are pure data structures with no I/O.
"""

from __future__ import annotations

import base64
import binascii
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar

from bmob.lib.error import MalformedSpecialValue
from bmob.protocol import constants as c

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self


class ResourceKind(Enum):
    """Kinds of resources addressable through the REST API."""

    OBJECT = "Object"
    INSTALLATION = "Installation"
    USER = "User"
    FILE = "File"
    CLOUD_FUNCTION = "CloudFunction"
    BATCH = "Batch"
    CONFIG = "Config"
    PUSH = "Push"
    LOGIN = "Login"
    PASSWORD_RESET = "PasswordReset"


#: Kinds that address a single instance when given an identifier.
INSTANCE_KINDS = frozenset(
    {ResourceKind.OBJECT, ResourceKind.INSTALLATION, ResourceKind.USER}
)


@dataclass(frozen=True)
class ResourceRef:
    """
    A reference to a REST resource.

    Attributes:
        kind: Which resource family is addressed.
        class_name: The class for ``OBJECT`` refs.  For ``FILE`` and
            ``CLOUD_FUNCTION`` refs it holds the file or function name.
        identifier: Object ID for ``OBJECT``, ``INSTALLATION`` and
            ``USER`` refs.  ``None`` addresses the collection.
    """

    kind: ResourceKind
    class_name: str | None = None
    identifier: str | None = None


def _require(data: dict, tag: str, key: str, *types: type) -> Any:
    """Fetch a companion field, raising MalformedSpecialValue if it is
    absent or of the wrong JSON type."""
    if key not in data or data[key] is None:
        raise MalformedSpecialValue(
            tag=tag, payload=data, reason=f"{tag} value is missing {key!r}"
        )
    value = data[key]
    ## bool is a subclass of int, but never a valid number on the wire
    if not isinstance(value, types) or isinstance(value, bool):
        raise MalformedSpecialValue(
            tag=tag,
            payload=data,
            reason=f"{tag} value has {key!r} of unexpected type {type(value).__name__}",
        )
    return value


# ---------------------------------------------------------------------------
# Special values
# ---------------------------------------------------------------------------


class SpecialValue(ABC):
    """Base class of all ``__type``-tagged values."""

    type_tag: ClassVar[str]

    @abstractmethod
    def to_json(self) -> dict:
        """Return the companion fields, without the type tag."""
        pass

    @classmethod
    @abstractmethod
    def from_json(cls, data: dict) -> Self:
        """Build the value from its JSON form, type tag included.

        Raises:
            MalformedSpecialValue: If companion fields are missing or invalid.
        """
        pass


@dataclass(frozen=True)
class Pointer(SpecialValue):
    """Reference to another stored object."""

    type_tag: ClassVar[str] = c.TYPE_POINTER

    class_name: str
    object_id: str

    @classmethod
    def for_user(cls, object_id: str) -> Self:
        return cls(class_name=c.CLASS_USER, object_id=object_id)

    @classmethod
    def for_installation(cls, object_id: str) -> Self:
        return cls(class_name=c.CLASS_INSTALLATION, object_id=object_id)

    def to_json(self) -> dict:
        return {c.KEY_CLASS_NAME: self.class_name, c.KEY_OBJECT_ID: self.object_id}

    @classmethod
    def from_json(cls, data: dict) -> Self:
        return cls(
            class_name=_require(data, cls.type_tag, c.KEY_CLASS_NAME, str),
            object_id=_require(data, cls.type_tag, c.KEY_OBJECT_ID, str),
        )


@dataclass(frozen=True)
class Date(SpecialValue):
    """
    A point in time.  The server stores dates in UTC with millisecond
    precision, e.g. ``2011-08-21T18:02:52.249Z``.
    """

    type_tag: ClassVar[str] = c.TYPE_DATE

    iso: str

    @classmethod
    def from_datetime(cls, dt: datetime) -> Self:
        """Naive datetimes are taken to be in UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        dt = dt.astimezone(timezone.utc)
        return cls(
            iso="%s.%03dZ" % (dt.strftime("%Y-%m-%dT%H:%M:%S"), dt.microsecond // 1000)
        )

    def to_datetime(self) -> datetime:
        """Parse the ISO string into an aware datetime.

        Raises:
            ValueError: If ``iso`` is not an ISO 8601 timestamp.
        """
        iso = self.iso
        if iso.endswith("Z"):
            iso = iso[:-1] + "+00:00"
        dt = datetime.fromisoformat(iso)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    def to_json(self) -> dict:
        return {c.KEY_ISO: self.iso}

    @classmethod
    def from_json(cls, data: dict) -> Self:
        value = cls(iso=_require(data, cls.type_tag, c.KEY_ISO, str))
        try:
            value.to_datetime()
        except ValueError as e:
            raise MalformedSpecialValue(
                tag=cls.type_tag, payload=data, reason=f"invalid iso date: {e}"
            ) from e
        return value


@dataclass(frozen=True)
class Bytes(SpecialValue):
    """Binary data carried as a base64 string."""

    type_tag: ClassVar[str] = c.TYPE_BYTES

    base64: str

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        return cls(base64=base64.b64encode(data).decode("ascii"))

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.base64)

    def to_json(self) -> dict:
        return {c.KEY_BASE64: self.base64}

    @classmethod
    def from_json(cls, data: dict) -> Self:
        payload = _require(data, cls.type_tag, c.KEY_BASE64, str)
        try:
            base64.b64decode(payload, validate=True)
        except binascii.Error as e:
            raise MalformedSpecialValue(
                tag=cls.type_tag, payload=data, reason=f"invalid base64: {e}"
            ) from e
        return cls(base64=payload)


@dataclass(frozen=True)
class GeoPoint(SpecialValue):
    """A latitude/longitude pair, in degrees."""

    type_tag: ClassVar[str] = c.TYPE_GEOPOINT

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude {self.latitude} outside [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude {self.longitude} outside [-180, 180]")

    def to_json(self) -> dict:
        return {c.KEY_LATITUDE: self.latitude, c.KEY_LONGITUDE: self.longitude}

    @classmethod
    def from_json(cls, data: dict) -> Self:
        latitude = _require(data, cls.type_tag, c.KEY_LATITUDE, int, float)
        longitude = _require(data, cls.type_tag, c.KEY_LONGITUDE, int, float)
        try:
            return cls(latitude=latitude, longitude=longitude)
        except ValueError as e:
            raise MalformedSpecialValue(
                tag=cls.type_tag, payload=data, reason=str(e)
            ) from e


@dataclass(frozen=True)
class File(SpecialValue):
    """
    A file uploaded through the files endpoint.  ``url`` is filled in by
    the server and is not needed when referencing a file in a write.
    """

    type_tag: ClassVar[str] = c.TYPE_FILE

    name: str
    url: str | None = None

    def to_json(self) -> dict:
        d = {c.KEY_NAME: self.name}
        if self.url is not None:
            d[c.KEY_URL] = self.url
        return d

    @classmethod
    def from_json(cls, data: dict) -> Self:
        name = _require(data, cls.type_tag, c.KEY_NAME, str)
        url = data.get(c.KEY_URL)
        if url is not None and not isinstance(url, str):
            raise MalformedSpecialValue(
                tag=cls.type_tag, payload=data, reason="File url must be a string"
            )
        return cls(name=name, url=url)


@dataclass(frozen=True)
class Relation(SpecialValue):
    """A to-many reference to objects of ``class_name``."""

    type_tag: ClassVar[str] = c.TYPE_RELATION

    class_name: str

    def to_json(self) -> dict:
        return {c.KEY_CLASS_NAME: self.class_name}

    @classmethod
    def from_json(cls, data: dict) -> Self:
        return cls(class_name=_require(data, cls.type_tag, c.KEY_CLASS_NAME, str))


@dataclass(frozen=True)
class EmbeddedObject(SpecialValue):
    """
    A full object inlined where a pointer would be, as returned for
    pointer fields named in a query's ``include`` parameter.

    ``fields`` holds the remaining keys as decoded values.  It is left out
    of the hash.
    """

    type_tag: ClassVar[str] = c.TYPE_OBJECT

    class_name: str
    object_id: str
    fields: dict = field(default_factory=dict, hash=False)

    def to_pointer(self) -> Pointer:
        return Pointer(class_name=self.class_name, object_id=self.object_id)

    def __post_init__(self) -> None:
        tags = {c.KEY_TYPE, c.KEY_OP}.intersection(self.fields)
        if tags:
            raise ValueError(f"fields may not contain tag keys {sorted(tags)}")

    def to_json(self) -> dict:
        from bmob.protocol.codec import to_wire

        d = to_wire(self.fields)
        d[c.KEY_CLASS_NAME] = self.class_name
        d[c.KEY_OBJECT_ID] = self.object_id
        return d

    @classmethod
    def from_json(cls, data: dict) -> Self:
        from bmob.protocol.codec import from_wire

        class_name = _require(data, cls.type_tag, c.KEY_CLASS_NAME, str)
        object_id = _require(data, cls.type_tag, c.KEY_OBJECT_ID, str)
        rest = {
            k: v
            for k, v in data.items()
            if k not in (c.KEY_TYPE, c.KEY_CLASS_NAME, c.KEY_OBJECT_ID)
        }
        fields = from_wire(rest)
        try:
            return cls(class_name=class_name, object_id=object_id, fields=fields)
        except ValueError as e:
            raise MalformedSpecialValue(
                tag=cls.type_tag, payload=data, reason=str(e)
            ) from e


#: type tag -> class, used for decoding
SPECIAL_VALUE_TYPES: dict[str, type[SpecialValue]] = {
    cls.type_tag: cls
    for cls in (Pointer, Date, Bytes, GeoPoint, File, Relation, EmbeddedObject)
}


# ---------------------------------------------------------------------------
# Field operations
# ---------------------------------------------------------------------------


class FieldOperation:
    """Base class of all ``__op``-tagged field mutations."""

    op: ClassVar[str]


@dataclass(frozen=True)
class Increment(FieldOperation):
    """Atomically add ``amount`` (may be negative) to a numeric field."""

    op: ClassVar[str] = c.KEY_INCREMENT

    amount: int | float = 1


@dataclass(frozen=True)
class Delete(FieldOperation):
    """Remove the field from the object."""

    op: ClassVar[str] = c.KEY_DELETE


@dataclass(frozen=True)
class _ObjectsOperation(FieldOperation):
    objects: tuple = ()

    def __post_init__(self) -> None:
        ## frozen, so bypass __setattr__; lists are stored as tuples
        object.__setattr__(self, "objects", tuple(self.objects))


@dataclass(frozen=True)
class Add(_ObjectsOperation):
    """Append values to an array field."""

    op: ClassVar[str] = c.KEY_ADD


@dataclass(frozen=True)
class AddUnique(_ObjectsOperation):
    """Append values not already present in an array field."""

    op: ClassVar[str] = c.KEY_ADD_UNIQUE


@dataclass(frozen=True)
class Remove(_ObjectsOperation):
    """Remove all instances of the values from an array field."""

    op: ClassVar[str] = c.KEY_REMOVE


@dataclass(frozen=True)
class AddRelation(_ObjectsOperation):
    """Add :class:`Pointer` objects to a relation field."""

    op: ClassVar[str] = c.KEY_ADD_RELATION


@dataclass(frozen=True)
class RemoveRelation(_ObjectsOperation):
    """Remove :class:`Pointer` objects from a relation field."""

    op: ClassVar[str] = c.KEY_REMOVE_RELATION


#: operator tag -> class, used for decoding
FIELD_OPERATION_TYPES: dict[str, type[FieldOperation]] = {
    cls.op: cls
    for cls in (Increment, Delete, Add, AddUnique, Remove, AddRelation, RemoveRelation)
}

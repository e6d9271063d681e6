"""
Encoding and decoding of the extended JSON type system.

Special values carry their type in ``__type``, field operations carry
their operator in ``__op``.  The two namespaces are kept apart:
:func:`decode` only looks at ``__type`` and :func:`decode_op` only looks
at ``__op``.

These are pure functions, no HTTP, no state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from bmob.lib.error import MalformedSpecialValue, ReservedFieldViolation
from bmob.protocol import constants as c
from bmob.protocol.types import (
    FIELD_OPERATION_TYPES,
    SPECIAL_VALUE_TYPES,
    Bytes,
    Date,
    Delete,
    FieldOperation,
    Increment,
    SpecialValue,
)

log = logging.getLogger("bmob.protocol")


def encode(value: SpecialValue) -> dict:
    """Encode a special value as ``{"__type": tag, ...companion fields}``.

    Raises:
        TypeError: If ``value`` is not a :class:`SpecialValue`.
    """
    if not isinstance(value, SpecialValue):
        raise TypeError(f"not a special value: {value!r}")
    d = value.to_json()
    d[c.KEY_TYPE] = value.type_tag
    return d


def decode(data: Any) -> Any:
    """Decode a single special value.

    Anything that is not a mapping carrying a known ``__type`` is returned
    unchanged, so plain values and types added to the server later pass
    through untouched.

    Raises:
        MalformedSpecialValue: If the tag is known but its companion
            fields are missing or of the wrong type.
    """
    if not isinstance(data, Mapping) or c.KEY_TYPE not in data:
        return data
    tag = data[c.KEY_TYPE]
    cls = SPECIAL_VALUE_TYPES.get(tag) if isinstance(tag, str) else None
    if cls is None:
        log.debug("leaving value with unknown type tag %r as is", tag)
        return data
    return cls.from_json(dict(data))


def encode_op(op: FieldOperation) -> dict:
    """Encode a field operation as ``{"__op": tag, ...payload}``.

    ``Increment`` carries ``amount``, ``Delete`` carries nothing and the
    array and relation operations carry an ``objects`` list whose members
    are encoded with :func:`to_wire`.

    Raises:
        TypeError: If ``op`` is not a :class:`FieldOperation`.
    """
    if not isinstance(op, FieldOperation):
        raise TypeError(f"not a field operation: {op!r}")
    d: dict = {c.KEY_OP: op.op}
    if isinstance(op, Increment):
        d[c.KEY_AMOUNT] = op.amount
    elif not isinstance(op, Delete):
        d[c.KEY_OBJECTS] = [to_wire(x) for x in op.objects]
    return d


def decode_op(data: Any) -> Any:
    """Decode a field operation, the inverse of :func:`encode_op`.

    Mappings without ``__op`` are returned unchanged.  Unlike
    :func:`decode`, an unknown operator is an error: there is no sensible
    way to pass on a mutation one does not understand.

    Raises:
        MalformedSpecialValue: On an unknown operator or a missing payload.
    """
    if not isinstance(data, Mapping) or c.KEY_OP not in data:
        return data
    tag = data[c.KEY_OP]
    cls = FIELD_OPERATION_TYPES.get(tag) if isinstance(tag, str) else None
    if cls is None:
        raise MalformedSpecialValue(
            tag=tag, payload=data, reason=f"unknown operator {tag!r}"
        )
    if cls is Delete:
        return Delete()
    if cls is Increment:
        amount = data.get(c.KEY_AMOUNT)
        if not isinstance(amount, (int, float)) or isinstance(amount, bool):
            raise MalformedSpecialValue(
                tag=tag, payload=data, reason="Increment needs a numeric 'amount'"
            )
        return Increment(amount)
    objects = data.get(c.KEY_OBJECTS)
    if not isinstance(objects, list):
        raise MalformedSpecialValue(
            tag=tag, payload=data, reason=f"{tag} needs an 'objects' list"
        )
    return cls(objects=[from_wire(x) for x in objects])


def to_wire(value: Any) -> Any:
    """Recursively encode a value tree for a request body.

    Special values and field operations are encoded, ``datetime`` becomes
    a Date and ``bytes`` becomes Bytes.  Mappings, lists and tuples are
    walked; everything else is returned as is.
    """
    if isinstance(value, SpecialValue):
        return encode(value)
    if isinstance(value, FieldOperation):
        return encode_op(value)
    if isinstance(value, datetime):
        return encode(Date.from_datetime(value))
    if isinstance(value, (bytes, bytearray)):
        return encode(Bytes.from_bytes(bytes(value)))
    if isinstance(value, Mapping):
        return {k: to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(x) for x in value]
    return value


def from_wire(value: Any) -> Any:
    """Recursively decode special values in a response body.

    Operator payloads are not decoded; servers do not send them back.
    """
    if isinstance(value, Mapping):
        if c.KEY_TYPE in value:
            return decode(value)
        return {k: from_wire(v) for k, v in value.items()}
    if isinstance(value, list):
        return [from_wire(x) for x in value]
    return value


# ---------------------------------------------------------------------------
# Reserved field guard
# ---------------------------------------------------------------------------


def check_reserved_fields(fields: Mapping) -> None:
    """Raise if a write payload tries to set a server-managed field.

    Raises:
        ReservedFieldViolation: Naming every reserved key present.
    """
    offending = c.RESERVED_KEYS.intersection(fields)
    if offending:
        raise ReservedFieldViolation(fields=offending)


def strip_reserved_fields(fields: Mapping) -> dict:
    """Return a copy of ``fields`` without the server-managed keys."""
    return {k: v for k, v in fields.items() if k not in c.RESERVED_KEYS}


def encode_write_payload(fields: Mapping) -> dict:
    """Check ``fields`` with :func:`check_reserved_fields`, then encode
    them with :func:`to_wire` for a create or update request body."""
    check_reserved_fields(fields)
    return to_wire(fields)

#!/usr/bin/env python
import logging
import os
from typing import Any
from typing import Iterable
from typing import Optional

from bmob import __version__
from bmob.protocol.constants import ERROR_EXCEEDED_BURST_LIMIT
from bmob.protocol.constants import ERROR_INTERNAL
from bmob.protocol.constants import ERROR_TIMEOUT

## Environmental variables prepended with "PYTHON_BMOB" are used for debug purposes,
## environmental variables prepended with "BMOB_" are for connection parameters
## one of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("PYTHON_BMOB_DEBUGMODE")
if not debugmode:
    if "dev" in __version__:
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("bmob")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def weirdness(*reasons) -> None:
    reason = " : ".join([str(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")
    if debugmode == "DEBUG_PDB":
        log.error(f"Dropping into debugger due to {reason}")
        import pdb

        pdb.set_trace()


class BmobError(Exception):
    url: Optional[str] = None
    reason: str = "no reason"

    def __init__(self, url: Optional[str] = None, reason: Optional[str] = None) -> None:
        if url:
            self.url = url
        if reason:
            self.reason = reason

    def __str__(self) -> str:
        return "%s at '%s', reason %s" % (
            self.__class__.__name__,
            self.url,
            self.reason,
        )


class ProtocolError(BmobError):
    """
    Data could not be converted to or from its wire representation.
    Raised locally by the codec, never by the server.
    """

    def __str__(self) -> str:
        return "%s, reason %s" % (self.__class__.__name__, self.reason)


class MalformedSpecialValue(ProtocolError, ValueError):
    """
    A ``__type`` (or ``__op``) tagged payload is missing the fields its
    tag requires.  ``tag`` holds the tag, ``payload`` the offending data.
    """

    reason = "malformed special value"

    def __init__(
        self,
        tag: Optional[str] = None,
        payload: Any = None,
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(reason=reason)
        self.tag = tag
        self.payload = payload


class ReservedFieldViolation(ProtocolError, ValueError):
    """
    A write payload tried to set one or more fields managed by the
    server.  ``fields`` lists them, sorted.
    """

    def __init__(self, fields: Iterable[str] = (), reason: Optional[str] = None) -> None:
        self.fields = sorted(fields)
        if reason is None:
            reason = "reserved field(s) may not be written: %s" % ", ".join(self.fields)
        super().__init__(reason=reason)


class ResponseError(BmobError):
    """
    The server answered with an error body, ``{"code": ..., "error": ...}``.
    ``code`` is one of the ``ERROR_*`` values in
    :mod:`bmob.protocol.constants` or any other code the server sends.
    """

    code: int = ERROR_INTERNAL

    def __init__(
        self,
        url: Optional[str] = None,
        reason: Optional[str] = None,
        code: Optional[int] = None,
    ) -> None:
        super().__init__(url=url, reason=reason)
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return "%s (code=%s) at '%s', reason %s" % (
            self.__class__.__name__,
            self.code,
            self.url,
            self.reason,
        )


def error_from_response(body: Any, url: Optional[str] = None) -> Optional[ResponseError]:
    """
    Build a :class:`ResponseError` from a decoded response body.

    Returns ``None`` if the body does not look like an error.  The error
    is returned, not raised; what to do with it is up to the caller.
    """
    if not isinstance(body, dict) or "code" not in body:
        return None
    code = body["code"]
    if not isinstance(code, int) or isinstance(code, bool):
        weirdness("non-integer error code in response", body)
        code = ERROR_INTERNAL
    return ResponseError(url=url, reason=body.get("error"), code=code)


def is_retryable(code: int) -> bool:
    """True for the error codes where repeating the request may succeed."""
    return code in (ERROR_TIMEOUT, ERROR_EXCEEDED_BURST_LIMIT)

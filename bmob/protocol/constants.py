"""
Bmob REST API protocol constants.

Every header name, JSON key, type tag and operator name used on the wire
is defined here so it is never duplicated across the package. The server
matches these strings exactly, case included. Every other module should
import from this file.
"""

from types import MappingProxyType

# Basics
# ----------------------------------------

#: Default scheme and hostname for the Bmob REST API.
HOST = "https://api.bmob.cn"

#: API version prefix prepended to every resource path.
PATH = "/1"

# HTTP headers
# ----------------------------------------

#: Header carrying the application ID.
HEADER_APP_ID = "X-Bmob-Application-Id"

#: Header carrying the REST API key.
HEADER_API_KEY = "X-Bmob-REST-API-Key"

#: Header carrying the master key.  Bypasses ACLs, keep it server side.
HEADER_MASTER_KEY = "X-Bmob-Master-Key"

#: Header carrying the session token of a logged in user.
HEADER_SESSION_TOKEN = "X-Bmob-Session-Token"

# JSON keys
# ----------------------------------------

#: Class name of an object, also used inside Pointer and Relation values.
KEY_CLASS_NAME = "className"

#: Server-assigned object ID.
KEY_OBJECT_ID = "objectId"

#: Creation timestamp of an object.
KEY_CREATED_AT = "createdAt"

#: Last modification timestamp of an object.
KEY_UPDATED_AT = "updatedAt"

KEY_USER_SESSION_TOKEN = "sessionToken"

#: Top-level key of a query response holding the array of objects.
RESPONSE_KEY_RESULTS = "results"
KEY_RESULTS = RESPONSE_KEY_RESULTS

#: Key identifying a field operation.
KEY_OP = "__op"

#: Key identifying the datatype of a special value.
KEY_TYPE = "__type"

#: Numerical value of an Increment operation.
KEY_AMOUNT = "amount"

#: Value list of the array and relation operations.
KEY_OBJECTS = "objects"

# Companion fields of the special types
KEY_ISO = "iso"
KEY_BASE64 = "base64"
KEY_LATITUDE = "latitude"
KEY_LONGITUDE = "longitude"
KEY_NAME = "name"
KEY_URL = "url"

# Operators
# ----------------------------------------

KEY_INCREMENT = "Increment"
KEY_DELETE = "Delete"

# array ops
KEY_ADD = "Add"
KEY_ADD_RELATION = "AddRelation"
KEY_REMOVE_RELATION = "RemoveRelation"
KEY_ADD_UNIQUE = "AddUnique"
KEY_REMOVE = "Remove"

#: Operation name for incrementing a field value remotely.
OP_INCREMENT = KEY_INCREMENT

OPERATORS = frozenset(
    {
        KEY_INCREMENT,
        KEY_DELETE,
        KEY_ADD,
        KEY_ADD_RELATION,
        KEY_REMOVE_RELATION,
        KEY_ADD_UNIQUE,
        KEY_REMOVE,
    }
)

#: Ready-made payload removing a field.  Read-only.
DELETE_OP = MappingProxyType({KEY_OP: KEY_DELETE})

#: Fields managed by the server.  Clients must never write them.
RESERVED_KEYS = frozenset(
    {
        KEY_CLASS_NAME,
        KEY_CREATED_AT,
        KEY_OBJECT_ID,
        KEY_UPDATED_AT,
        KEY_USER_SESSION_TOKEN,
    }
)

# Special types
# ----------------------------------------

#: A full object inlined where a pointer would otherwise be.
TYPE_OBJECT = "Object"

#: A reference to another object.
TYPE_POINTER = "Pointer"

#: Base64 encoded binary data.
TYPE_BYTES = "Bytes"

#: A date/time, carried as an ISO 8601 string in UTC.
TYPE_DATE = "Date"

#: A location given as a latitude/longitude pair.
TYPE_GEOPOINT = "GeoPoint"

#: A file stored through the files endpoint.
TYPE_FILE = "File"

#: A to-many reference resolved server side.
TYPE_RELATION = "Relation"

SPECIAL_TYPES = frozenset(
    {
        TYPE_OBJECT,
        TYPE_POINTER,
        TYPE_BYTES,
        TYPE_DATE,
        TYPE_GEOPOINT,
        TYPE_FILE,
        TYPE_RELATION,
    }
)

# Built-in classes
# ----------------------------------------

#: Class name of User objects when referenced by a Pointer.
CLASS_USER = "_User"

CLASS_INSTALLATION = "_Installation"

# Resource paths
# ----------------------------------------

USER_LOGIN_URI = "/login"
PASSWORD_RESET_URI = "/requestPasswordReset"

CLOUD_FUNCTIONS_PATH = "functions"

BATCH_REQUEST_URI = "batch"

# Error codes returned by the server
# ----------------------------------------

ERROR_INTERNAL = 1
ERROR_TIMEOUT = 124
ERROR_EXCEEDED_BURST_LIMIT = 155
ERROR_OBJECT_NOT_FOUND_FOR_GET = 101

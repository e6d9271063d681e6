"""
Tests for the protocol constants.

The server matches these strings exactly, case included, so every value
is checked against its literal.
"""

import pytest

from bmob.protocol import constants as c


class TestHeaders:
    def test_header_literals(self):
        assert c.HEADER_APP_ID == "X-Bmob-Application-Id"
        assert c.HEADER_API_KEY == "X-Bmob-REST-API-Key"
        assert c.HEADER_MASTER_KEY == "X-Bmob-Master-Key"
        assert c.HEADER_SESSION_TOKEN == "X-Bmob-Session-Token"


class TestJSONKeys:
    @pytest.mark.parametrize(
        "name,literal",
        [
            ("KEY_CLASS_NAME", "className"),
            ("KEY_OBJECT_ID", "objectId"),
            ("KEY_CREATED_AT", "createdAt"),
            ("KEY_UPDATED_AT", "updatedAt"),
            ("KEY_USER_SESSION_TOKEN", "sessionToken"),
            ("KEY_RESULTS", "results"),
            ("RESPONSE_KEY_RESULTS", "results"),
            ("KEY_OP", "__op"),
            ("KEY_TYPE", "__type"),
            ("KEY_AMOUNT", "amount"),
            ("KEY_OBJECTS", "objects"),
        ],
    )
    def test_key_literal(self, name, literal):
        assert getattr(c, name) == literal


class TestTypesAndOperators:
    def test_special_type_literals(self):
        assert c.TYPE_OBJECT == "Object"
        assert c.TYPE_POINTER == "Pointer"
        assert c.TYPE_BYTES == "Bytes"
        assert c.TYPE_DATE == "Date"
        assert c.TYPE_GEOPOINT == "GeoPoint"
        assert c.TYPE_FILE == "File"
        assert c.TYPE_RELATION == "Relation"

    def test_operator_literals(self):
        assert c.KEY_INCREMENT == "Increment"
        assert c.OP_INCREMENT == "Increment"
        assert c.KEY_DELETE == "Delete"
        assert c.KEY_ADD == "Add"
        assert c.KEY_ADD_RELATION == "AddRelation"
        assert c.KEY_REMOVE_RELATION == "RemoveRelation"
        assert c.KEY_ADD_UNIQUE == "AddUnique"
        assert c.KEY_REMOVE == "Remove"

    def test_type_and_operator_namespaces_are_disjoint_keys(self):
        assert c.KEY_OP != c.KEY_TYPE

    def test_delete_op(self):
        assert dict(c.DELETE_OP) == {"__op": "Delete"}

    def test_delete_op_is_read_only(self):
        with pytest.raises(TypeError):
            c.DELETE_OP["__op"] = "Increment"

    def test_class_names(self):
        assert c.CLASS_USER == "_User"
        assert c.CLASS_INSTALLATION == "_Installation"


class TestReservedKeys:
    def test_exact_members(self):
        assert c.RESERVED_KEYS == {
            "className",
            "objectId",
            "createdAt",
            "updatedAt",
            "sessionToken",
        }

    def test_is_immutable(self):
        assert isinstance(c.RESERVED_KEYS, frozenset)

    def test_operator_tag_is_not_a_user_field(self):
        ## __op and __type must never be confused with reserved data fields
        assert c.KEY_OP not in c.RESERVED_KEYS
        assert c.KEY_TYPE not in c.RESERVED_KEYS


class TestMisc:
    def test_error_codes(self):
        assert c.ERROR_INTERNAL == 1
        assert c.ERROR_TIMEOUT == 124
        assert c.ERROR_EXCEEDED_BURST_LIMIT == 155
        assert c.ERROR_OBJECT_NOT_FOUND_FOR_GET == 101

    def test_host_and_path(self):
        assert c.HOST == "https://api.bmob.cn"
        assert c.PATH == "/1"

    def test_fixed_paths(self):
        assert c.USER_LOGIN_URI == "/login"
        assert c.PASSWORD_RESET_URI == "/requestPasswordReset"
        assert c.CLOUD_FUNCTIONS_PATH == "functions"
        assert c.BATCH_REQUEST_URI == "batch"


class TestRegistriesMatchTypes:
    def test_special_types_have_classes(self):
        from bmob.protocol.types import SPECIAL_VALUE_TYPES

        assert set(SPECIAL_VALUE_TYPES) == c.SPECIAL_TYPES

    def test_operators_have_classes(self):
        from bmob.protocol.types import FIELD_OPERATION_TYPES

        assert set(FIELD_OPERATION_TYPES) == c.OPERATORS

"""
Tests for the resource path builders.
"""

import pytest

from bmob.protocol.types import ResourceKind, ResourceRef
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


class TestUriHelpers:
    def test_config_uri(self):
        assert config_uri() == "/config"

    def test_class_uri_collection(self):
        assert class_uri("Foo") == "/classes/Foo"

    def test_class_uri_instance(self):
        assert class_uri("Foo", "abc123") == "/classes/Foo/abc123"

    def test_class_uri_empty_id_is_instance(self):
        assert class_uri("Foo", "") == "/classes/Foo/"

    def test_installation_uri(self):
        assert installation_uri() == "/installations"
        assert installation_uri("i1") == "/installations/i1"

    def test_user_uri(self):
        assert user_uri() == "/users"
        assert user_uri("u1") == "/users/u1"

    def test_user_uri_empty_id_is_instance(self):
        assert user_uri("") == "/users/"

    def test_file_uri(self):
        assert file_uri("pic.png") == "/files/pic.png"

    def test_push_uri(self):
        assert push_uri() == "/push"

    def test_cloud_function_uri(self):
        assert cloud_function_uri("hello") == "/functions/hello"

    def test_batch_request_uri(self):
        assert batch_request_uri() == "/batch"

    def test_login_and_password_reset(self):
        assert login_uri() == "/login"
        assert password_reset_uri() == "/requestPasswordReset"

    def test_names_are_embedded_verbatim(self):
        assert class_uri("My Class", "a/b") == "/classes/My Class/a/b"


class TestResourceUri:
    @pytest.mark.parametrize(
        "ref,expected",
        [
            (ResourceRef(ResourceKind.OBJECT, class_name="Foo"), "/classes/Foo"),
            (
                ResourceRef(ResourceKind.OBJECT, class_name="Foo", identifier="abc"),
                "/classes/Foo/abc",
            ),
            (ResourceRef(ResourceKind.INSTALLATION), "/installations"),
            (ResourceRef(ResourceKind.INSTALLATION, identifier="i1"), "/installations/i1"),
            (ResourceRef(ResourceKind.USER), "/users"),
            (ResourceRef(ResourceKind.USER, identifier="u1"), "/users/u1"),
            (ResourceRef(ResourceKind.FILE, class_name="pic.png"), "/files/pic.png"),
            (
                ResourceRef(ResourceKind.CLOUD_FUNCTION, class_name="hello"),
                "/functions/hello",
            ),
            (ResourceRef(ResourceKind.BATCH), "/batch"),
            (ResourceRef(ResourceKind.CONFIG), "/config"),
            (ResourceRef(ResourceKind.PUSH), "/push"),
            (ResourceRef(ResourceKind.LOGIN), "/login"),
            (ResourceRef(ResourceKind.PASSWORD_RESET), "/requestPasswordReset"),
        ],
    )
    def test_resource_uri(self, ref, expected):
        assert resource_uri(ref) == expected

    def test_every_kind_is_mapped(self):
        for kind in ResourceKind:
            ref = ResourceRef(kind, class_name="X")
            assert resource_uri(ref).startswith("/")

    def test_object_without_class_name(self):
        with pytest.raises(ValueError):
            resource_uri(ResourceRef(ResourceKind.OBJECT, identifier="abc"))

    @pytest.mark.parametrize(
        "kind",
        [
            ResourceKind.FILE,
            ResourceKind.CLOUD_FUNCTION,
            ResourceKind.BATCH,
            ResourceKind.CONFIG,
            ResourceKind.PUSH,
            ResourceKind.LOGIN,
            ResourceKind.PASSWORD_RESET,
        ],
    )
    def test_identifier_on_collection_only_kind(self, kind):
        with pytest.raises(ValueError):
            resource_uri(ResourceRef(kind, class_name="X", identifier="abc"))

    def test_resource_ref_is_frozen(self):
        ref = ResourceRef(ResourceKind.USER)
        with pytest.raises(AttributeError):
            ref.identifier = "u1"


class TestApiLocation:
    def test_api_path(self):
        assert api_path(class_uri("Foo")) == "/1/classes/Foo"

    def test_api_url_default_host(self):
        assert api_url(user_uri("u1")) == "https://api.bmob.cn/1/users/u1"

    def test_api_url_custom_host(self):
        assert api_url(batch_request_uri(), host="http://localhost:1337/") == (
            "http://localhost:1337/1/batch"
        )

    def test_api_url_host_with_prefix(self):
        assert api_url(push_uri(), host="https://example.com/parse") == (
            "https://example.com/parse/1/push"
        )

    def test_api_url_keeps_dot_segments(self):
        assert api_url(class_uri("Foo", "..")) == "https://api.bmob.cn/1/classes/Foo/.."
        assert api_url(file_uri("../secret.txt")) == (
            "https://api.bmob.cn/1/files/../secret.txt"
        )

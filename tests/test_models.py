from datetime import datetime

import pytest
from api_key_manager.errors import InvalidKeyCollectionError
from api_key_manager.masking import mask_key, SHORT_MASK
from api_key_manager.models import APIKey, BaseUrl, KeyCollection, KeyName


def make_key(name: str) -> APIKey:
    return APIKey(
        name=KeyName(name), key="sk-0123456789abcdef", created_at=datetime(2024, 1, 1)
    )


class TestKeyName:
    def test_equals_same_value(self):
        assert KeyName("openai").equals(KeyName("openai"))

    def test_equals_different_value(self):
        assert not KeyName("openai").equals(KeyName("anthropic"))

    def test_equals_none_is_false(self):
        assert KeyName("openai").equals(None) is False

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            KeyName("  ")


class TestBaseUrl:
    def test_valid(self):
        assert BaseUrl("https://api.example.com/v1").value == "https://api.example.com/v1"

    def test_invalid_scheme(self):
        with pytest.raises(ValueError):
            BaseUrl("ftp://example.com")


class TestKeyCollection:
    def test_get_all_preserves_order(self):
        keys = (make_key("c"), make_key("a"), make_key("b"))
        collection = KeyCollection(keys=keys)

        assert [k.name.value for k in collection.get_all()] == ["c", "a", "b"]

    def test_get_default(self):
        collection = KeyCollection(
            keys=(make_key("a"), make_key("b")), default_name=KeyName("b")
        )

        assert collection.get_default().name.value == "b"

    def test_no_default(self):
        assert KeyCollection(keys=(make_key("a"),)).get_default() is None

    def test_default_must_be_member(self):
        with pytest.raises(InvalidKeyCollectionError):
            KeyCollection(keys=(make_key("a"),), default_name=KeyName("missing"))

    def test_duplicate_names_rejected(self):
        with pytest.raises(InvalidKeyCollectionError):
            KeyCollection(keys=(make_key("a"), make_key("a")))

    def test_get_all_returns_copy(self):
        collection = KeyCollection(keys=(make_key("a"),))

        collection.get_all().clear()

        assert len(collection) == 1


class TestMaskKey:
    def test_long_key_reveals_prefix_and_suffix(self):
        assert mask_key("sk-abcdef123456") == "sk-a****3456"

    def test_short_key_fully_hidden(self):
        assert mask_key("abc") == SHORT_MASK
        assert mask_key("exactly12chr") == SHORT_MASK

    def test_empty_key(self):
        assert mask_key("") == SHORT_MASK

    def test_boundary_length_reveals(self):
        assert mask_key("abcdefghijklm") == "abcd****jklm"

    def test_mask_never_equals_secret(self):
        for secret in ["*" * 13, "abcd****efgh", "*" * 12, "abcd****efghi"]:
            assert mask_key(secret) != secret

    def test_distinguishes_keys(self):
        assert mask_key("sk-aaaa-1111-2222") != mask_key("sk-bbbb-3333-4444")

    def test_deterministic(self):
        assert mask_key("sk-abcdef123456") == mask_key("sk-abcdef123456")

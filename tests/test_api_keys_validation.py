"""Tests for fantasy_baseball.api_keys.validation."""

import pytest

from fantasy_baseball.api_keys.models import ApiKeyStatus
from fantasy_baseball.api_keys.validation import normalize_service_name, parse_status
from fantasy_baseball.errors import ValidationError


class TestNormalizeServiceName:
    def test_trims_and_lowercases(self):
        assert normalize_service_name("  Draft-Kit ") == "draft-kit"

    def test_accepts_digits_and_hyphens(self):
        assert normalize_service_name("svc-2") == "svc-2"

    def test_length_bounds(self):
        assert normalize_service_name("ab") == "ab"
        assert normalize_service_name("a" * 64) == "a" * 64
        with pytest.raises(ValidationError):
            normalize_service_name("a")
        with pytest.raises(ValidationError):
            normalize_service_name("a" * 65)

    @pytest.mark.parametrize("bad", ["draft_kit", "draft kit", "draft.kit", "dräft"])
    def test_illegal_characters(self, bad):
        with pytest.raises(ValidationError):
            normalize_service_name(bad)

    def test_non_string(self):
        with pytest.raises(ValidationError, match="must be a string"):
            normalize_service_name(42)

    def test_whitespace_only(self):
        with pytest.raises(ValidationError):
            normalize_service_name("   ")


class TestParseStatus:
    def test_valid(self):
        assert parse_status("active") is ApiKeyStatus.ACTIVE
        assert parse_status(" INACTIVE ") is ApiKeyStatus.INACTIVE

    def test_invalid(self):
        with pytest.raises(ValidationError, match="active, inactive"):
            parse_status("paused")

    def test_non_string(self):
        with pytest.raises(ValidationError):
            parse_status(None)

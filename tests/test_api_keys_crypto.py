"""Tests for fantasy_baseball.api_keys.crypto — key generation and hashing."""

import hashlib

from fantasy_baseball.api_keys.crypto import PREFIX_LENGTH, generate_raw_api_key, hash_api_key


class TestGenerateRawApiKey:
    def test_format(self):
        raw, prefix = generate_raw_api_key("draft-kit")
        assert raw.startswith("draft-kit_")
        token = raw[len("draft-kit_"):]
        # 32 random bytes, URL-safe base64 without padding
        assert len(token) == 43
        assert prefix == token[:PREFIX_LENGTH]
        assert len(prefix) == 10

    def test_unique(self):
        keys = {generate_raw_api_key("svc")[0] for _ in range(200)}
        assert len(keys) == 200


class TestHashApiKey:
    def test_peppered_sha256(self):
        expected = hashlib.sha256(b"pepper:svc_abc").hexdigest()
        assert hash_api_key("svc_abc", "pepper") == expected

    def test_deterministic(self):
        assert hash_api_key("k", "p") == hash_api_key("k", "p")

    def test_pepper_changes_hash(self):
        assert hash_api_key("k", "p1") != hash_api_key("k", "p2")

    def test_hex_length(self):
        assert len(hash_api_key("k", "p")) == 64

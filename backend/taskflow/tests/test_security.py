"""
Tests for password hashing and user id generation.
"""
import re
from taskflow.core.security import hash_password, verify_password, generate_user_id


def test_hash_is_hex_of_expected_length():
    """Salt is 16 bytes and the derived key 64 bytes, both hex encoded."""
    salt, password_hash = hash_password("correct horse")
    assert re.fullmatch(r"[0-9a-f]{32}", salt)
    assert re.fullmatch(r"[0-9a-f]{128}", password_hash)


def test_verify_accepts_original_password():
    for _ in range(3):
        salt, password_hash = hash_password("s3cret!")
        assert verify_password("s3cret!", salt, password_hash)


def test_verify_rejects_other_passwords():
    salt, password_hash = hash_password("s3cret!")
    for attempt in ["s3cret", "S3cret!", "s3cret! ", ""]:
        assert not verify_password(attempt, salt, password_hash)


def test_fresh_salt_per_call():
    """Hashing the same password twice gives different stored values."""
    first = hash_password("same-password")
    second = hash_password("same-password")
    assert first[0] != second[0]
    assert first[1] != second[1]


def test_generate_user_id_format():
    user_id = generate_user_id()
    assert re.fullmatch(r"user_[0-9a-f]{16}", user_id)
    assert len({generate_user_id() for _ in range(100)}) == 100

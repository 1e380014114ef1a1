"""Tests for the plaintext credential store."""

import pytest

from accounts import NoAccountsError, UnknownUserError, UserExistsError, UserStore


@pytest.fixture
def users(tmp_path):
    return UserStore(tmp_path / "users.txt")


def test_register_and_authenticate(users):
    users.register("alice@uni.edu", "s3cret")
    assert users.exists("alice@uni.edu")
    assert users.authenticate("alice@uni.edu", "s3cret") is True


def test_wrong_password(users):
    users.register("alice", "s3cret")
    assert users.authenticate("alice", "nope") is False


def test_unknown_user(users):
    users.register("alice", "s3cret")
    with pytest.raises(UnknownUserError):
        users.authenticate("bob", "s3cret")


def test_no_accounts_file(users):
    with pytest.raises(NoAccountsError):
        users.authenticate("alice", "s3cret")


def test_duplicate_register(users):
    users.register("alice", "one")
    with pytest.raises(UserExistsError):
        users.register("alice", "two")


@pytest.mark.parametrize(
    "username,password",
    [("", "pw"), ("   ", "pw"), ("alice", ""), ("al|ice", "pw"), ("alice", "p|w"),
     ("a/b", "pw"), ("../alice", "pw"), ("a\\b", "pw"), ("a:b", "pw")],
)
def test_invalid_credentials(users, username, password):
    with pytest.raises(ValueError):
        users.register(username, password)


def test_malformed_lines_skipped(users):
    users.path.write_text("garbage\nalice|pw|extra\nbob|pw\n", encoding="utf-8")
    assert users.authenticate("bob", "pw") is True
    with pytest.raises(UnknownUserError):
        users.authenticate("alice", "pw")


def test_file_format(users):
    users.register("alice", "pw")
    assert users.path.read_text(encoding="utf-8") == "alice|pw\n"

"""
Tests for AccountService: signup, login and watchlists
"""
from unittest.mock import patch

import pytest

from popcornpick.core.exceptions import (
    EmailTakenException, UserNotFoundException, ValidationException, WrongPasswordException
)
from popcornpick.services.account_service import AccountService


@pytest.fixture
def service(db_session):
    return AccountService(db_session, bcrypt_rounds=4)


class TestSignup:

    def test_create_then_authenticate(self, service):
        user = service.create("Ann", "ann@x.com", "secret123")
        assert user.id is not None
        assert user.password_hash != "secret123"
        assert user.watchlist == []
        assert service.authenticate("ann@x.com", "secret123").id == user.id

    @pytest.mark.parametrize("name,email,password", [
        ("", "ann@x.com", "secret123"),
        ("Ann", "", "secret123"),
        ("Ann", "ann@x.com", ""),
        ("   ", "ann@x.com", "secret123"),
        (None, "ann@x.com", "secret123"),
    ])
    def test_missing_fields(self, service, name, email, password):
        with pytest.raises(ValidationException) as exc_info:
            service.create(name, email, password)
        assert exc_info.value.message == "All fields are required"

    @pytest.mark.parametrize("email", ["ann", "ann@x", "ann@@x.com", "a nn@x.com", "@x.com"])
    def test_invalid_email(self, service, email):
        with pytest.raises(ValidationException) as exc_info:
            service.create("Ann", email, "secret123")
        assert exc_info.value.message == "Invalid email address"

    def test_email_taken(self, service):
        service.create("Ann", "ann@x.com", "secret123")
        service.create("Ann", "ann@x.co", "secret123")
        service.create("Ann", "ann1@x.com", "secret123")
        with pytest.raises(EmailTakenException) as exc_info:
            service.create("Other", "ann@x.com", "different")
        assert exc_info.value.status_code == 400

    def test_unique_constraint_rejects_duplicate_that_passed_precheck(self, service):
        service.create("Ann", "ann@x.com", "secret123")
        with patch.object(service.user_repository, "email_exists", return_value=False):
            with pytest.raises(EmailTakenException):
                service.create("Ann again", "ann@x.com", "secret123")
        # session is still usable after the rollback
        assert service.authenticate("ann@x.com", "secret123").name == "Ann"

    def test_password_longer_than_bcrypt_limit(self, service):
        with pytest.raises(ValidationException):
            service.create("Ann", "ann@x.com", "x" * 73)


class TestLogin:

    def test_unknown_email(self, service):
        with pytest.raises(UserNotFoundException) as exc_info:
            service.authenticate("nobody@x.com", "secret123")
        assert exc_info.value.status_code == 400

    def test_wrong_password(self, service):
        service.create("Ann", "ann@x.com", "secret123")
        with pytest.raises(WrongPasswordException) as exc_info:
            service.authenticate("ann@x.com", "wrong")
        assert exc_info.value.message == "Wrong password"

    def test_missing_credentials(self, service):
        with pytest.raises(ValidationException):
            service.authenticate("ann@x.com", None)


class TestWatchlist:

    def test_add_is_idempotent(self, service):
        user = service.create("Ann", "ann@x.com", "secret123")
        assert service.add_to_watchlist(user.id, "603") is True
        assert service.add_to_watchlist(user.id, 603) is False
        assert service.get_watchlist(user.id) == [603]

    def test_reads_back_in_insertion_order(self, service):
        user = service.create("Ann", "ann@x.com", "secret123")
        for movie_id in [550, 13, 603, 13]:
            service.add_to_watchlist(user.id, movie_id)
        assert service.get_watchlist(user.id) == [550, 13, 603]

    def test_watchlists_are_per_user(self, service):
        ann = service.create("Ann", "ann@x.com", "secret123")
        bob = service.create("Bob", "bob@x.com", "secret123")
        service.add_to_watchlist(ann.id, 603)
        assert service.get_watchlist(bob.id) == []

    @pytest.mark.parametrize("movie_id", ["0", "-5", "abc", "1.5", "", None, 0, -1, True, "2147483648", 2**31])
    def test_invalid_movie_id(self, service, movie_id):
        user = service.create("Ann", "ann@x.com", "secret123")
        with pytest.raises(ValidationException) as exc_info:
            service.add_to_watchlist(user.id, movie_id)
        assert exc_info.value.message == "Invalid movie id"

    def test_add_for_unknown_user(self, service):
        with pytest.raises(UserNotFoundException) as exc_info:
            service.add_to_watchlist(999, 603)
        assert exc_info.value.status_code == 404

    def test_read_for_unknown_user(self, service):
        with pytest.raises(UserNotFoundException):
            service.get_watchlist(999)

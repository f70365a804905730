"""Unit tests for UserService, with the repository mocked out."""

from unittest.mock import Mock

import pytest

from user_crud_api.app.core.exceptions import UserNotFoundError
from user_crud_api.app.repositories.user_repository import UserRepository
from user_crud_api.app.schemas.user import User
from user_crud_api.app.services.user_service import UserService


@pytest.fixture
def repository():
    """Return a mock repository."""
    return Mock(spec=UserRepository)


@pytest.fixture
def service(repository):
    """Return a service wired to the mock repository."""
    return UserService(repository)


@pytest.fixture
def ana():
    return User(id=1, name="Ana", email="ana@test.com")


class TestReads:
    """Listing and lookups."""

    def test_list_users_returns_all(self, service, repository, ana):
        repository.list.return_value = [ana]

        result = service.list_users()

        assert result == [ana]
        repository.list.assert_called_once_with()

    def test_get_user_by_id(self, service, repository, ana):
        repository.get.return_value = ana

        assert service.get_user_by_id(1) == ana
        repository.get.assert_called_once_with(1)

    def test_get_user_by_id_not_found(self, service, repository):
        repository.get.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            service.get_user_by_id(99)

        assert str(exc_info.value) == "99 not found"

    def test_get_user_by_name(self, service, repository, ana):
        repository.get_by_name.return_value = ana

        assert service.get_user_by_name("Ana").name == "Ana"
        repository.get_by_name.assert_called_once_with("Ana")

    def test_get_user_by_name_not_found(self, service, repository):
        repository.get_by_name.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            service.get_user_by_name("Ghost")

        assert str(exc_info.value) == "Ghost not found"


class TestInsert:
    """Creating users."""

    def test_insert_user_saves_and_returns_stored_user(self, service, repository):
        repository.save.return_value = User(id=7, name="Bob", email="bob@test.com")

        result = service.insert_user(User(name="Bob", email="bob@test.com"))

        repository.save.assert_called_once_with(User(id=None, name="Bob", email="bob@test.com"))
        assert result.id == 7

    def test_insert_user_drops_caller_supplied_id(self, service, repository):
        repository.save.return_value = User(id=3, name="Bob", email="bob@test.com")

        service.insert_user(User(id=42, name="Bob", email="bob@test.com"))

        saved = repository.save.call_args.args[0]
        assert saved.id is None

    def test_insert_user_allows_missing_fields(self, service, repository):
        repository.save.return_value = User(id=1)

        service.insert_user(User())

        repository.save.assert_called_once_with(User(id=None, name=None, email=None))


class TestDelete:
    """Deleting by id and by name."""

    def test_delete_by_id_when_exists(self, service, repository):
        repository.exists.return_value = True

        service.delete_by_id(1)

        repository.exists.assert_called_once_with(1)
        repository.delete_by_id.assert_called_once_with(1)

    def test_delete_by_id_not_found_does_not_delete(self, service, repository):
        repository.exists.return_value = False

        with pytest.raises(UserNotFoundError) as exc_info:
            service.delete_by_id(99)

        assert str(exc_info.value) == "User with ID 99 does not exist and cannot be deleted."
        repository.delete_by_id.assert_not_called()
        repository.delete.assert_not_called()

    def test_delete_by_name_deletes_resolved_record(self, service, repository, ana):
        repository.get_by_name.return_value = ana

        service.delete_by_name("Ana")

        repository.get_by_name.assert_called_once_with("Ana")
        repository.delete.assert_called_once_with(ana)
        repository.delete_by_id.assert_not_called()

    def test_delete_by_name_not_found_does_not_delete(self, service, repository):
        repository.get_by_name.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            service.delete_by_name("Ghost")

        assert str(exc_info.value) == "User with name Ghost does not exist and cannot be deleted."
        repository.delete.assert_not_called()
        repository.delete_by_id.assert_not_called()


class TestUpdateMerge:
    """The field-by-field merge applied by update_user."""

    def test_differing_fields_are_applied(self, service, repository):
        existing = User(id=1, name="Old", email="old@test.com")
        repository.get.return_value = existing

        service.update_user(User(id=1, name="New", email="new@test.com"))

        assert existing.name == "New"
        assert existing.email == "new@test.com"
        repository.save.assert_called_once_with(existing)

    def test_null_and_empty_fields_are_ignored(self, service, repository):
        existing = User(id=1, name="Existing Name", email="existing@test.com")
        repository.get.return_value = existing

        service.update_user(User(id=1, name=None, email=""))

        assert existing.name == "Existing Name"
        assert existing.email == "existing@test.com"
        repository.save.assert_called_once_with(existing)

    def test_identical_fields_still_save_once(self, service, repository):
        existing = User(id=1, name="Same Name", email="same@test.com")
        repository.get.return_value = existing

        service.update_user(User(id=1, name="Same Name", email="same@test.com"))

        assert existing == User(id=1, name="Same Name", email="same@test.com")
        repository.save.assert_called_once_with(existing)

    def test_only_one_field_changes(self, service, repository):
        existing = User(id=1, name="Ana", email="ana@test.com")
        repository.get.return_value = existing

        service.update_user(User(id=1, name="", email="ana@new.com"))

        assert existing.name == "Ana"
        assert existing.email == "ana@new.com"

    def test_stored_null_field_can_be_filled(self, service, repository):
        existing = User(id=1, name=None, email=None)
        repository.get.return_value = existing

        service.update_user(User(id=1, name="Ana", email="ana@test.com"))

        assert existing.name == "Ana"
        assert existing.email == "ana@test.com"

    def test_not_found_does_not_save(self, service, repository):
        repository.get.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            service.update_user(User(id=99, name="New", email="new@test.com"))

        assert str(exc_info.value) == "User with ID 99 does not exist and cannot be updated."
        repository.save.assert_not_called()

    def test_missing_id_is_not_found(self, service, repository):
        with pytest.raises(UserNotFoundError):
            service.update_user(User(name="New"))

        repository.get.assert_not_called()
        repository.save.assert_not_called()

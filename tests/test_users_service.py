"""Unit tests for app.services.users against a mocked session (store failure paths)."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError, OperationalError

from app.core.errors import DuplicateEmailError, NotFoundError, ServerError
from app.models import User
from app.schemas.auth import RegisterRequest
from app.schemas.upload import ImageUpload
from app.schemas.users import ProfileUpdate
from app.services.users import register_user, update_user_profile

USER_ID = "65a1f0c2b3d4e5f60718293a"


def _register_body() -> RegisterRequest:
    return RegisterRequest(name="A", username="a1", email="a@x.com", password="pw")


def _session_without_users() -> MagicMock:
    db = MagicMock()
    db.query.return_value.filter.return_value.first.return_value = None
    return db


class TestRegisterUserStoreFailures(unittest.TestCase):
    def test_unique_violation_on_commit_is_duplicate_email(self) -> None:
        db = _session_without_users()
        db.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))
        with self.assertRaises(DuplicateEmailError):
            register_user(db, _register_body())
        db.rollback.assert_called_once()

    def test_other_store_error_is_server_error(self) -> None:
        db = _session_without_users()
        db.commit.side_effect = OperationalError("INSERT", {}, Exception("connection lost"))
        with self.assertRaises(ServerError) as ctx:
            register_user(db, _register_body())
        self.assertEqual(ctx.exception.status_code, 500)
        db.rollback.assert_called_once()

    def test_existing_email_is_rejected_before_insert(self) -> None:
        db = MagicMock()
        db.query.return_value.filter.return_value.first.return_value = User(email="a@x.com")
        with self.assertRaises(DuplicateEmailError):
            register_user(db, _register_body())
        db.add.assert_not_called()


class TestUpdateUserProfile(unittest.TestCase):
    def test_missing_user_does_not_touch_storage(self) -> None:
        db = MagicMock()
        db.get.return_value = None
        storage = MagicMock()
        with self.assertRaises(NotFoundError):
            update_user_profile(
                db,
                USER_ID,
                ProfileUpdate(name="B"),
                ImageUpload(filename="me.png", content=b"png"),
                storage,
            )
        storage.save.assert_not_called()
        db.commit.assert_not_called()

    def test_duplicate_email_on_commit_removes_saved_image(self) -> None:
        db = MagicMock()
        db.get.return_value = User(id=USER_ID, name="A", username="a1", email="a@x.com")
        db.commit.side_effect = IntegrityError("UPDATE", {}, Exception("duplicate key"))
        storage = MagicMock()
        storage.save.return_value = "uploads/123-abc.png"
        with self.assertRaises(DuplicateEmailError):
            update_user_profile(
                db,
                USER_ID,
                ProfileUpdate(email="taken@x.com"),
                ImageUpload(filename="me.png", content=b"png"),
                storage,
            )
        db.rollback.assert_called_once()
        storage.delete.assert_called_once_with("uploads/123-abc.png")

    def test_store_error_on_commit_removes_saved_image(self) -> None:
        db = MagicMock()
        db.get.return_value = User(id=USER_ID, name="A", username="a1", email="a@x.com")
        db.commit.side_effect = OperationalError("UPDATE", {}, Exception("connection lost"))
        storage = MagicMock()
        storage.save.return_value = "uploads/123-abc.png"
        with self.assertRaises(ServerError):
            update_user_profile(
                db,
                USER_ID,
                ProfileUpdate(),
                ImageUpload(filename="me.png", content=b"png"),
                storage,
            )
        storage.delete.assert_called_once_with("uploads/123-abc.png")

    def test_commit_failure_without_image_deletes_nothing(self) -> None:
        db = MagicMock()
        db.get.return_value = User(id=USER_ID, name="A", username="a1", email="a@x.com")
        db.commit.side_effect = IntegrityError("UPDATE", {}, Exception("duplicate key"))
        storage = MagicMock()
        with self.assertRaises(DuplicateEmailError):
            update_user_profile(db, USER_ID, ProfileUpdate(email="taken@x.com"), None, storage)
        storage.delete.assert_not_called()

    def test_only_set_fields_are_applied(self) -> None:
        user = User(id=USER_ID, name="A", username="a1", email="a@x.com", phone="1")
        db = MagicMock()
        db.get.return_value = user
        storage = MagicMock()
        storage.save.return_value = "uploads/123-abc.png"

        result = update_user_profile(
            db,
            USER_ID,
            ProfileUpdate(phone="555-0100"),
            ImageUpload(filename="me.png", content=b"png"),
            storage,
        )

        self.assertIs(result, user)
        self.assertEqual(user.phone, "555-0100")
        self.assertEqual(user.name, "A")
        self.assertEqual(user.email, "a@x.com")
        self.assertEqual(user.profile_image, "uploads/123-abc.png")
        db.commit.assert_called_once()


if __name__ == "__main__":
    unittest.main()

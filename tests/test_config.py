"""Unit tests for app.core.config.Settings validation."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


def _settings(**values: object) -> Settings:
    return Settings(_env_file=None, **values)


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        s = _settings()
        self.assertEqual(s.API_V1_PREFIX, "/api/v1")
        self.assertEqual(s.JWT_ALGORITHM, "HS256")
        self.assertEqual(s.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(s.UPLOAD_DIR, "uploads")

    def test_blank_jwt_secret_is_unset(self) -> None:
        self.assertIsNone(_settings(JWT_SECRET="   ").JWT_SECRET)

    def test_jwt_secret_is_kept(self) -> None:
        self.assertEqual(_settings(JWT_SECRET="s3cret").JWT_SECRET.get_secret_value(), "s3cret")

    def test_log_level_is_normalized(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL=" debug ").LOG_LEVEL, "DEBUG")

    def test_non_postgres_database_url_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://root@localhost/seedshare")

    def test_cloudinary_base_url_must_be_http(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(CLOUDINARY_API_BASE_URL="ftp://api.cloudinary.com")
        self.assertEqual(
            _settings(CLOUDINARY_API_BASE_URL="https://api.cloudinary.com/v1_1/").CLOUDINARY_API_BASE_URL,
            "https://api.cloudinary.com/v1_1",
        )

    def test_cloudinary_timeout_bounds(self) -> None:
        for value in (0, -1, 121):
            with self.assertRaises(ValidationError):
                _settings(CLOUDINARY_REQUEST_TIMEOUT_SEC=value)

    def test_upload_dir_trailing_slash_is_stripped(self) -> None:
        self.assertEqual(_settings(UPLOAD_DIR="media/uploads/").UPLOAD_DIR, "media/uploads")


if __name__ == "__main__":
    unittest.main()

"""Unit tests for codepad.core.config validators."""

import unittest

from pydantic import SecretStr
from pydantic import ValidationError as PydanticValidationError

from codepad.core.config import Settings


class TestSettingsDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        s = Settings(DATABASE_URL="sqlite://")
        self.assertEqual(s.PORT, 5000)
        self.assertEqual(s.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(s.JWT_ALGORITHM, "HS256")
        self.assertEqual(s.BCRYPT_ROUNDS, 4)  # from the test environment


class TestSettingsValidation(unittest.TestCase):
    """Invalid values fail at startup rather than on the first request."""

    def test_rejects_unknown_database_scheme(self) -> None:
        with self.assertRaises(PydanticValidationError):
            Settings(DATABASE_URL="mongodb://localhost:27017/codepad")

    def test_rejects_empty_database_url(self) -> None:
        with self.assertRaises(PydanticValidationError):
            Settings(DATABASE_URL="   ")

    def test_rejects_blank_secret(self) -> None:
        with self.assertRaises(PydanticValidationError):
            Settings(DATABASE_URL="sqlite://", JWT_SECRET=SecretStr(" "))

    def test_rejects_port_out_of_range(self) -> None:
        with self.assertRaises(PydanticValidationError):
            Settings(DATABASE_URL="sqlite://", PORT=70000)

    def test_rejects_bcrypt_rounds_out_of_range(self) -> None:
        with self.assertRaises(PydanticValidationError):
            Settings(DATABASE_URL="sqlite://", BCRYPT_ROUNDS=3)

    def test_normalizes_log_level(self) -> None:
        s = Settings(DATABASE_URL="sqlite://", LOG_LEVEL="debug")
        self.assertEqual(s.LOG_LEVEL, "DEBUG")


if __name__ == "__main__":
    unittest.main()

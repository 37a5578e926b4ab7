"""Tests for codepad.core.database: table creation and survival of a failed startup connection."""

import unittest
from unittest.mock import patch

from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from codepad.core import database
from codepad.core.database import init_db


class TestInitDb(unittest.TestCase):
    def test_creates_tables_with_app_loaded(self) -> None:
        from codepad.main import app  # noqa: F401

        engine = create_engine("sqlite://", poolclass=StaticPool)
        self.assertTrue(init_db(bind=engine))
        tables = set(inspect(engine).get_table_names())
        self.assertEqual(tables, {"users", "projects"})
        columns = {c["name"] for c in inspect(engine).get_columns("projects")}
        self.assertIn("created_at", columns)

    def test_failed_connection_is_logged_not_raised(self) -> None:
        error = OperationalError("CREATE TABLE", {}, Exception("connection refused"))
        with patch.object(database.Base.metadata, "create_all", side_effect=error):
            with self.assertLogs("codepad.core.database", level="ERROR") as logs:
                self.assertFalse(init_db())
        self.assertIn("Database connection failed at startup", logs.output[0])


if __name__ == "__main__":
    unittest.main()

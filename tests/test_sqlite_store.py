import os
import tempfile
import unittest

from auth.exceptions import ConflictError
from auth.stores.sqlite_store import SQLiteUserStore


def _record(username="asha", email="asha@example.com"):
    return {
        "username": username,
        "email": email,
        "hashed_password": "$2b$10$hash",
        "financial_profile": {
            "MonthlyIncome": 5000,
            "loanHistory": [{"status": "paid"}, {"status": "unpaid"}],
        },
        "retained_file_path": "uploads/retained/copy-1.json",
    }


class TestSQLiteUserStore(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = SQLiteUserStore(os.path.join(self._tmp.name, "auth.db"))

    def tearDown(self):
        self._tmp.cleanup()

    async def test_create_round_trips_profile_document(self):
        created = await self.store.create_user(_record())
        self.assertIsInstance(created["id"], int)
        self.assertEqual(
            created["financial_profile"],
            {"MonthlyIncome": 5000, "loanHistory": [{"status": "paid"}, {"status": "unpaid"}]},
        )

        fetched = await self.store.get_by_username("asha")
        self.assertEqual(fetched, created)
        self.assertEqual(await self.store.get_by_email("ASHA@EXAMPLE.COM"), created)

    async def test_unknown_user_is_none(self):
        self.assertIsNone(await self.store.get_by_username("nobody"))
        self.assertIsNone(await self.store.get_by_email("nobody@example.com"))

    async def test_duplicate_username_conflicts(self):
        await self.store.create_user(_record())
        with self.assertRaises(ConflictError):
            await self.store.create_user(_record(email="other@example.com"))

    async def test_duplicate_email_conflicts(self):
        await self.store.create_user(_record())
        with self.assertRaises(ConflictError):
            await self.store.create_user(_record(username="other", email="Asha@example.com"))
        self.assertIsNone(await self.store.get_by_username("other"))

    async def test_schema_survives_reopen(self):
        await self.store.create_user(_record())
        reopened = SQLiteUserStore(os.path.join(self._tmp.name, "auth.db"))
        self.assertIsNotNone(await reopened.get_by_username("asha"))


if __name__ == "__main__":
    unittest.main()

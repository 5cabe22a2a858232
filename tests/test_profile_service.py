import unittest

from auth.exceptions import InternalError, NotFoundError
from auth.services.profile_service import ProfileService
from auth.stores.memory_store import MemoryUserStore
from services.score_engine import ScoringPolicy

PROFILE = {
    "MonthlyIncome": 5000,
    "loanHistory": [{"status": "paid"}, {"status": "paid"}, {"status": "unpaid"}],
}


class BrokenUserStore(MemoryUserStore):
    async def get_by_username(self, username: str) -> dict | None:
        raise RuntimeError("database unavailable")


class TestProfileService(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.users = MemoryUserStore()
        await self.users.create_user(
            {
                "username": "asha",
                "email": "asha@example.com",
                "hashed_password": "$2b$10$hash",
                "financial_profile": PROFILE,
                "retained_file_path": "uploads/retained/copy-asha.json",
            }
        )

    async def test_read_profile_includes_score(self):
        service = ProfileService(self.users, ScoringPolicy())
        result = await service.read_profile("asha")
        self.assertEqual(
            result,
            {
                "username": "asha",
                "email": "asha@example.com",
                "financial_profile": PROFILE,
                "cibil_score": 660,
            },
        )

    async def test_score_follows_current_policy(self):
        # Same stored record, different deployment policy
        generous = ProfileService(self.users, ScoringPolicy(baseline=650, increment=100, ceiling=800))
        self.assertEqual((await generous.read_profile("asha"))["cibil_score"], 800)

        default = ProfileService(self.users, ScoringPolicy())
        self.assertEqual((await default.read_profile("asha"))["cibil_score"], 660)

    async def test_unknown_user(self):
        service = ProfileService(self.users, ScoringPolicy())
        with self.assertRaises(NotFoundError) as ctx:
            await service.read_profile("nobody")
        self.assertEqual(ctx.exception.status_code, 404)

    async def test_store_failure_is_internal(self):
        service = ProfileService(BrokenUserStore(), ScoringPolicy())
        with self.assertRaises(InternalError):
            await service.read_profile("asha")

    async def test_policy_defaults_from_config(self):
        service = ProfileService(self.users)
        self.assertEqual((await service.read_profile("asha"))["cibil_score"], 660)


if __name__ == "__main__":
    unittest.main()

# =============================================
# tests/seed_test.py
# =============================================
import unittest

from trainhub.database.models.organization_profile import OrganizationProfile
from trainhub.database.models.training_category import TrainingCategory
from trainhub.database.models.training_location import TrainingLocation
from trainhub.database.models.user import User
from trainhub.database.seed import seed
from trainhub.schemas.enums import VerificationStatus
from tests.base_test_lib import BaseTestLib


class TestSeed(BaseTestLib):
    async def test_seed_is_idempotent(self):
        first = await seed(self.session)
        second = await seed(self.session)

        self.assertEqual(first, {"users": 4, "reference_data": 10})
        self.assertEqual(second, {"users": 0, "reference_data": 0})
        self.assertEqual(len(await self.fetch(User)), 4)

        categories = sorted(row.name for row in await self.fetch(TrainingCategory))
        self.assertEqual(categories, ["Frameworks", "Fundamentals", "Soft Skills"])
        districts = sorted(row.district for row in await self.fetch(TrainingLocation))
        self.assertEqual(districts, ["Austin", "Manhattan", "San Francisco"])

        [organization] = await self.fetch(OrganizationProfile)
        self.assertEqual(organization.verified_status, VerificationStatus.VERIFIED)

    async def test_seeded_admin_can_log_in(self):
        await seed(self.session)

        response = await self.client.post(
            "/api/auth/login", json={"email": "admin@example.com", "password": "admin123"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["user"]["role"], "ADMIN")


if __name__ == "__main__":
    unittest.main()

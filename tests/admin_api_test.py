# =============================================
# tests/admin_api_test.py
# =============================================
import unittest
from datetime import datetime, timedelta, timezone

from trainhub.schemas.enums import AvailabilityStatus, UserRole, VerificationStatus
from tests.base_test_lib import BaseTestLib

URL = "/api/admin"


class TestDashboard(BaseTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.admin, self.headers = await self.create_admin()

    async def test_stats(self):
        category, location, stack = await self.create_reference_data()
        _, organization = await self.create_user(
            UserRole.ORGANIZATION, "owner@acme.io", verified_status=VerificationStatus.PENDING
        )
        await self.create_user(UserRole.FREELANCER, "tess@trainers.dev", name="Tess")
        await self.create_user(
            UserRole.FREELANCER, "uma@trainers.dev", availability=AvailabilityStatus.NOT_AVAILABLE
        )
        await self.create_user(UserRole.MAINTAINER, "reviewer@trainhub.io")

        now = datetime.now(timezone.utc)
        await self.create_training(
            organization, category, location, stack,
            start_date=now - timedelta(days=1), end_date=now + timedelta(days=1)
        )
        await self.create_training(organization, category, location, stack, title="Upcoming")

        response = await self.client.get(f"{URL}/dashboard/stats", headers=self.headers)

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["totalUsers"], 5)
        self.assertEqual(body["totalOrganizations"], 1)
        self.assertEqual(body["totalFreelancers"], 2)
        self.assertEqual(body["totalMaintainers"], 1)
        self.assertEqual(body["totalTrainings"], 2)
        self.assertEqual(body["activeTrainings"], 1)
        self.assertEqual(body["pendingVerifications"], 2)

        activities = body["recentActivities"]
        self.assertEqual(len(activities), 3)
        self.assertEqual(
            {activity["type"] for activity in activities}, {"organization", "freelancer"}
        )
        self.assertIn("New freelancer registered", [activity["action"] for activity in activities])

    async def test_admin_only(self):
        maintainer, _ = await self.create_user(UserRole.MAINTAINER, "reviewer@trainhub.io")

        response = await self.client.get(f"{URL}/dashboard/stats", headers=self.auth_headers(maintainer))

        self.assertEqual(response.status_code, 401)


class TestAdminProfile(BaseTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.admin, self.headers = await self.create_admin()

    async def test_get_profile(self):
        response = await self.client.get(f"{URL}/profile", headers=self.headers)

        self.assertEqual(response.json()["email"], "admin@trainhub.io")
        self.assertEqual(response.json()["role"], "ADMIN")

    async def test_update_profile(self):
        response = await self.client.put(
            f"{URL}/profile", json={"name": "Root", "email": "Root@TrainHub.io"}, headers=self.headers
        )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["message"], "Profile updated successfully")
        self.assertEqual(body["data"]["email"], "root@trainhub.io")
        self.assertEqual(body["data"]["name"], "Root")

    async def test_update_profile_email_taken(self):
        await self.create_user(UserRole.MAINTAINER, "reviewer@trainhub.io")

        response = await self.client.put(
            f"{URL}/profile", json={"email": "reviewer@trainhub.io"}, headers=self.headers
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Email already exists"})


if __name__ == "__main__":
    unittest.main()

# =============================================
# tests/users_api_test.py
# =============================================
import unittest
from uuid import uuid4

from trainhub.database.models.freelancer_profile import FreelancerProfile
from trainhub.database.models.maintainer_profile import MaintainerProfile
from trainhub.database.models.organization_profile import OrganizationProfile
from trainhub.database.models.training import Training
from trainhub.database.models.user import User
from trainhub.schemas.enums import ActiveStatus, AvailabilityStatus, UserRole
from tests.base_test_lib import BaseTestLib

URL = "/api/users"


class TestUserManagement(BaseTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.admin, self.headers = await self.create_admin()

    async def test_create_freelancer_with_profile(self):
        response = await self.client.post(
            URL,
            json={"email": "Trainer@Trainers.dev", "password": "secret123", "role": "FREELANCER", "name": "Tess"},
            headers=self.headers
        )

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["email"], "trainer@trainers.dev")
        self.assertEqual(body["freelancerProfile"]["trainerType"], "BOTH")
        self.assertIsNone(body["organizationProfile"])
        self.assertEqual(len(await self.fetch(FreelancerProfile)), 1)

    async def test_create_organization_user_gets_profile(self):
        response = await self.client.post(
            URL,
            json={"email": "org@acme.io", "password": "secret123", "role": "ORGANIZATION", "name": "Acme"},
            headers=self.headers
        )

        self.assertEqual(response.json()["organizationProfile"]["organizationName"], "Acme")

    async def test_create_validation_order(self):
        response = await self.client.post(URL, json={"email": "x@acme.io"}, headers=self.headers)
        self.assertEqual(response.json(), {"error": "Missing required fields"})

        response = await self.client.post(
            URL, json={"email": "x@acme.io", "password": "secret123", "role": "OWNER"}, headers=self.headers
        )
        self.assertEqual(response.json(), {"error": "Invalid role"})

        response = await self.client.post(
            URL, json={"email": "x@acme.io", "password": "123", "role": "MAINTAINER"}, headers=self.headers
        )
        self.assertEqual(response.json(), {"error": "Password must be at least 6 characters long"})

        response = await self.client.post(
            URL, json={"email": self.admin.email, "password": "secret123", "role": "MAINTAINER"}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "User already exists"})

    async def test_list_and_get(self):
        await self.create_user(UserRole.MAINTAINER, "reviewer@trainhub.io")

        response = await self.client.get(URL, headers=self.headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 2)

        response = await self.client.get(f"{URL}/{uuid4()}", headers=self.headers)
        self.assertEqual(response.json(), {"error": "User not found"})

    async def test_update_rejects_taken_email(self):
        user, _ = await self.create_user(UserRole.MAINTAINER, "reviewer@trainhub.io")

        response = await self.client.put(
            f"{URL}/{user.id}", json={"email": self.admin.email}, headers=self.headers
        )
        self.assertEqual(response.json(), {"error": "Email already exists"})

        response = await self.client.put(
            f"{URL}/{user.id}", json={"name": "Rita", "phone": ""}, headers=self.headers
        )
        self.assertEqual(response.json()["name"], "Rita")

    async def test_non_admin_is_rejected(self):
        maintainer, _ = await self.create_user(UserRole.MAINTAINER, "reviewer@trainhub.io")

        response = await self.client.get(URL, headers=self.auth_headers(maintainer))

        self.assertEqual(response.status_code, 401)


class TestUserBulkAndDelete(BaseTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.admin, self.headers = await self.create_admin()
        self.org_user, self.organization = await self.create_user(UserRole.ORGANIZATION, "owner@acme.io")
        self.trainer, self.freelancer = await self.create_user(UserRole.FREELANCER, "trainer@trainers.dev")
        self.reviewer, self.maintainer = await self.create_user(UserRole.MAINTAINER, "reviewer@trainhub.io")

    async def test_deactivate_lands_on_each_profile(self):
        ids = [str(self.org_user.id), str(self.trainer.id), str(self.reviewer.id)]

        response = await self.client.patch(
            URL, json={"userIds": ids, "action": "deactivate"}, headers=self.headers
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["count"], 3)
        [organization] = await self.fetch(OrganizationProfile)
        [freelancer] = await self.fetch(FreelancerProfile)
        [maintainer] = await self.fetch(MaintainerProfile)
        self.assertEqual(organization.active_status, ActiveStatus.INACTIVE)
        self.assertEqual(freelancer.availability, AvailabilityStatus.NOT_AVAILABLE)
        self.assertEqual(maintainer.status, ActiveStatus.INACTIVE)

    async def test_bulk_delete_runs_role_cascades(self):
        category, location, stack = await self.create_reference_data()
        await self.create_training(self.organization, category, location, stack)

        response = await self.client.patch(
            URL,
            json={"ids": [str(self.org_user.id), str(self.trainer.id)], "action": "delete"},
            headers=self.headers
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(await self.fetch(Training), [])
        self.assertEqual(await self.fetch(OrganizationProfile), [])
        self.assertEqual(await self.fetch(FreelancerProfile), [])
        remaining = sorted(user.email for user in await self.fetch(User))
        self.assertEqual(remaining, ["admin@trainhub.io", "reviewer@trainhub.io"])

    async def test_bulk_with_malformed_id(self):
        response = await self.client.patch(
            URL, json={"userIds": [str(self.trainer.id), "bogus"], "action": "delete"}, headers=self.headers
        )

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "User not found: bogus"})
        self.assertEqual(len(await self.fetch(User)), 4)

    async def test_delete_single_user(self):
        response = await self.client.delete(URL, params={"id": str(self.reviewer.id)}, headers=self.headers)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "User deleted successfully")
        self.assertEqual(await self.fetch(MaintainerProfile), [])

    async def test_delete_requires_id(self):
        response = await self.client.delete(URL, headers=self.headers)

        self.assertEqual(response.json(), {"error": "User ID is required"})


if __name__ == "__main__":
    unittest.main()

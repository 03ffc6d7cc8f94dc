# =============================================
# tests/maintainers_api_test.py
# =============================================
import unittest
from uuid import uuid4

from trainhub.database.models.maintainer_profile import MaintainerProfile
from trainhub.database.models.training_feedback import TrainingFeedback
from trainhub.database.models.user import User
from trainhub.schemas.enums import ActiveStatus, UserRole
from tests.base_test_lib import BaseTestLib

URL = "/api/maintainers"


class TestMaintainers(BaseTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.admin, self.headers = await self.create_admin()

    async def test_create_and_list_with_reviews(self):
        created = await self.client.post(
            URL,
            json={"email": "rita@trainhub.io", "password": "secret123", "name": "Rita"},
            headers=self.headers
        )
        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.json()["status"], "ACTIVE")
        self.assertEqual(created.json()["reviewsCount"], 0)

        [reviewer] = await self.fetch(User, User.email == "rita@trainhub.io")
        category, location, stack = await self.create_reference_data()
        _, organization = await self.create_user(UserRole.ORGANIZATION, "owner@acme.io")
        training = await self.create_training(organization, category, location, stack)
        await self.create_feedback(training, organization, reviewer=reviewer)

        response = await self.client.get(URL, params={"search": "rit"}, headers=self.headers)

        [item] = response.json()
        self.assertEqual(item["id"], str(reviewer.id))
        self.assertEqual(item["reviewsCount"], 1)

    async def test_create_validation(self):
        response = await self.client.post(URL, json={"name": "No credentials"}, headers=self.headers)
        self.assertEqual(response.json(), {"error": "Email and password are required"})

        response = await self.client.post(
            URL, json={"email": self.admin.email, "password": "secret123"}, headers=self.headers
        )
        self.assertEqual(response.json(), {"error": "User with this email already exists"})

    async def test_single_toggle_and_edit(self):
        user, _ = await self.create_user(UserRole.MAINTAINER, "rita@trainhub.io")

        response = await self.client.put(f"{URL}/{user.id}", json={"action": "deactivate"}, headers=self.headers)
        self.assertEqual(response.json()["status"], "INACTIVE")

        response = await self.client.put(f"{URL}/{user.id}", json={"phone": "+15550100"}, headers=self.headers)
        self.assertEqual(response.json()["phone"], "+15550100")
        self.assertEqual(response.json()["status"], "INACTIVE")

    async def test_non_maintainer_id_is_not_found(self):
        response = await self.client.get(f"{URL}/{self.admin.id}", headers=self.headers)
        self.assertEqual(response.json(), {"error": "Maintainer not found"})

        response = await self.client.get(f"{URL}/{uuid4()}", headers=self.headers)
        self.assertEqual(response.status_code, 404)

    async def test_bulk_uses_user_ids(self):
        first, _ = await self.create_user(UserRole.MAINTAINER, "one@trainhub.io")
        second, _ = await self.create_user(UserRole.MAINTAINER, "two@trainhub.io")

        response = await self.client.patch(
            URL, json={"ids": [str(first.id), str(second.id)], "action": "deactivate"}, headers=self.headers
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Successfully deactivated 2 maintainers", "count": 2})
        statuses = [profile.status for profile in await self.fetch(MaintainerProfile)]
        self.assertEqual(statuses, [ActiveStatus.INACTIVE, ActiveStatus.INACTIVE])

    async def test_bulk_requires_action(self):
        first, _ = await self.create_user(UserRole.MAINTAINER, "one@trainhub.io")

        response = await self.client.patch(URL, json={"ids": [str(first.id)]}, headers=self.headers)

        self.assertEqual(response.json(), {"error": "Action is required"})

    async def test_delete_keeps_reviews_without_author(self):
        reviewer, _ = await self.create_user(UserRole.MAINTAINER, "rita@trainhub.io")
        category, location, stack = await self.create_reference_data()
        _, organization = await self.create_user(UserRole.ORGANIZATION, "owner@acme.io")
        training = await self.create_training(organization, category, location, stack)
        await self.create_feedback(training, organization, reviewer=reviewer)

        response = await self.client.delete(f"{URL}/{reviewer.id}", headers=self.headers)

        self.assertEqual(response.json()["message"], "Maintainer deleted successfully")
        self.assertEqual(await self.fetch(MaintainerProfile), [])
        [feedback] = await self.fetch(TrainingFeedback)
        self.assertIsNone(feedback.reviewer_id)


if __name__ == "__main__":
    unittest.main()

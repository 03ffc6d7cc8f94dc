# =============================================
# tests/trainings_api_test.py
# =============================================
import unittest
from uuid import uuid4

from trainhub.config.settings import get_settings
from trainhub.database.models.organization_profile import OrganizationProfile
from trainhub.database.models.training import Training
from trainhub.database.models.training_feedback import TrainingFeedback
from trainhub.database.models.user import User
from trainhub.schemas.enums import UserRole
from tests.base_test_lib import BaseTestLib

URL = "/api/trainings"
settings = get_settings()


class TrainingTestLib(BaseTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.category, self.location, self.stack = await self.create_reference_data()
        self.admin, self.admin_headers = await self.create_admin()
        self.owner, self.organization = await self.create_user(UserRole.ORGANIZATION, "owner@acme.io")
        self.owner_headers = self.auth_headers(self.owner)

    def payload(self, **overrides):
        body = {
            "title": "Kubernetes Bootcamp",
            "description": "Five days of clusters",
            "skills": "docker, kubernetes ,helm",
            "categoryId": str(self.category.id),
            "locationId": str(self.location.id),
            "stackId": str(self.stack.id),
            "type": "CORPORATE",
            "startDate": "2030-03-01T09:00:00Z",
            "endDate": "2030-03-05T17:00:00Z",
            "openings": 3,
        }
        body.update(overrides)
        return body


class TestCreateTraining(TrainingTestLib):
    async def test_organization_posts_for_itself(self):
        response = await self.client.post(URL, json=self.payload(), headers=self.owner_headers)

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["organizationId"], str(self.organization.id))
        self.assertEqual(body["skills"], ["docker", "kubernetes", "helm"])
        self.assertEqual(body["mode"], "ONLINE")
        self.assertFalse(body["isPublished"])
        self.assertEqual(body["category"]["name"], "Frameworks")
        self.assertEqual(body["location"]["district"], "Austin")

        [stored] = await self.fetch(Training)
        self.assertEqual(stored.skills, '["docker", "kubernetes", "helm"]')

    async def test_missing_fields(self):
        response = await self.client.post(URL, json={"title": "Only a title"}, headers=self.owner_headers)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Missing required fields"})

    async def test_end_before_start(self):
        response = await self.client.post(
            URL, json=self.payload(endDate="2030-02-01T00:00:00Z"), headers=self.owner_headers
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "End date must be after start date"})

    async def test_unknown_reference(self):
        response = await self.client.post(
            URL, json=self.payload(stackId=str(uuid4())), headers=self.owner_headers
        )

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Stack not found"})
        self.assertEqual(await self.fetch(Training), [])

    async def test_payment_fields_cleared_without_payment(self):
        response = await self.client.post(
            URL,
            json=self.payload(hasPayment=False, paymentAmount=500, paymentTerm="30 days"),
            headers=self.owner_headers
        )

        self.assertIsNone(response.json()["paymentAmount"])
        self.assertIsNone(response.json()["paymentTerm"])

    async def test_admin_without_organization_uses_system_organization(self):
        first = await self.client.post(URL, json=self.payload(), headers=self.admin_headers)
        second = await self.client.post(URL, json=self.payload(title="Second"), headers=self.admin_headers)

        self.assertEqual(first.status_code, 201)
        self.assertEqual(first.json()["organizationId"], second.json()["organizationId"])

        [system_user] = await self.fetch(User, User.email == settings.SYSTEM_ORGANIZATION_EMAIL)
        self.assertEqual(system_user.role, UserRole.ORGANIZATION)
        self.assertEqual(len(await self.fetch(OrganizationProfile)), 2)

    async def test_admin_names_organization(self):
        response = await self.client.post(
            URL, json=self.payload(organizationId=str(self.organization.id)), headers=self.admin_headers
        )

        self.assertEqual(response.json()["organizationId"], str(self.organization.id))

    async def test_freelancer_cannot_post(self):
        freelancer, _ = await self.create_user(UserRole.FREELANCER, "trainer@trainers.dev")

        response = await self.client.post(URL, json=self.payload(), headers=self.auth_headers(freelancer))

        self.assertEqual(response.status_code, 401)


class TestReadTrainings(TrainingTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        _, self.other = await self.create_user(UserRole.ORGANIZATION, "owner@globex.io", organization_name="Globex")
        self.own = await self.create_training(
            self.organization, self.category, self.location, self.stack, title="Own", is_published=True
        )
        self.foreign = await self.create_training(
            self.other, self.category, self.location, self.stack, title="Foreign"
        )

    async def test_organization_sees_only_its_trainings(self):
        response = await self.client.get(
            URL, params={"organizationId": str(self.other.id)}, headers=self.owner_headers
        )

        self.assertEqual([item["title"] for item in response.json()["trainings"]], ["Own"])

    async def test_admin_filters(self):
        response = await self.client.get(URL, params={"isPublished": "false"}, headers=self.admin_headers)
        self.assertEqual([item["title"] for item in response.json()["trainings"]], ["Foreign"])

        response = await self.client.get(URL, params={"search": "own"}, headers=self.admin_headers)
        self.assertEqual([item["title"] for item in response.json()["trainings"]], ["Own"])

        response = await self.client.get(URL, params={"category": "frame"}, headers=self.admin_headers)
        self.assertEqual(response.json()["pagination"]["total"], 2)

    async def test_requires_session(self):
        response = await self.client.get(URL)

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Unauthorized"})

    async def test_get_by_id(self):
        response = await self.client.get(f"{URL}/{self.own.id}", headers=self.owner_headers)
        self.assertEqual(response.json()["title"], "Own")

        response = await self.client.get(f"{URL}/not-a-uuid", headers=self.owner_headers)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Training not found"})


class TestUpdateTraining(TrainingTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.training = await self.create_training(self.organization, self.category, self.location, self.stack)

    async def test_owner_updates_fields(self):
        response = await self.client.put(
            f"{URL}/{self.training.id}",
            json={"title": "Renamed", "skills": ["go"]},
            headers=self.owner_headers
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["title"], "Renamed")
        self.assertEqual(response.json()["skills"], ["go"])

    async def test_single_actions(self):
        response = await self.client.put(
            f"{URL}/{self.training.id}", json={"action": "publish"}, headers=self.owner_headers
        )
        self.assertTrue(response.json()["isPublished"])

        response = await self.client.put(
            f"{URL}/{self.training.id}", json={"action": "approve"}, headers=self.owner_headers
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Invalid action"})

    async def test_other_organization_is_rejected(self):
        intruder, _ = await self.create_user(UserRole.ORGANIZATION, "owner@globex.io")

        response = await self.client.put(
            f"{URL}/{self.training.id}", json={"title": "Hijacked"}, headers=self.auth_headers(intruder)
        )

        self.assertEqual(response.status_code, 401)
        [stored] = await self.fetch(Training)
        self.assertNotEqual(stored.title, "Hijacked")

    async def test_update_checks_schedule_against_stored_dates(self):
        response = await self.client.put(
            f"{URL}/{self.training.id}",
            json={"endDate": "2000-01-01T00:00:00Z"},
            headers=self.owner_headers
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "End date must be after start date"})


class TestBulkAndDeleteTrainings(TrainingTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.first = await self.create_training(self.organization, self.category, self.location, self.stack)
        self.second = await self.create_training(
            self.organization, self.category, self.location, self.stack, title="Second"
        )
        await self.create_feedback(self.first, self.organization)

    async def test_bulk_approve_publishes(self):
        maintainer, _ = await self.create_user(UserRole.MAINTAINER, "reviewer@trainhub.io")

        response = await self.client.patch(
            URL,
            json={"trainingIds": [str(self.first.id)], "action": "approve"},
            headers=self.auth_headers(maintainer)
        )

        self.assertEqual(response.status_code, 200)
        published = {row.id: row.is_published for row in await self.fetch(Training)}
        self.assertEqual(published, {self.first.id: True, self.second.id: False})

    async def test_organization_cannot_bulk(self):
        response = await self.client.patch(
            URL, json={"ids": [str(self.first.id)], "action": "publish"}, headers=self.owner_headers
        )

        self.assertEqual(response.status_code, 401)

    async def test_bulk_delete_removes_feedback(self):
        response = await self.client.patch(
            URL,
            json={"trainingIds": [str(self.first.id), str(self.second.id)], "action": "delete"},
            headers=self.admin_headers
        )

        self.assertEqual(response.json()["count"], 2)
        self.assertEqual(await self.fetch(Training), [])
        self.assertEqual(await self.fetch(TrainingFeedback), [])

    async def test_owner_deletes_training(self):
        response = await self.client.delete(URL, params={"id": str(self.first.id)}, headers=self.owner_headers)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Training deleted successfully")
        self.assertEqual([row.id for row in await self.fetch(Training)], [self.second.id])

    async def test_admin_delete_unknown(self):
        response = await self.client.delete(URL, params={"id": str(uuid4())}, headers=self.admin_headers)

        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()

# =============================================
# tests/cascade_repository_test.py
# =============================================
import unittest

from sqlalchemy.exc import IntegrityError

from trainhub.core.exceptions import ConflictError
from trainhub.database.models.freelancer_profile import FreelancerProfile
from trainhub.database.models.organization_profile import OrganizationProfile
from trainhub.database.models.training import Training
from trainhub.database.models.training_feedback import TrainingFeedback
from trainhub.database.models.user import User
from trainhub.repositories.cascade_repository import CascadeRepository
from trainhub.schemas.enums import UserRole
from tests.base_test_lib import BaseTestLib


class TestCascadeRepository(BaseTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.repo = CascadeRepository(self.session)

        self.category, self.location, self.stack = await self.create_reference_data()
        self.org_user, self.organization = await self.create_user(UserRole.ORGANIZATION, "owner@acme.io")
        self.other_user, self.other_organization = await self.create_user(
            UserRole.ORGANIZATION, "owner@globex.io", organization_name="Globex"
        )
        self.trainer_user, self.freelancer = await self.create_user(UserRole.FREELANCER, "trainer@trainers.dev")
        self.reviewer, _ = await self.create_user(UserRole.MAINTAINER, "reviewer@trainhub.io")

        self.training = await self.create_training(self.organization, self.category, self.location, self.stack)
        self.other_training = await self.create_training(
            self.other_organization, self.category, self.location, self.stack, title="Kept"
        )
        await self.create_feedback(self.training, self.organization, reviewer=self.reviewer)
        await self.create_feedback(
            self.other_training, self.other_organization, reviewer=self.org_user, freelancer=self.freelancer
        )

    async def test_delete_organizations_removes_dependents_then_owner(self):
        summary = await self.repo.delete_organizations([self.organization.id])
        await self.session.commit()

        self.assertEqual(summary["trainings"], 1)
        self.assertEqual(summary["profiles"], 1)
        self.assertEqual(summary["users"], 1)
        self.assertEqual(await self.fetch(Training, Training.organization_id == self.organization.id), [])
        self.assertEqual(await self.fetch(OrganizationProfile, OrganizationProfile.id == self.organization.id), [])
        self.assertEqual(await self.fetch(User, User.id == self.org_user.id), [])

        # the other organization's review written by the deleted owner survives without an author
        remaining = await self.fetch(TrainingFeedback)
        self.assertEqual(len(remaining), 1)
        self.assertEqual(remaining[0].training_id, self.other_training.id)
        self.assertIsNone(remaining[0].reviewer_id)

    async def test_delete_trainings_removes_feedback(self):
        summary = await self.repo.delete_trainings([self.training.id])
        await self.session.commit()

        self.assertEqual(summary, {"feedback": 1, "trainings": 1})
        self.assertEqual(len(await self.fetch(Training)), 1)
        self.assertEqual(len(await self.fetch(TrainingFeedback)), 1)

    async def test_delete_freelancers_unassigns_trainings(self):
        await self.session.execute(
            Training.__table__.update().values(freelancer_id=self.freelancer.id)
        )
        summary = await self.repo.delete_freelancers([self.freelancer.id])
        await self.session.commit()

        self.assertEqual(summary["trainings_unassigned"], 2)
        self.assertEqual(summary["feedback"], 1)
        self.assertEqual(await self.fetch(FreelancerProfile), [])
        self.assertEqual(await self.fetch(User, User.id == self.trainer_user.id), [])
        self.assertTrue(all(t.freelancer_id is None for t in await self.fetch(Training)))

    async def test_delete_users_routes_by_role(self):
        summary = await self.repo.delete_users([self.org_user.id, self.reviewer.id])
        await self.session.commit()

        self.assertEqual(summary, {"users": 2})
        emails = sorted(user.email for user in await self.fetch(User))
        self.assertEqual(emails, ["owner@globex.io", "trainer@trainers.dev"])
        self.assertEqual(len(await self.fetch(Training)), 1)

    async def test_ensure_no_trainings_blocks_referenced_rows(self):
        with self.assertRaises(ConflictError) as ctx:
            await self.repo.ensure_no_trainings(Training.stack_id, [self.stack.id], "in use")
        self.assertEqual(ctx.exception.message, "in use")
        self.assertEqual(ctx.exception.details, {"trainings": 2})

    async def test_ensure_no_trainings_passes_for_unused_rows(self):
        await self.repo.ensure_no_trainings(Training.stack_id, [self.organization.id], "in use")

    async def test_profile_before_trainings_breaks_foreign_keys(self):
        with self.assertRaises(IntegrityError):
            await self.repo.organization_repo.delete_many([self.organization.id])
        await self.session.rollback()

        self.assertEqual(len(await self.fetch(OrganizationProfile)), 2)
        self.assertEqual(len(await self.fetch(Training)), 2)


if __name__ == "__main__":
    unittest.main()

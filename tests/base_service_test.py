# =============================================
# tests/base_service_test.py
# =============================================
import unittest

from trainhub.core.exceptions import InternalError, NotFoundError, ValidationError
from trainhub.database.models.training_location import TrainingLocation
from trainhub.services.base_service import BaseService
from tests.base_test_lib import BaseTestLib


class TestBaseServiceTransaction(BaseTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.service = BaseService(self.session)

    async def test_commits_on_success(self):
        async with self.service.transaction("create location"):
            self.session.add(TrainingLocation(state="Ohio", district="Columbus", is_active=True))

        self.assertEqual(len(await self.fetch(TrainingLocation)), 1)

    async def test_application_errors_pass_through_after_rollback(self):
        with self.assertRaises(NotFoundError):
            async with self.service.transaction("create location"):
                self.session.add(TrainingLocation(state="Ohio", district="Columbus", is_active=True))
                await self.session.flush()
                raise NotFoundError("Location not found")

        self.assertEqual(await self.fetch(TrainingLocation), [])

    async def test_duplicate_rows_become_validation_errors(self):
        await self.insert_entities([TrainingLocation(state="Ohio", district="Columbus", is_active=True)])

        with self.assertRaises(ValidationError) as ctx:
            async with self.service.transaction("create location"):
                self.session.add(TrainingLocation(state="Ohio", district="Columbus", is_active=True))
                await self.session.flush()
        self.assertEqual(ctx.exception.message, "A record with this information already exists")

    async def test_unexpected_errors_hide_the_operation_from_the_message(self):
        with self.assertRaises(InternalError) as ctx:
            async with self.service.transaction("delete location 42"):
                raise RuntimeError("disk on fire")

        self.assertEqual(ctx.exception.message, "Internal server error")
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.details, {"operation": "delete location 42", "reason": "disk on fire"})


if __name__ == "__main__":
    unittest.main()

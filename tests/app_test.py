# =============================================
# tests/app_test.py
# =============================================
import unittest
from unittest.mock import AsyncMock, patch

from tests.base_test_lib import BaseTestLib


class TestApp(BaseTestLib):
    async def test_root(self):
        response = await self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["health"], "/health")
        self.assertIn("X-Process-Time", response.headers)

    async def test_health_reports_database_state(self):
        with patch("trainhub.main.check_database_health", AsyncMock(return_value=True)):
            response = await self.client.get("/health")
        self.assertEqual(response.json()["status"], "healthy")

        with patch("trainhub.main.check_database_health", AsyncMock(return_value=False)):
            response = await self.client.get("/health")
        self.assertEqual(response.json()["status"], "degraded")
        self.assertEqual(response.json()["database"], "disconnected")

    async def test_unknown_route_uses_error_body(self):
        response = await self.client.get("/api/nothing-here")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Not Found"})


if __name__ == "__main__":
    unittest.main()

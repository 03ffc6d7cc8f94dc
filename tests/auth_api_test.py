# =============================================
# tests/auth_api_test.py
# =============================================
import unittest
from datetime import timedelta
from uuid import uuid4

from trainhub.core.security import create_access_token, verify_password
from trainhub.database.models.user import User
from trainhub.schemas.enums import UserRole
from tests.base_test_lib import BaseTestLib, DEFAULT_PASSWORD

URL = "/api/auth"


class TestLogin(BaseTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.user, _ = await self.create_user(UserRole.ORGANIZATION, "owner@acme.io")

    async def test_login_returns_token_usable_on_me(self):
        response = await self.client.post(
            f"{URL}/login", json={"email": "OWNER@acme.io", "password": DEFAULT_PASSWORD}
        )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["tokenType"], "bearer")
        self.assertEqual(body["user"]["role"], "ORGANIZATION")

        me = await self.client.get(
            f"{URL}/me", headers={"Authorization": f"Bearer {body['accessToken']}"}
        )
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()["email"], "owner@acme.io")
        self.assertEqual(me.json()["organizationProfile"]["organizationName"], "Acme Training")

    async def test_wrong_password(self):
        response = await self.client.post(f"{URL}/login", json={"email": "owner@acme.io", "password": "wrong-one"})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Invalid email or password"})

    async def test_malformed_body_is_a_400(self):
        response = await self.client.post(f"{URL}/login", json={"password": "x"})

        self.assertEqual(response.status_code, 400)
        self.assertIn("email", response.json()["error"])

    async def test_invalid_and_expired_tokens(self):
        response = await self.client.get(f"{URL}/me", headers={"Authorization": "Bearer not-a-jwt"})
        self.assertEqual(response.json(), {"error": "Invalid token"})

        expired = create_access_token(data={"sub": str(self.user.id)}, expires_delta=timedelta(minutes=-1))
        response = await self.client.get(f"{URL}/me", headers={"Authorization": f"Bearer {expired}"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Token has expired"})

    async def test_token_for_unknown_user(self):
        token = create_access_token(data={"sub": str(uuid4()), "role": "ADMIN"})

        response = await self.client.get(f"{URL}/me", headers={"Authorization": f"Bearer {token}"})

        self.assertEqual(response.json(), {"error": "User not found"})


class TestResetPassword(BaseTestLib):
    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.user, _ = await self.create_user(UserRole.FREELANCER, "tess@trainers.dev")
        self.headers = self.auth_headers(self.user)

    async def reset(self, **body):
        return await self.client.post(f"{URL}/reset-password", json=body, headers=self.headers)

    async def test_validation_order(self):
        response = await self.reset(newPassword="abcdefg", confirmPassword="abcdefg")
        self.assertEqual(response.json(), {"error": "Current password is required"})

        response = await self.reset(currentPassword=DEFAULT_PASSWORD, newPassword="abc", confirmPassword="abc")
        self.assertEqual(response.json(), {"error": "Password must be at least 6 characters long"})

        response = await self.reset(currentPassword=DEFAULT_PASSWORD, newPassword="abcdefg", confirmPassword="abcdefh")
        self.assertEqual(response.json(), {"error": "Passwords don't match"})

        response = await self.reset(
            currentPassword=DEFAULT_PASSWORD, newPassword=DEFAULT_PASSWORD, confirmPassword=DEFAULT_PASSWORD
        )
        self.assertEqual(response.json(), {"error": "New password must be different from current password"})

        response = await self.reset(currentPassword="not-mine", newPassword="abcdefg", confirmPassword="abcdefg")
        self.assertEqual(response.json(), {"error": "Current password is incorrect"})

    async def test_reset_changes_hash(self):
        response = await self.reset(
            currentPassword=DEFAULT_PASSWORD, newPassword="brand-new", confirmPassword="brand-new"
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Password has been reset successfully")
        [user] = await self.fetch(User, User.id == self.user.id)
        self.assertTrue(verify_password("brand-new", user.password))

    async def test_requires_session(self):
        response = await self.client.post(f"{URL}/reset-password", json={})

        self.assertEqual(response.status_code, 401)


if __name__ == "__main__":
    unittest.main()

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from jobgoblin.core.errors import UpstreamError
from jobgoblin.main import app
from jobgoblin.schemas.auth import AuthSession, AuthUser

USER = AuthUser(id="user-1", email="jane@example.com")
SESSION = AuthSession(user=USER, access_token="access", refresh_token="refresh", expires_in=3600)
SIGNUP = {"email": "jane@example.com", "password": "s3cret!", "first_name": "Jane", "last_name": "Doe"}


class AccountApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    @patch("jobgoblin.integrations.records.insert")
    @patch("jobgoblin.integrations.identity.sign_up", return_value=(USER, SESSION))
    def test_signup_creates_profile_row(self, sign_up, insert):
        response = self.client.post("/api/auth/signup", json=SIGNUP)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["access_token"], "access")
        sign_up.assert_called_once_with("jane@example.com", "s3cret!")
        insert.assert_called_once_with(
            "users",
            {"id": "user-1", "email": "jane@example.com", "first_name": "Jane", "last_name": "Doe"},
        )

    @patch("jobgoblin.integrations.records.insert")
    @patch("jobgoblin.integrations.identity.sign_up", return_value=(USER, None))
    def test_signup_without_session(self, _sign_up, _insert):
        response = self.client.post("/api/auth/signup", json=SIGNUP)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Signup successful, but no session returned"})

    @patch("jobgoblin.integrations.records.insert", side_effect=UpstreamError("Failed to save users."))
    @patch("jobgoblin.integrations.identity.sign_up", return_value=(USER, SESSION))
    def test_signup_profile_failure(self, _sign_up, _insert):
        response = self.client.post("/api/auth/signup", json=SIGNUP)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Failed to create user profile."})

    def test_signup_validates_payload(self):
        response = self.client.post("/api/auth/signup", json={"email": "jane@example.com"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("password", response.json()["error"])

    @patch("jobgoblin.integrations.identity.sign_in")
    def test_login_failure(self, sign_in):
        sign_in.side_effect = UpstreamError("Invalid login credentials", status_code=400)
        response = self.client.post("/api/auth/login", json={"email": "jane@example.com", "password": "nope"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Invalid login credentials"})

    @patch("jobgoblin.integrations.identity.sign_out")
    @patch("jobgoblin.integrations.identity.resolve_user", return_value=USER)
    def test_logout_revokes_token(self, _resolve_user, sign_out):
        response = self.client.post("/api/auth/logout", headers={"Authorization": "Bearer access"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Logged out successfully"})
        sign_out.assert_called_once_with("access")


if __name__ == "__main__":
    unittest.main()

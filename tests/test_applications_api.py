import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from jobgoblin.main import app
from jobgoblin.schemas.auth import AuthUser

AUTH = {"Authorization": "Bearer good"}


@patch("jobgoblin.integrations.identity.resolve_user", return_value=AuthUser(id="user-1"))
class ApplicationApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    @patch("jobgoblin.integrations.records.list_by_owner")
    def test_list(self, list_by_owner, _resolve_user):
        list_by_owner.return_value = [{"id": 1, "user_id": "user-1", "company_name": "Acme", "job_title": "SRE"}]
        response = self.client.get("/api/applications", headers=AUTH)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["applications"][0]["company_name"], "Acme")
        list_by_owner.assert_called_once_with("applications", "user-1")

    @patch("jobgoblin.integrations.records.insert")
    def test_create_stamps_owner(self, insert, _resolve_user):
        insert.side_effect = lambda table, row: {"id": 3, **row}
        response = self.client.post(
            "/api/applications",
            headers=AUTH,
            json={"company_name": "Acme", "job_title": "SRE", "user_id": "someone-else"},
        )
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["message"], "Application created successfully")
        self.assertEqual(body["application"]["user_id"], "user-1")
        table, row = insert.call_args.args
        self.assertEqual(table, "applications")
        self.assertEqual(row["user_id"], "user-1")
        self.assertEqual(row["status"], "applied")

    @patch("jobgoblin.integrations.records.insert")
    def test_create_requires_company_name(self, insert, _resolve_user):
        response = self.client.post("/api/applications", headers=AUTH, json={"job_title": "SRE"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("company_name", response.json()["error"])
        insert.assert_not_called()


if __name__ == "__main__":
    unittest.main()

import unittest

from vivida.models import User
from vivida.seed_data import JOURNEY_MILESTONES, PORTFOLIO_PROJECTS, SERVICES, TEAM_MEMBERS
from vivida.services.seed import seed_database
from vivida.utils.hashing import verify_password

from tests.base import ApiTestCase, DatabaseTestCase


class SeedTests(DatabaseTestCase):
    def test_first_run_inserts_everything(self):
        self.assertTrue(seed_database(self.storage))

        self.assertEqual(len(self.storage.get_team_members()), len(TEAM_MEMBERS))
        self.assertEqual(len(self.storage.get_services()), len(SERVICES))
        self.assertEqual(len(self.storage.get_journey_milestones()), len(JOURNEY_MILESTONES))
        self.assertEqual(len(self.storage.get_portfolio_projects()), len(PORTFOLIO_PROJECTS))

        admin = self.storage.get_user_by_email("admin@example.com")
        self.assertIsNotNone(admin)
        self.assertTrue(verify_password("admin-password", admin.password_hash))

    def test_second_run_is_skipped(self):
        seed_database(self.storage)

        self.assertFalse(seed_database(self.storage))

        self.assertEqual(self.storage.count_services(), len(SERVICES))
        self.assertEqual(self.db.query(User).filter(User.email == "admin@example.com").count(), 1)

    def test_existing_admin_is_kept(self):
        existing = self.storage.create_user("admin@example.com", password_hash="kept")

        seed_database(self.storage)

        self.assertEqual(self.db.query(User).count(), 1)
        self.assertEqual(self.storage.get_user_by_email("admin@example.com").id, existing.id)
        self.assertEqual(existing.password_hash, "kept")

    def test_theme_and_contact_overwritten(self):
        self.storage.update_site_theme({"primary_color": "#000000"})

        seed_database(self.storage)

        self.assertEqual(self.storage.get_site_theme().primary_color, "#e11d48")
        self.assertEqual(self.storage.get_contact_info().email, "hello@vivida.tech")


class InitEndpointTests(ApiTestCase):
    def test_init_is_idempotent(self):
        for _ in range(2):
            response = self.client.get("/api/init")
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json(), {"message": "Database initialized successfully"})

        content = self.client.get("/api/public-content").json()
        self.assertEqual(len(content["services"]), len(SERVICES))
        self.assertEqual([m["order"] for m in content["journeyMilestones"]], [0, 1, 2, 3])

        login = self.client.post("/api/auth/login", json={"email": "admin@example.com", "password": "admin-password"})
        self.assertEqual(login.status_code, 200)


if __name__ == "__main__":
    unittest.main()

import unittest
from datetime import datetime

from vivida.main import app
from vivida.services.storage import Storage, get_storage

from tests.base import ApiTestCase

TEAM_MEMBER = {
    "name": "Arjun Jayesh",
    "title": "Co-founder & CEO",
    "bio": "Builds things.",
    "linkedinUrl": "https://linkedin.com/in/arjun",
    "order": 1,
}

SERVICE = {
    "title": "Development",
    "description": "Custom web applications.",
    "iconSvgPath": "fas fa-code",
    "order": 0,
}

MILESTONE = {
    "year": "2025",
    "title": "Company Founded",
    "caption": "The beginning",
    "content": "<p>Hello</p>",
    "iconSvgPath": "fas fa-rocket",
    "order": 0,
}

PROJECT = {
    "title": "SaaS Analytics Platform",
    "description": "Dashboards.",
    "imageUrl": "https://example.com/a.png",
    "tags": ["React", "TypeScript", "Chart.js"],
    "githubUrl": "https://github.com/vivida/analytics",
    "order": 0,
}


class PublicContentTests(ApiTestCase):
    def test_empty_database_returns_defaults(self):
        response = self.client.get("/api/public-content")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(
            set(body),
            {"theme", "teamMembers", "services", "journeyMilestones", "portfolioProjects", "contactInfo"},
        )
        self.assertEqual(body["theme"]["primaryColor"], "#e11d48")
        self.assertEqual(body["theme"]["buttonStyle"], "rounded-lg")
        self.assertEqual(body["contactInfo"]["officeLocation"], "San Francisco, California")
        self.assertEqual(body["services"], [])

    def test_lists_are_sorted(self):
        headers = self.auth_headers()
        for order in (3, 1, 2):
            self.client.post("/api/admin/services", json={**SERVICE, "order": order}, headers=headers)

        services = self.client.get("/api/public-content").json()["services"]
        self.assertEqual([s["order"] for s in services], [1, 2, 3])

    def test_milestone_by_id(self):
        headers = self.auth_headers()
        created = self.client.post("/api/admin/journey", json=MILESTONE, headers=headers).json()

        response = self.client.get(f"/api/journey/{created['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["content"], "<p>Hello</p>")

        missing = self.client.get("/api/journey/does-not-exist")
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json()["detail"], "Milestone not found")

    def test_root_and_health(self):
        self.assertEqual(self.client.get("/health").json(), {"status": "healthy"})
        self.assertEqual(self.client.get("/").json()["message"], "Vivida API")


class ContactTests(ApiTestCase):
    def test_submission_shows_up_unread_in_admin_inbox(self):
        response = self.client.post(
            "/api/contact",
            json={"name": "A", "email": "a@b.com", "subject": "Hi", "message": "Hello there"},
        )

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["message"], "Message sent successfully")
        self.assertTrue(body["id"])

        inbox = self.client.get("/api/admin/contact-submissions", headers=self.auth_headers())
        self.assertEqual(inbox.status_code, 200)
        submissions = inbox.json()
        self.assertEqual(len(submissions), 1)
        self.assertEqual(submissions[0]["id"], body["id"])
        self.assertIs(submissions[0]["isRead"], False)

    def test_mark_read(self):
        submission_id = self.client.post(
            "/api/contact",
            json={"name": "A", "email": "a@b.com", "subject": "Hi", "message": "Hello there"},
        ).json()["id"]
        headers = self.auth_headers()

        response = self.client.put(f"/api/admin/contact-submissions/{submission_id}/read", headers=headers)
        self.assertEqual(response.status_code, 204)
        self.assertEqual(response.content, b"")

        inbox = self.client.get("/api/admin/contact-submissions", headers=headers).json()
        self.assertIs(inbox[0]["isRead"], True)

        missing = self.client.put("/api/admin/contact-submissions/does-not-exist/read", headers=headers)
        self.assertEqual(missing.status_code, 404)

    def test_invalid_submission(self):
        response = self.client.post("/api/contact", json={"name": "A", "email": "a@b.com"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.storage.get_contact_submissions(), [])

    def test_inbox_requires_auth(self):
        self.assertEqual(self.client.get("/api/admin/contact-submissions").status_code, 401)


class ContentCrudTests(ApiTestCase):
    """The four admin list resources share one route shape."""

    resources = [
        ("/api/admin/team-members", TEAM_MEMBER, "title", "Co-founder"),
        ("/api/admin/services", SERVICE, "description", "Updated description."),
        ("/api/admin/journey", MILESTONE, "caption", "A new caption"),
        ("/api/admin/work", PROJECT, "title", "Renamed project"),
    ]

    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers()

    def test_create_list_update_delete(self):
        for path, payload, field, new_value in self.resources:
            with self.subTest(path=path):
                created = self.client.post(path, json=payload, headers=self.headers)
                self.assertEqual(created.status_code, 201, created.text)
                item = created.json()
                self.assertTrue(item["id"])
                self.assertIn("createdAt", item)
                self.assertIn("updatedAt", item)
                for key, value in payload.items():
                    self.assertEqual(item[key], value)

                listed = self.client.get(path, headers=self.headers).json()
                self.assertEqual([i["id"] for i in listed], [item["id"]])

                updated = self.client.put(f"{path}/{item['id']}", json={field: new_value}, headers=self.headers)
                self.assertEqual(updated.status_code, 200, updated.text)
                body = updated.json()
                self.assertEqual(body[field], new_value)
                for key, value in payload.items():
                    if key != field:
                        self.assertEqual(body[key], value)
                self.assertGreater(
                    datetime.fromisoformat(body["updatedAt"]),
                    datetime.fromisoformat(item["updatedAt"]),
                )

                deleted = self.client.delete(f"{path}/{item['id']}", headers=self.headers)
                self.assertEqual(deleted.status_code, 204)
                self.assertEqual(self.client.get(path, headers=self.headers).json(), [])

    def test_missing_id_is_404(self):
        for path, _, field, new_value in self.resources:
            with self.subTest(path=path):
                update = self.client.put(f"{path}/does-not-exist", json={field: new_value}, headers=self.headers)
                self.assertEqual(update.status_code, 404)
                delete = self.client.delete(f"{path}/does-not-exist", headers=self.headers)
                self.assertEqual(delete.status_code, 404)

    def test_invalid_create_is_400_and_stores_nothing(self):
        for path, payload, _, _ in self.resources:
            with self.subTest(path=path):
                incomplete = dict(payload)
                incomplete.pop("title", None)
                incomplete.pop("name", None)
                incomplete.pop("year", None)
                response = self.client.post(path, json=incomplete, headers=self.headers)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()["detail"], "Invalid request data")
                self.assertEqual(self.client.get(path, headers=self.headers).json(), [])

    def test_null_for_required_field_is_400(self):
        created = self.client.post("/api/admin/services", json=SERVICE, headers=self.headers).json()

        response = self.client.put(
            f"/api/admin/services/{created['id']}", json={"title": None}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)

    def test_optional_url_can_be_cleared(self):
        created = self.client.post("/api/admin/team-members", json=TEAM_MEMBER, headers=self.headers).json()

        response = self.client.put(
            f"/api/admin/team-members/{created['id']}", json={"linkedinUrl": None}, headers=self.headers
        )
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["linkedinUrl"])

    def test_tags_keep_their_order(self):
        tags = ["Zeta", "Alpha", "Mu"]
        created = self.client.post("/api/admin/work", json={**PROJECT, "tags": tags}, headers=self.headers).json()
        self.assertEqual(created["tags"], tags)

    def test_order_outside_integer_range_is_400(self):
        for order in (2**31, -2**31 - 1):
            with self.subTest(order=order):
                response = self.client.post(
                    "/api/admin/services", json={**SERVICE, "order": order}, headers=self.headers
                )
                self.assertEqual(response.status_code, 400)
                self.assertEqual(self.client.get("/api/admin/services", headers=self.headers).json(), [])

        created = self.client.post("/api/admin/services", json={**SERVICE, "order": 2**31 - 1}, headers=self.headers)
        self.assertEqual(created.status_code, 201)
        response = self.client.put(
            f"/api/admin/services/{created.json()['id']}", json={"order": 2**31}, headers=self.headers
        )
        self.assertEqual(response.status_code, 400)

    def test_routes_require_auth(self):
        for path, payload, _, _ in self.resources:
            with self.subTest(path=path):
                self.assertEqual(self.client.get(path).status_code, 401)
                self.assertEqual(self.client.post(path, json=payload).status_code, 401)
                self.assertEqual(self.client.put(f"{path}/x", json={}).status_code, 401)
                self.assertEqual(self.client.delete(f"{path}/x").status_code, 401)


class SiteSettingsTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers()

    def test_theme_update_is_partial(self):
        response = self.client.put(
            "/api/admin/theme",
            json={"primaryColor": "#123456", "buttonStyle": "rounded-full"},
            headers=self.headers,
        )

        self.assertEqual(response.status_code, 200)
        theme = self.client.get("/api/admin/theme", headers=self.headers).json()
        self.assertEqual(theme["primaryColor"], "#123456")
        self.assertEqual(theme["buttonStyle"], "rounded-full")
        self.assertEqual(theme["fontHeadline"], "Anton")
        self.assertEqual(self.client.get("/api/public-content").json()["theme"], theme)

    def test_unknown_button_style_rejected(self):
        response = self.client.put("/api/admin/theme", json={"buttonStyle": "hexagon"}, headers=self.headers)
        self.assertEqual(response.status_code, 400)
        theme = self.client.get("/api/admin/theme", headers=self.headers).json()
        self.assertEqual(theme["buttonStyle"], "rounded-lg")

    def test_contact_info_update(self):
        response = self.client.put(
            "/api/admin/contact-info",
            json={"email": "team@vivida.tech", "officeLocation": "Kochi, India"},
            headers=self.headers,
        )

        self.assertEqual(response.status_code, 200)
        info = self.client.get("/api/admin/contact-info", headers=self.headers).json()
        self.assertEqual(info["email"], "team@vivida.tech")
        self.assertEqual(info["officeLocation"], "Kochi, India")
        self.assertEqual(info["phone"], "+1 (234) 567-8900")

    def test_settings_require_auth(self):
        self.assertEqual(self.client.get("/api/admin/theme").status_code, 401)
        self.assertEqual(self.client.put("/api/admin/contact-info", json={}).status_code, 401)


class FailingStorage(Storage):
    def get_services(self):
        raise RuntimeError("secret detail")


class ServerErrorTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers()
        app.dependency_overrides[get_storage] = lambda: FailingStorage(self.db)
        self.addCleanup(app.dependency_overrides.pop, get_storage, None)

    def test_storage_failure_is_generic_500(self):
        response = self.client.get("/api/admin/services", headers=self.headers)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": "Internal server error"})
        self.assertNotIn("secret detail", response.text)

    def test_failed_operation_is_named_in_log(self):
        with self.assertLogs("vivida", level="DEBUG") as logs:
            response = self.client.get("/api/admin/services", headers=self.headers)

        self.assertEqual(response.status_code, 500)
        self.assertTrue(any("list_services failed with RuntimeError" in line for line in logs.output))

    def test_public_content_failure_is_generic_500(self):
        response = self.client.get("/api/public-content")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": "Internal server error"})
        self.assertNotIn("secret detail", response.text)


if __name__ == "__main__":
    unittest.main()

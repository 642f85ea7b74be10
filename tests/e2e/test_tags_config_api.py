"""End-to-end tests for the tag, configuration and health endpoints."""

from thanks.domain.repository import FeatureFlagRepository, TagRepository
from tests.conftest import ADMIN_ID, AUTHOR_ID, component, login
from tests.harness import create_client_fixture

client = create_client_fixture()
lenient_client = create_client_fixture(raise_server_exceptions=False)

SERVER_ERROR = "An unexpected error occurred, please try again later"


class TestTags:
    """Tag vocabulary endpoints."""

    def test_create_get_list(self, client):
        login(client, AUTHOR_ID)

        created = client.post("/tags", json={"name": "Teamwork", "bg_colour": "#0c0"})
        client.post("/tags", json={"name": "Courage"})

        tag = created.json()
        assert created.status_code == 200
        assert tag["name"] == "Teamwork"
        assert tag["created_by"] == "Grace Hopper"
        assert client.get(f"/tags/{tag['id']}").json() == tag
        assert [t["name"] for t in client.get("/tags").json()] == [
            "Courage",
            "Teamwork",
        ]
        assert client.get("/tags/count").json() == 2
        assert client.get("/tags/count", params={"name": "team"}).json() == 1

    def test_duplicate_name(self, client):
        login(client, AUTHOR_ID)
        client.post("/tags", json={"name": "Teamwork"})

        response = client.post("/tags", json={"name": "TEAMWORK"})

        assert response.status_code == 400
        assert response.json()["invalid-params"] == [
            {"name": "name", "reason": "A tag with this name already exists"}
        ]

    def test_missing_name(self, client):
        login(client, AUTHOR_ID)

        response = client.post("/tags", json={})

        assert response.status_code == 400
        assert response.json()["invalid-params"][0]["name"] == "name"

    def test_unauthenticated(self, client):
        assert client.post("/tags", json={"name": "Teamwork"}).status_code == 401
        assert client.patch("/tags/1", json={"active": False}).status_code == 401

    def test_update(self, client):
        login(client, AUTHOR_ID)
        tag_id = client.post("/tags", json={"name": "Teamwork"}).json()["id"]

        response = client.patch(
            f"/tags/{tag_id}", json={"active": False, "bg_colour": ""}
        )

        assert response.status_code == 200
        assert response.json()["active"] is False
        assert response.json()["bg_colour"] is None

    def test_not_found(self, client):
        login(client, AUTHOR_ID)

        got = client.get("/tags/404")
        patched = client.patch("/tags/404", json={"active": True})

        assert got.status_code == 404
        assert got.json()["title"] == "Tag 404 could not be found"
        assert patched.status_code == 404
        assert patched.json()["title"] == "Tag 404 could not be found"

    def test_null_name_and_active_leave_tag_unchanged(self, client):
        login(client, AUTHOR_ID)
        tag = client.post("/tags", json={"name": "Teamwork"}).json()

        response = client.patch(
            f"/tags/{tag['id']}", json={"name": None, "active": None}
        )

        assert response.status_code == 200
        assert response.json() == tag

    def test_long_colour_is_kept(self, client):
        login(client, AUTHOR_ID)
        colour = "linear-gradient(" + "#ffcc00, " * 20 + "#000)"

        response = client.post("/tags", json={"name": "Teamwork", "bg_colour": colour})

        assert response.status_code == 200
        assert response.json()["bg_colour"] == colour


class TestConfig:
    """Feature flag endpoints."""

    def test_admin_enables_tags(self, client):
        login(client, ADMIN_ID)

        response = client.patch("/config", json={"tags_enabled": True})

        assert response.status_code == 200
        assert client.get("/config").json() == {
            "tags_enabled": True,
            "tags_mandatory": False,
        }

    def test_tags_on_thank_you_once_enabled(self, client):
        login(client, ADMIN_ID)
        client.patch("/config", json={"tags_enabled": True, "tags_mandatory": True})
        tag_id = client.post("/tags", json={"name": "Teamwork"}).json()["id"]
        thanked = [{"oclass": 1, "id": AUTHOR_ID}]

        untagged = client.post(
            "/thanks", json={"thanked": thanked, "description": "Thanks"}
        )
        tagged = client.post(
            "/thanks",
            json={"thanked": thanked, "description": "Thanks", "tags": [tag_id]},
        )

        assert untagged.status_code == 400
        assert tagged.status_code == 200
        [view] = client.get("/thanks").json()
        assert [t["name"] for t in view["tags"]] == ["Teamwork"]

    def test_non_admin_is_refused(self, client):
        login(client, AUTHOR_ID)

        response = client.patch("/config", json={"tags_enabled": True})

        assert response.status_code == 401

    def test_invalid_flag(self, client):
        login(client, ADMIN_ID)

        response = client.patch("/config", json={"tags_enabled": "yes"})

        assert response.status_code == 400
        assert response.json()["invalid-params"][0]["name"] == "tags_enabled"


class TestHealth:
    """Health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestStorageFailures:
    """Storage failures on reads answer with a bare 500 problem."""

    def test_tag_reads(self, lenient_client):
        component(lenient_client, TagRepository).fail_reads = True

        for path in ("/tags", "/tags/count", "/tags/1"):
            response = lenient_client.get(path)

            assert response.status_code == 500, path
            assert response.headers["content-type"].startswith(
                "application/problem+json"
            )
            assert response.json() == {
                "type": "https://developer.claromentis.com",
                "title": SERVER_ERROR,
                "status": 500,
            }

    def test_config_read(self, lenient_client):
        component(lenient_client, FeatureFlagRepository).fail_reads = True

        response = lenient_client.get("/config")

        assert response.status_code == 500
        assert response.json()["title"] == SERVER_ERROR

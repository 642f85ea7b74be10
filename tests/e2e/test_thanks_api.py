"""End-to-end tests for the thank-you endpoints."""

from thanks.domain.repository import FeatureFlagRepository, ThankYouRepository
from thanks.domain.service import Notifier
from tests.conftest import ADMIN_ID, AUTHOR_ID, OTHER_ID, component, login
from tests.harness import create_client_fixture

client = create_client_fixture()
lenient_client = create_client_fixture(raise_server_exceptions=False)

PROBLEM_JSON = "application/problem+json"


def create(client, **payload):
    return client.post(
        "/thanks",
        json={"thanked": [{"oclass": 1, "id": 43}], "description": "Thanks", **payload},
    )


class TestCreateAndRead:
    """Creating a thank you and reading it back."""

    def test_create_then_get(self, client):
        login(client, AUTHOR_ID)

        response = client.post(
            "/thanks",
            json={"thanked": [{"oclass": 1, "id": 42}], "description": "Great job"},
        )

        assert response.status_code == 200
        assert response.json() is True

        [listed] = client.get("/thanks").json()
        view = client.get(f"/thanks/{listed['id']}").json()
        assert view["description"] == "Great job"
        assert view["author"] == {"id": AUTHOR_ID, "name": "Grace Hopper"}
        assert len(view["thanked"]) == 1
        assert view["thanked"][0]["name"] == "Grace Hopper"
        assert view["thanked"][0]["object_type"] == {"id": 1, "name": "User"}
        assert view["can_edit"] is True

    def test_empty_payload_lists_both_violations(self, client):
        login(client, AUTHOR_ID)

        response = client.post("/thanks", json={"thanked": [], "description": ""})

        body = response.json()
        assert response.status_code == 400
        assert response.headers["content-type"].startswith(PROBLEM_JSON)
        assert body["status"] == 400
        assert body["title"] == "Failed to create Thank You"
        assert [p["name"] for p in body["invalid-params"]] == [
            "thanked",
            "description",
        ]
        assert client.get("/thanks/count").json() == 0

    def test_unsupported_owner_class(self, client):
        login(client, AUTHOR_ID)

        response = create(client, thanked=[{"oclass": 99, "id": 1}])

        [param] = response.json()["invalid-params"]
        assert response.status_code == 400
        assert param["name"] == "thanked"
        assert "User, Group" in param["reason"]

    def test_tags_rejected_while_disabled(self, client):
        login(client, AUTHOR_ID)

        response = create(client, tags=[1])

        assert response.status_code == 400
        assert [p["name"] for p in response.json()["invalid-params"]] == ["tags"]

    def test_non_object_body(self, client):
        login(client, AUTHOR_ID)

        response = client.post("/thanks", json=["not", "an", "object"])

        assert response.status_code == 400
        assert response.json()["title"] == "Request body must be a JSON object"

    def test_unauthenticated_create(self, client):
        response = create(client)

        assert response.status_code == 401
        assert response.headers["content-type"].startswith(PROBLEM_JSON)

    def test_invalid_token(self, client):
        client.cookies.set("auth_token", "invalid-token")

        assert create(client).status_code == 401

    def test_missing_thank_you(self, client):
        response = client.get("/thanks/999")

        assert response.status_code == 404
        assert response.json()["title"] == "Thank You 999 could not be found"

    def test_list_filters_and_counts(self, client):
        login(client, AUTHOR_ID)
        create(client)
        create(client, thanked=[{"oclass": 3, "id": 7}])
        create(client, thanked=[{"oclass": 1, "id": ADMIN_ID}])

        listed = client.get("/thanks", params={"limit": 2}).json()
        with_thanked = client.get("/thanks", params={"thanked": True}).json()

        assert len(listed) == 2
        assert all(v["thanked"] is None for v in listed)
        assert all(v["thanked"] for v in with_thanked)
        assert client.get("/thanks/count").json() == 3
        assert client.get("/thanks/count", params={"user": OTHER_ID}).json() == 2
        assert len(client.get("/thanks", params={"user": ADMIN_ID}).json()) == 1


class TestUpdateAndDelete:
    """Changing and deleting thank yous."""

    def _thank_you_id(self, client) -> int:
        login(client, AUTHOR_ID)
        create(client)
        return client.get("/thanks").json()[0]["id"]

    def test_author_updates_description(self, client):
        thank_you_id = self._thank_you_id(client)

        response = client.patch(
            f"/thanks/{thank_you_id}", json={"description": "Thanks a lot"}
        )

        view = client.get(f"/thanks/{thank_you_id}").json()
        assert response.status_code == 200
        assert view["description"] == "Thanks a lot"
        assert [u["id"] for u in view["users"]] == [OTHER_ID]

    def test_other_user_may_not_update(self, client):
        thank_you_id = self._thank_you_id(client)
        login(client, OTHER_ID)

        response = client.patch(
            f"/thanks/{thank_you_id}",
            params={"admin_mode": True},
            json={"description": "Hijacked"},
        )

        assert response.status_code == 401

    def test_admin_mode_update(self, client):
        thank_you_id = self._thank_you_id(client)
        login(client, ADMIN_ID)

        without_mode = client.patch(
            f"/thanks/{thank_you_id}", json={"description": "Moderated"}
        )
        with_mode = client.patch(
            f"/thanks/{thank_you_id}",
            params={"admin_mode": True},
            json={"description": "Moderated"},
        )

        assert without_mode.status_code == 401
        assert with_mode.status_code == 200

    def test_invalid_update(self, client):
        thank_you_id = self._thank_you_id(client)

        response = client.patch(f"/thanks/{thank_you_id}", json={"thanked": []})

        assert response.status_code == 400
        assert response.json()["title"] == "Failed to modify Thank You"

    def test_update_missing(self, client):
        login(client, AUTHOR_ID)

        response = client.patch("/thanks/999", json={"description": "x"})

        assert response.status_code == 404

    def test_delete(self, client):
        thank_you_id = self._thank_you_id(client)

        response = client.delete(f"/thanks/{thank_you_id}")

        assert response.status_code == 200
        assert client.get(f"/thanks/{thank_you_id}").status_code == 404

    def test_delete_by_other_user(self, client):
        thank_you_id = self._thank_you_id(client)
        login(client, OTHER_ID)

        assert client.delete(f"/thanks/{thank_you_id}").status_code == 401
        assert client.delete("/thanks/999").status_code == 404


class TestFailures:
    """Storage and notification failures seen over HTTP."""

    SERVER_ERROR = "An unexpected error occurred, please try again later"

    def test_storage_failure_on_create(self, lenient_client):
        login(lenient_client, AUTHOR_ID)
        component(lenient_client, ThankYouRepository).fail_writes = True

        response = create(lenient_client)

        assert response.status_code == 500
        assert response.headers["content-type"].startswith(PROBLEM_JSON)
        assert response.json() == {
            "type": "https://developer.claromentis.com",
            "title": "Failed to create Thank You",
            "status": 500,
        }
        assert "Simulated" not in response.text

    def test_storage_failure_on_delete(self, lenient_client):
        login(lenient_client, AUTHOR_ID)
        create(lenient_client)
        [listed] = lenient_client.get("/thanks").json()
        component(lenient_client, ThankYouRepository).fail_writes = True

        response = lenient_client.delete(f"/thanks/{listed['id']}")

        assert response.status_code == 500
        assert response.json()["title"] == "Failed to delete Thank You"
        assert "invalid-params" not in response.json()

    def test_storage_failure_on_reads(self, lenient_client):
        component(lenient_client, ThankYouRepository).fail_reads = True

        for path in ("/thanks", "/thanks/count", "/thanks/1"):
            response = lenient_client.get(path)

            assert response.status_code == 500, path
            assert response.headers["content-type"].startswith(PROBLEM_JSON)
            assert response.json()["title"] == self.SERVER_ERROR
            assert "Simulated" not in response.text

    def test_feature_flags_unavailable(self, lenient_client):
        login(lenient_client, AUTHOR_ID)
        component(lenient_client, FeatureFlagRepository).fail_reads = True

        response = create(lenient_client)

        assert response.status_code == 500
        assert response.headers["content-type"].startswith(PROBLEM_JSON)
        assert response.json()["title"] == self.SERVER_ERROR

    def test_notification_failure_still_creates(self, client):
        login(client, AUTHOR_ID)
        notifier = component(client, Notifier)
        notifier.fail = True

        response = create(client)

        assert response.status_code == 200
        assert response.json() is True
        assert client.get("/thanks/count").json() == 1
        assert notifier.sent == []

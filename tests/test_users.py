"""Account management: admin listing, owner updates and account removal."""

from app.core.errors import FORBIDDEN_ERROR_MESSAGE, UNAUTHORIZED_ERROR_MESSAGE
from app.users.validations.user_validations import USER_MESSAGES

USERS_URL = "/api/v1/users"
ACCOUNT_URL = "/api/v1/users/account"

# Seeded ids: 1 is the admin Syntyche, 2 is the regular user Taqqiq
ADMIN_ID = 1
USER_ID = 2


class TestAdmin:
    def test_list_users(self, client, admin_headers):
        response = client.get(USERS_URL, headers=admin_headers)

        assert response.status_code == 200
        users = response.json()["users"]
        assert len(users) == 7
        assert [user["id"] for user in users] == sorted(user["id"] for user in users)
        assert all("password" not in user for user in users)

    def test_get_user(self, client, admin_headers):
        response = client.get(f"{USERS_URL}/{USER_ID}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "taqqiq@gmail.com"

    def test_get_missing_user(self, client, admin_headers):
        response = client.get(f"{USERS_URL}/999", headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": USER_MESSAGES.NOT_FOUND}

    def test_non_numeric_id_is_not_found(self, client, admin_headers):
        response = client.get(f"{USERS_URL}/abc", headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": USER_MESSAGES.NOT_FOUND}

    def test_update_other_user_role(self, client, admin_headers):
        response = client.patch(f"{USERS_URL}/3", json={"role": "ADMIN"}, headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["role"] == "ADMIN"
        assert "token" not in body

    def test_invalid_role(self, client, admin_headers):
        response = client.patch(f"{USERS_URL}/3", json={"role": "OWNER"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": USER_MESSAGES.ROLE}

    def test_update_missing_user(self, client, admin_headers):
        response = client.patch(f"{USERS_URL}/999", json={"name": "Someone Else"}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": USER_MESSAGES.NOT_FOUND}

    def test_delete_user(self, client, admin_headers):
        response = client.delete(f"{USERS_URL}/3", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "rosalinda@gmail.com"
        assert client.get(f"{USERS_URL}/3", headers=admin_headers).status_code == 404

    def test_delete_twice(self, client, admin_headers):
        client.delete(f"{USERS_URL}/3", headers=admin_headers)
        response = client.delete(f"{USERS_URL}/3", headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": USER_MESSAGES.NOT_FOUND}


class TestUser:
    def test_list_users_forbidden(self, client, user_headers):
        response = client.get(USERS_URL, headers=user_headers)
        assert response.status_code == 403
        assert response.json() == {"err": FORBIDDEN_ERROR_MESSAGE}

    def test_get_user_forbidden(self, client, user_headers):
        response = client.get(f"{USERS_URL}/{USER_ID}", headers=user_headers)
        assert response.status_code == 403

    def test_update_self(self, client, user_headers):
        response = client.patch(
            f"{USERS_URL}/{USER_ID}",
            json={"name": "Taqqiq Berlin II", "password": "anotherpassword"},
            headers=user_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["name"] == "Taqqiq Berlin II"
        assert body["token"]

        login = client.post(
            "/api/v1/auth/login",
            json={"email": "taqqiq@gmail.com", "password": "anotherpassword"},
        )
        assert login.status_code == 200

    def test_update_self_keeping_own_name(self, client, user_headers):
        response = client.patch(f"{USERS_URL}/{USER_ID}", json={"name": "Taqqiq Berlin"}, headers=user_headers)
        assert response.status_code == 200

    def test_update_self_with_name_in_use(self, client, user_headers):
        response = client.patch(f"{USERS_URL}/{USER_ID}", json={"name": "Rosalinda Astrid"}, headers=user_headers)
        assert response.status_code == 400
        assert response.json() == {"err": USER_MESSAGES.NAME_IN_USE}

    def test_update_self_with_invalid_email(self, client, user_headers):
        response = client.patch(f"{USERS_URL}/{USER_ID}", json={"email": "taqqiq"}, headers=user_headers)
        assert response.status_code == 400
        assert response.json() == {"err": USER_MESSAGES.EMAIL_INVALID}

    def test_cannot_change_own_role(self, client, user_headers):
        response = client.patch(f"{USERS_URL}/{USER_ID}", json={"role": "ADMIN"}, headers=user_headers)
        assert response.status_code == 403
        assert response.json() == {"err": FORBIDDEN_ERROR_MESSAGE}

    def test_cannot_update_another_user(self, client, user_headers):
        response = client.patch(f"{USERS_URL}/3", json={"name": "Someone Else"}, headers=user_headers)
        assert response.status_code == 403
        assert response.json() == {"err": FORBIDDEN_ERROR_MESSAGE}

    def test_cannot_delete_another_user(self, client, user_headers):
        response = client.delete(f"{USERS_URL}/3", headers=user_headers)
        assert response.status_code == 403

    def test_delete_own_account_wrong_password(self, client, user_headers):
        response = client.request("DELETE", ACCOUNT_URL, json={"password": "wrongpassword"}, headers=user_headers)
        assert response.status_code == 400
        assert response.json() == {"err": USER_MESSAGES.PASSWORD_INCORRECT}

    def test_delete_own_account_missing_password(self, client, user_headers):
        response = client.request("DELETE", ACCOUNT_URL, json={}, headers=user_headers)
        assert response.status_code == 400
        assert response.json() == {"err": USER_MESSAGES.PASSWORD_REQUIRED}

    def test_delete_own_account(self, client, user_headers):
        response = client.request("DELETE", ACCOUNT_URL, json={"password": "taqqiqberlin"}, headers=user_headers)

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "taqqiq@gmail.com"

        login = client.post("/api/v1/auth/login", json={"email": "taqqiq@gmail.com", "password": "taqqiqberlin"})
        assert login.status_code == 404


class TestAnonymous:
    def test_list_users(self, client):
        response = client.get(USERS_URL)
        assert response.status_code == 401
        assert response.json() == {"err": UNAUTHORIZED_ERROR_MESSAGE}

    def test_update_user(self, client):
        response = client.patch(f"{USERS_URL}/{USER_ID}", json={"name": "Someone Else"})
        assert response.status_code == 401

    def test_delete_account(self, client):
        response = client.request("DELETE", ACCOUNT_URL, json={"password": "taqqiqberlin"})
        assert response.status_code == 401

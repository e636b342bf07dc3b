from app.teams.validations.team_validations import TEAM_MESSAGES

URL = "/api/v1/teams"
NEW_TEAM = {
    "name": "Team E",
    "code": "TEE",
    "logoUrl": "flag.jpg",
    "foundingDate": "1960-01-01",
    "countryId": 1,
}


def without(key: str) -> dict:
    return {name: value for name, value in NEW_TEAM.items() if name != key}


class TestAdmin:
    def test_create_get_delete_round_trip(self, client, admin_headers):
        created = client.post(URL, json=NEW_TEAM, headers=admin_headers)

        assert created.status_code == 201
        team = created.json()["team"]
        assert team["name"] == "Team E"
        assert team["code"] == "TEE"
        assert team["logoUrl"] == "flag.jpg"
        assert team["foundingDate"].startswith("1960-01-01")
        assert team["countryId"] == 1
        assert team["isNational"] is False

        fetched = client.get(f"{URL}/{team['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["team"] == team

        deleted = client.delete(f"{URL}/{team['id']}", headers=admin_headers)
        assert deleted.status_code == 200
        assert deleted.json()["team"] == team

        assert client.get(f"{URL}/{team['id']}").status_code == 404

    def test_name_too_short(self, client, admin_headers):
        # "Team E" is exactly six characters long
        response = client.post(URL, json={**NEW_TEAM, "name": "Team"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.NAME_MIN_LENGTH}

    def test_missing_name(self, client, admin_headers):
        response = client.post(URL, json=without("name"), headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.NAME_REQUIRED}

    def test_name_in_use(self, client, admin_headers):
        response = client.post(URL, json={**NEW_TEAM, "name": "Team A"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.NAME_IN_USE}

    def test_missing_code(self, client, admin_headers):
        response = client.post(URL, json=without("code"), headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.CODE_REQUIRED}

    def test_code_length(self, client, admin_headers):
        response = client.post(URL, json={**NEW_TEAM, "code": "TE"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.CODE_LENGTH}

    def test_code_in_use(self, client, admin_headers):
        response = client.post(URL, json={**NEW_TEAM, "code": "TEA"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.CODE_IN_USE}

    def test_missing_logo_url(self, client, admin_headers):
        response = client.post(URL, json=without("logoUrl"), headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.LOGO_URL_REQUIRED}

    def test_missing_founding_date(self, client, admin_headers):
        response = client.post(URL, json=without("foundingDate"), headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.FOUNDING_DATE_REQUIRED}

    def test_founding_date_format(self, client, admin_headers):
        response = client.post(URL, json={**NEW_TEAM, "foundingDate": "sixties"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.FOUNDING_DATE_FORMAT}

    def test_founding_date_too_old(self, client, admin_headers):
        response = client.post(URL, json={**NEW_TEAM, "foundingDate": "1700-01-01"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.FOUNDING_DATE_MIN}

    def test_founding_date_in_the_future(self, client, admin_headers):
        response = client.post(URL, json={**NEW_TEAM, "foundingDate": "2999-01-01"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.FOUNDING_DATE_MAX}

    def test_is_national_must_be_a_boolean(self, client, admin_headers):
        response = client.post(URL, json={**NEW_TEAM, "isNational": "no"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.IS_NATIONAL_TYPE}

    def test_missing_country(self, client, admin_headers):
        response = client.post(URL, json=without("countryId"), headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.COUNTRY_ID_REQUIRED}

    def test_unknown_country(self, client, admin_headers):
        response = client.post(URL, json={**NEW_TEAM, "countryId": 999}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": TEAM_MESSAGES.COUNTRY_NOT_FOUND}

    def test_country_id_as_numeric_string(self, client, admin_headers):
        response = client.post(URL, json={**NEW_TEAM, "countryId": "2"}, headers=admin_headers)
        assert response.status_code == 201
        assert response.json()["team"]["countryId"] == 2

    def test_country_id_type(self, client, admin_headers):
        response = client.post(URL, json={**NEW_TEAM, "countryId": 1.5}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.COUNTRY_ID_TYPE}

    def test_out_of_range_country_id(self, client, admin_headers):
        response = client.post(URL, json={**NEW_TEAM, "countryId": 10 ** 20}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": TEAM_MESSAGES.COUNTRY_NOT_FOUND}

    def test_update_team(self, client, admin_headers):
        response = client.patch(f"{URL}/1", json={"isNational": True, "countryId": 3}, headers=admin_headers)

        assert response.status_code == 200
        team = response.json()["team"]
        assert team["isNational"] is True
        assert team["countryId"] == 3
        assert team["name"] == "Team A"

    def test_update_to_code_in_use(self, client, admin_headers):
        response = client.patch(f"{URL}/1", json={"code": "TEB"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": TEAM_MESSAGES.CODE_IN_USE}

    def test_update_unknown_country(self, client, admin_headers):
        response = client.patch(f"{URL}/1", json={"countryId": 999}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": TEAM_MESSAGES.COUNTRY_NOT_FOUND}

    def test_update_missing_team(self, client, admin_headers):
        response = client.patch(f"{URL}/999", json={"name": "Team Zulu"}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": TEAM_MESSAGES.NOT_FOUND}

    def test_delete_twice(self, client, admin_headers):
        assert client.delete(f"{URL}/4", headers=admin_headers).status_code == 200
        response = client.delete(f"{URL}/4", headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": TEAM_MESSAGES.NOT_FOUND}


class TestUser:
    def test_create_forbidden(self, client, user_headers):
        assert client.post(URL, json=NEW_TEAM, headers=user_headers).status_code == 403

    def test_update_forbidden(self, client, user_headers):
        assert client.patch(f"{URL}/1", json={"name": "Team Zulu"}, headers=user_headers).status_code == 403


class TestAnonymous:
    def test_list_teams(self, client):
        response = client.get(URL)

        assert response.status_code == 200
        assert [team["code"] for team in response.json()["teams"]] == ["TEA", "TEB", "TEC", "TED"]

    def test_get_missing_team(self, client):
        response = client.get(f"{URL}/999")
        assert response.status_code == 404
        assert response.json() == {"err": TEAM_MESSAGES.NOT_FOUND}

    def test_create_requires_login(self, client):
        assert client.post(URL, json=NEW_TEAM).status_code == 401

    def test_get_out_of_range_id(self, client):
        response = client.get(f"{URL}/99999999999999999999")
        assert response.status_code == 404
        assert response.json() == {"err": TEAM_MESSAGES.NOT_FOUND}

    def test_get_non_ascii_digit_id(self, client):
        response = client.get(f"{URL}/²")
        assert response.status_code == 404
        assert response.json() == {"err": TEAM_MESSAGES.NOT_FOUND}

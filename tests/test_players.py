import json

from app.core.errors import OBJECT_TYPE_MESSAGE
from app.players.validations.player_validations import PLAYER_MESSAGES

URL = "/api/v1/players"
NEW_PLAYER = {
    "name": "Player E",
    "dateOfBirth": "1995-05-05",
    "height": 1.75,
    "weight": 72.5,
    "positionId": 2,
    "countryId": 1,
    "currentTeamId": 2,
}


def without(key: str) -> dict:
    return {name: value for name, value in NEW_PLAYER.items() if name != key}


class TestAdmin:
    def test_create_player(self, client, admin_headers):
        response = client.post(URL, json=NEW_PLAYER, headers=admin_headers)

        assert response.status_code == 201
        player = response.json()["player"]
        assert player["name"] == "Player E"
        assert player["dateOfBirth"].startswith("1995-05-05")
        assert float(player["height"]) == 1.75
        assert float(player["weight"]) == 72.5
        assert player["positionId"] == 2
        assert player["countryId"] == 1
        assert player["currentTeamId"] == 2

    def test_missing_name(self, client, admin_headers):
        response = client.post(URL, json=without("name"), headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": PLAYER_MESSAGES.NAME_REQUIRED}

    def test_name_in_use(self, client, admin_headers):
        response = client.post(URL, json={**NEW_PLAYER, "name": "Player A"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": PLAYER_MESSAGES.NAME_IN_USE}

    def test_date_of_birth_too_old(self, client, admin_headers):
        response = client.post(URL, json={**NEW_PLAYER, "dateOfBirth": "1799-12-31"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": PLAYER_MESSAGES.DATE_OF_BIRTH_MIN}

    def test_date_of_birth_format(self, client, admin_headers):
        response = client.post(URL, json={**NEW_PLAYER, "dateOfBirth": "05/05/1995"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": PLAYER_MESSAGES.DATE_OF_BIRTH_FORMAT}

    def test_height_type(self, client, admin_headers):
        response = client.post(URL, json={**NEW_PLAYER, "height": "tall"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": PLAYER_MESSAGES.HEIGHT_TYPE}

    def test_height_bounds(self, client, admin_headers):
        too_short = client.post(URL, json={**NEW_PLAYER, "height": 1.2}, headers=admin_headers)
        too_tall = client.post(URL, json={**NEW_PLAYER, "height": 2.5}, headers=admin_headers)

        assert too_short.json() == {"err": PLAYER_MESSAGES.HEIGHT_MIN}
        assert too_tall.json() == {"err": PLAYER_MESSAGES.HEIGHT_MAX}

    def test_nan_is_rejected(self, client, admin_headers):
        body = json.dumps({**NEW_PLAYER, "height": 0}).replace('"height": 0', '"height": NaN')
        response = client.post(URL, content=body, headers={**admin_headers, "Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json() == {"err": OBJECT_TYPE_MESSAGE}

    def test_infinite_weight_is_rejected(self, client, admin_headers):
        body = json.dumps({**NEW_PLAYER, "weight": 0}).replace('"weight": 0', '"weight": 1e999')
        response = client.post(URL, content=body, headers={**admin_headers, "Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json() == {"err": PLAYER_MESSAGES.WEIGHT_TYPE}

    def test_weight_bounds(self, client, admin_headers):
        too_light = client.post(URL, json={**NEW_PLAYER, "weight": 30}, headers=admin_headers)
        too_heavy = client.post(URL, json={**NEW_PLAYER, "weight": 150}, headers=admin_headers)

        assert too_light.json() == {"err": PLAYER_MESSAGES.WEIGHT_MIN}
        assert too_heavy.json() == {"err": PLAYER_MESSAGES.WEIGHT_MAX}

    def test_missing_weight(self, client, admin_headers):
        response = client.post(URL, json=without("weight"), headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": PLAYER_MESSAGES.WEIGHT_REQUIRED}

    def test_unknown_position(self, client, admin_headers):
        response = client.post(URL, json={**NEW_PLAYER, "positionId": 999}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": PLAYER_MESSAGES.POSITION_NOT_FOUND}

    def test_unknown_country(self, client, admin_headers):
        response = client.post(URL, json={**NEW_PLAYER, "countryId": 999}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": PLAYER_MESSAGES.COUNTRY_NOT_FOUND}

    def test_unknown_team(self, client, admin_headers):
        response = client.post(URL, json={**NEW_PLAYER, "currentTeamId": 999}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"err": PLAYER_MESSAGES.CURRENT_TEAM_NOT_FOUND}

    def test_missing_team(self, client, admin_headers):
        response = client.post(URL, json=without("currentTeamId"), headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": PLAYER_MESSAGES.CURRENT_TEAM_ID_REQUIRED}

    def test_update_player(self, client, admin_headers):
        response = client.patch(f"{URL}/1", json={"currentTeamId": 3, "height": 1.9}, headers=admin_headers)

        assert response.status_code == 200
        player = response.json()["player"]
        assert player["currentTeamId"] == 3
        assert float(player["height"]) == 1.9
        assert player["name"] == "Player A"

    def test_update_to_name_in_use(self, client, admin_headers):
        response = client.patch(f"{URL}/1", json={"name": "Player B"}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"err": PLAYER_MESSAGES.NAME_IN_USE}

    def test_delete_player(self, client, admin_headers):
        response = client.delete(f"{URL}/4", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["player"]["name"] == "Player D"
        assert client.get(f"{URL}/4").status_code == 404

    def test_deleting_team_removes_its_players(self, client, admin_headers):
        # Every seeded player plays for the first team
        assert client.delete("/api/v1/teams/1", headers=admin_headers).status_code == 200
        assert client.get(URL).json() == {"players": []}


class TestUser:
    def test_create_forbidden(self, client, user_headers):
        assert client.post(URL, json=NEW_PLAYER, headers=user_headers).status_code == 403

    def test_delete_forbidden(self, client, user_headers):
        assert client.delete(f"{URL}/1", headers=user_headers).status_code == 403


class TestAnonymous:
    def test_list_players(self, client):
        response = client.get(URL)

        assert response.status_code == 200
        players = response.json()["players"]
        assert [player["name"] for player in players] == ["Player A", "Player B", "Player C", "Player D"]
        assert all(float(player["height"]) == 1.8 for player in players)

    def test_get_missing_player(self, client):
        response = client.get(f"{URL}/999")
        assert response.status_code == 404
        assert response.json() == {"err": PLAYER_MESSAGES.NOT_FOUND}

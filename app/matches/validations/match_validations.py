from typing import List, Optional
from app.core.validation import EntityValidator, Field, id_field, reference
from app.competitions.models.competition_model import Competition
from app.matches.models.match_model import Match
from app.seasons.models.seasons_model import Season
from app.teams.models.team_model import Team


class MATCH_MESSAGES:
    COMPETITION_ID_TYPE = "The competition's id must be a number or a string"
    COMPETITION_ID_REQUIRED = "Please, provide the id of the match's competition"
    COMPETITION_NOT_FOUND = "No competition was found with the id provided"
    SEASON_ID_TYPE = "The season's id must be a number or a string"
    SEASON_ID_REQUIRED = "Please, provide the id of the match's season"
    SEASON_NOT_FOUND = "No season was found with the id provided"
    HOME_TEAM_ID_TYPE = "The home team's id must be a number or a string"
    HOME_TEAM_ID_REQUIRED = "Please, provide the id of the home team"
    HOME_TEAM_NOT_FOUND = "No team was found with the provided id for the home team"
    AWAY_TEAM_ID_TYPE = "The away team's id must be a number or a string"
    AWAY_TEAM_ID_REQUIRED = "Please, provide the id of the away team"
    AWAY_TEAM_NOT_FOUND = "No team was found with the provided id for the away team"
    NOT_FOUND = "No match was found with the provided id"
    ID_TYPE = "The match's id must be a number or a string"
    ID_REQUIRED = "Please, provide the id of a match"


def match_fields(exclude_id: Optional[int] = None) -> List[Field]:
    return [
        reference(
            "competitionId", "competition_id", Competition,
            MATCH_MESSAGES.COMPETITION_ID_TYPE,
            MATCH_MESSAGES.COMPETITION_NOT_FOUND,
            MATCH_MESSAGES.COMPETITION_ID_REQUIRED,
        ),
        reference(
            "seasonId", "season_id", Season,
            MATCH_MESSAGES.SEASON_ID_TYPE,
            MATCH_MESSAGES.SEASON_NOT_FOUND,
            MATCH_MESSAGES.SEASON_ID_REQUIRED,
        ),
        reference(
            "homeTeamId", "home_team_id", Team,
            MATCH_MESSAGES.HOME_TEAM_ID_TYPE,
            MATCH_MESSAGES.HOME_TEAM_NOT_FOUND,
            MATCH_MESSAGES.HOME_TEAM_ID_REQUIRED,
        ),
        reference(
            "awayTeamId", "away_team_id", Team,
            MATCH_MESSAGES.AWAY_TEAM_ID_TYPE,
            MATCH_MESSAGES.AWAY_TEAM_NOT_FOUND,
            MATCH_MESSAGES.AWAY_TEAM_ID_REQUIRED,
        ),
    ]


match_validator = EntityValidator(
    id_field(Match, MATCH_MESSAGES.NOT_FOUND, MATCH_MESSAGES.ID_TYPE, MATCH_MESSAGES.ID_REQUIRED),
    match_fields,
)

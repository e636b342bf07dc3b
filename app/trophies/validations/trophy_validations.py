from typing import List, Optional
from app.core.validation import EntityValidator, Field, id_field, reference
from app.competitions.models.competition_model import Competition
from app.seasons.models.seasons_model import Season
from app.teams.models.team_model import Team
from app.trophies.models.trophy_model import Trophy


class TROPHY_MESSAGES:
    COMPETITION_ID_TYPE = "The competition's id must be a number or a string"
    COMPETITION_ID_REQUIRED = "Please, provide the id of the trophy's competition"
    COMPETITION_NOT_FOUND = "No competition was found with the id provided"
    SEASON_ID_TYPE = "The season's id must be a number or a string"
    SEASON_ID_REQUIRED = "Please, provide the id of the trophy's season"
    SEASON_NOT_FOUND = "No season was found with the id provided"
    TEAM_ID_TYPE = "The team's id must be a number or a string"
    TEAM_ID_REQUIRED = "Please, provide the id of the team that won the trophy"
    TEAM_NOT_FOUND = "No team was found with the id provided"
    NOT_FOUND = "No trophy was found with the provided id"
    ID_TYPE = "The trophy's id must be a number or a string"
    ID_REQUIRED = "Please, provide the id of a trophy"


def trophy_fields(exclude_id: Optional[int] = None) -> List[Field]:
    return [
        reference(
            "competitionId", "competition_id", Competition,
            TROPHY_MESSAGES.COMPETITION_ID_TYPE,
            TROPHY_MESSAGES.COMPETITION_NOT_FOUND,
            TROPHY_MESSAGES.COMPETITION_ID_REQUIRED,
        ),
        reference(
            "seasonId", "season_id", Season,
            TROPHY_MESSAGES.SEASON_ID_TYPE,
            TROPHY_MESSAGES.SEASON_NOT_FOUND,
            TROPHY_MESSAGES.SEASON_ID_REQUIRED,
        ),
        reference(
            "teamId", "team_id", Team,
            TROPHY_MESSAGES.TEAM_ID_TYPE,
            TROPHY_MESSAGES.TEAM_NOT_FOUND,
            TROPHY_MESSAGES.TEAM_ID_REQUIRED,
        ),
    ]


trophy_validator = EntityValidator(
    id_field(Trophy, TROPHY_MESSAGES.NOT_FOUND, TROPHY_MESSAGES.ID_TYPE, TROPHY_MESSAGES.ID_REQUIRED),
    trophy_fields,
)

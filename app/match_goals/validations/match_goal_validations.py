"""
Goals only exist inside a match, so every validator here starts from the
match id found in the path and a goal counts as found only when it belongs
to that match.
"""
from typing import List
from sqlalchemy.orm import Session
from app.core.utils import parse_datetime, parse_id
from app.core.validation import (
    Field,
    FieldError,
    exists,
    is_boolean,
    is_datetime,
    is_id,
    is_string,
    optional,
    reference,
    validate,
)
from app.match_goals.models.match_goal_model import MatchGoal
from app.matches.models.match_model import Match
from app.players.models.player_model import Player
from app.teams.models.team_model import Team


class MATCH_GOAL_MESSAGES:
    MATCH_ID_TYPE = "The match's id must be a number or a string"
    MATCH_NOT_FOUND = "No match was found with the provided id"
    TEAM_ID_TYPE = "The team's id must be a number or a string"
    TEAM_ID_REQUIRED = "Please, provide the id of the team that scored the goal"
    TEAM_NOT_FOUND = "No team was found with the id provided"
    GOALSCORER_ID_TYPE = "The goalscorer's id must be a number or a string"
    GOALSCORER_ID_REQUIRED = "Please, provide the id of the goalscorer"
    GOALSCORER_NOT_FOUND = "No player was found with the provided id for the goalscorer"
    ASSISTANT_ID_TYPE = "The assistant's id must be a number or a string"
    ASSISTANT_NOT_FOUND = "No player was found with the provided id for the assistant"
    OWN_GOAL_TYPE = "The own goal value must be a boolean"
    OWN_GOAL_REQUIRED = "Please, inform if the goal is an own goal"
    GOAL_TIMESTAMP_TYPE = "The goal's timestamp must be a string"
    GOAL_TIMESTAMP_FORMAT = "The goal's timestamp must be formatted as a date"
    GOAL_TIMESTAMP_REQUIRED = "Please, provide the goal's timestamp"
    NOT_FOUND = "No goal was found with the provided id for this match"
    ID_TYPE = "The goal's id must be a number or a string"


def match_field() -> Field:
    return Field(
        "matchId",
        [is_id(MATCH_GOAL_MESSAGES.MATCH_ID_TYPE), exists(Match, MATCH_GOAL_MESSAGES.MATCH_NOT_FOUND)],
    )


def goal_field(match_id) -> Field:
    return Field(
        "goalId",
        [
            is_id(MATCH_GOAL_MESSAGES.ID_TYPE),
            exists(MatchGoal, MATCH_GOAL_MESSAGES.NOT_FOUND, match_id=parse_id(match_id)),
        ],
    )


def match_goal_fields() -> List[Field]:
    return [
        reference(
            "teamId", "team_id", Team,
            MATCH_GOAL_MESSAGES.TEAM_ID_TYPE,
            MATCH_GOAL_MESSAGES.TEAM_NOT_FOUND,
            MATCH_GOAL_MESSAGES.TEAM_ID_REQUIRED,
        ),
        reference(
            "goalscorerId", "goalscorer_id", Player,
            MATCH_GOAL_MESSAGES.GOALSCORER_ID_TYPE,
            MATCH_GOAL_MESSAGES.GOALSCORER_NOT_FOUND,
            MATCH_GOAL_MESSAGES.GOALSCORER_ID_REQUIRED,
        ),
        reference(
            "assistantId", "assistant_id", Player,
            MATCH_GOAL_MESSAGES.ASSISTANT_ID_TYPE,
            MATCH_GOAL_MESSAGES.ASSISTANT_NOT_FOUND,
        ),
        Field(
            "isOwnGoal",
            [is_boolean(MATCH_GOAL_MESSAGES.OWN_GOAL_TYPE)],
            required=MATCH_GOAL_MESSAGES.OWN_GOAL_REQUIRED,
            column="is_own_goal",
        ),
        Field(
            "goalTimestamp",
            [
                is_string(MATCH_GOAL_MESSAGES.GOAL_TIMESTAMP_TYPE),
                is_datetime(MATCH_GOAL_MESSAGES.GOAL_TIMESTAMP_FORMAT),
            ],
            required=MATCH_GOAL_MESSAGES.GOAL_TIMESTAMP_REQUIRED,
            column="goal_timestamp",
            parse=parse_datetime,
        ),
    ]


def validate_match(db: Session, match_id) -> List[FieldError]:
    return validate(db, {"matchId": match_id}, [match_field()])


def validate_goal(db: Session, match_id, goal_id) -> List[FieldError]:
    errors = validate_match(db, match_id)
    if errors:
        return errors
    return validate(db, {"goalId": goal_id}, [goal_field(match_id)])


def validate_create(db: Session, match_id, data: dict) -> List[FieldError]:
    return validate_match(db, match_id) or validate(db, data, match_goal_fields())


def validate_update(db: Session, match_id, goal_id, data: dict) -> List[FieldError]:
    return validate_goal(db, match_id, goal_id) or validate(db, data, optional(match_goal_fields()))

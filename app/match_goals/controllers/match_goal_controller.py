from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.auth import admin_required
from app.core.database import get_db
from app.core.schemas import serialize, serialize_all
from app.core.utils import get_payload
from app.match_goals.schemas.match_goal_schema import MatchGoalSchema
from app.match_goals.services.match_goal_service import MatchGoalService

# Mounted under /matches
router = APIRouter()


@router.get("/{match_id}/goals")
def get_all_match_goals(match_id: str, db: Session = Depends(get_db)):
    goals = MatchGoalService(db).get_goals(match_id)
    return {"matchGoals": serialize_all(MatchGoalSchema, goals)}


@router.get("/{match_id}/goals/{goal_id}")
def get_match_goal(match_id: str, goal_id: str, db: Session = Depends(get_db)):
    goal = MatchGoalService(db).get_goal(match_id, goal_id)
    return {"matchGoal": serialize(MatchGoalSchema, goal)}


@router.post("/{match_id}/goals", status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_required)])
def create_match_goal(match_id: str, data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    goal = MatchGoalService(db).create_goal(match_id, data)
    return {"matchGoal": serialize(MatchGoalSchema, goal)}


@router.patch("/{match_id}/goals/{goal_id}", dependencies=[Depends(admin_required)])
def update_match_goal(
    match_id: str,
    goal_id: str,
    data: dict = Depends(get_payload),
    db: Session = Depends(get_db),
):
    goal = MatchGoalService(db).update_goal(match_id, goal_id, data)
    return {"matchGoal": serialize(MatchGoalSchema, goal)}


@router.delete("/{match_id}/goals/{goal_id}", dependencies=[Depends(admin_required)])
def delete_match_goal(match_id: str, goal_id: str, db: Session = Depends(get_db)):
    goal = MatchGoalService(db).delete_goal(match_id, goal_id)
    return {"matchGoal": serialize(MatchGoalSchema, goal)}

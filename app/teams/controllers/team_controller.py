from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.auth import admin_required
from app.core.database import get_db
from app.core.schemas import serialize, serialize_all
from app.core.utils import get_payload
from app.teams.schemas.team_schema import TeamSchema
from app.teams.services.team_service import TeamService

router = APIRouter()


@router.get("")
def get_all_teams(db: Session = Depends(get_db)):
    teams = TeamService(db).get_all()
    return {"teams": serialize_all(TeamSchema, teams)}


@router.get("/{team_id}")
def get_team(team_id: str, db: Session = Depends(get_db)):
    team = TeamService(db).get_or_raise(team_id)
    return {"team": serialize(TeamSchema, team)}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_required)])
def create_team(data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    team = TeamService(db).create(data)
    return {"team": serialize(TeamSchema, team)}


@router.patch("/{team_id}", dependencies=[Depends(admin_required)])
def update_team(team_id: str, data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    team = TeamService(db).update(team_id, data)
    return {"team": serialize(TeamSchema, team)}


@router.delete("/{team_id}", dependencies=[Depends(admin_required)])
def delete_team(team_id: str, db: Session = Depends(get_db)):
    team = TeamService(db).delete(team_id)
    return {"team": serialize(TeamSchema, team)}

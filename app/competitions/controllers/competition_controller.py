from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.auth import admin_required
from app.core.database import get_db
from app.core.schemas import serialize, serialize_all
from app.core.utils import get_payload
from app.competitions.schemas.competition_schema import CompetitionSchema
from app.competitions.services.competition_service import CompetitionService

router = APIRouter()


@router.get("")
def get_all_competitions(db: Session = Depends(get_db)):
    competitions = CompetitionService(db).get_all()
    return {"competitions": serialize_all(CompetitionSchema, competitions)}


@router.get("/{competition_id}")
def get_competition(competition_id: str, db: Session = Depends(get_db)):
    competition = CompetitionService(db).get_or_raise(competition_id)
    return {"competition": serialize(CompetitionSchema, competition)}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_required)])
def create_competition(data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    competition = CompetitionService(db).create(data)
    return {"competition": serialize(CompetitionSchema, competition)}


@router.patch("/{competition_id}", dependencies=[Depends(admin_required)])
def update_competition(competition_id: str, data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    competition = CompetitionService(db).update(competition_id, data)
    return {"competition": serialize(CompetitionSchema, competition)}


@router.delete("/{competition_id}", dependencies=[Depends(admin_required)])
def delete_competition(competition_id: str, db: Session = Depends(get_db)):
    competition = CompetitionService(db).delete(competition_id)
    return {"competition": serialize(CompetitionSchema, competition)}

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.auth import admin_required
from app.core.database import get_db
from app.core.schemas import serialize, serialize_all
from app.core.utils import get_payload
from app.matches.schemas.match_schema import MatchSchema
from app.matches.services.match_service import MatchService

router = APIRouter()


@router.get("")
def get_all_matches(db: Session = Depends(get_db)):
    matches = MatchService(db).get_all()
    return {"matches": serialize_all(MatchSchema, matches)}


@router.get("/{match_id}")
def get_match(match_id: str, db: Session = Depends(get_db)):
    match = MatchService(db).get_or_raise(match_id)
    return {"match": serialize(MatchSchema, match)}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_required)])
def create_match(data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    match = MatchService(db).create(data)
    return {"match": serialize(MatchSchema, match)}


@router.patch("/{match_id}", dependencies=[Depends(admin_required)])
def update_match(match_id: str, data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    match = MatchService(db).update(match_id, data)
    return {"match": serialize(MatchSchema, match)}


@router.delete("/{match_id}", dependencies=[Depends(admin_required)])
def delete_match(match_id: str, db: Session = Depends(get_db)):
    match = MatchService(db).delete(match_id)
    return {"match": serialize(MatchSchema, match)}

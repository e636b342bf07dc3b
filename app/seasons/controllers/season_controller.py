from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.auth import admin_required
from app.core.database import get_db
from app.core.schemas import serialize, serialize_all
from app.core.utils import get_payload
from app.seasons.schemas.season_schema import SeasonSchema
from app.seasons.services.season_service import SeasonService

router = APIRouter()


@router.get("")
def get_all_seasons(db: Session = Depends(get_db)):
    seasons = SeasonService(db).get_all()
    return {"seasons": serialize_all(SeasonSchema, seasons)}


@router.get("/{season_id}")
def get_season(season_id: str, db: Session = Depends(get_db)):
    season = SeasonService(db).get_or_raise(season_id)
    return {"season": serialize(SeasonSchema, season)}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_required)])
def create_season(data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    season = SeasonService(db).create(data)
    return {"season": serialize(SeasonSchema, season)}


@router.patch("/{season_id}", dependencies=[Depends(admin_required)])
def update_season(season_id: str, data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    season = SeasonService(db).update(season_id, data)
    return {"season": serialize(SeasonSchema, season)}


@router.delete("/{season_id}", dependencies=[Depends(admin_required)])
def delete_season(season_id: str, db: Session = Depends(get_db)):
    season = SeasonService(db).delete(season_id)
    return {"season": serialize(SeasonSchema, season)}

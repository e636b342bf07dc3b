from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.auth import admin_required
from app.core.database import get_db
from app.core.schemas import serialize, serialize_all
from app.core.utils import get_payload
from app.trophies.schemas.trophy_schema import TrophySchema
from app.trophies.services.trophy_service import TrophyService

router = APIRouter()


@router.get("")
def get_all_trophies(db: Session = Depends(get_db)):
    trophies = TrophyService(db).get_all()
    return {"trophies": serialize_all(TrophySchema, trophies)}


@router.get("/{trophy_id}")
def get_trophy(trophy_id: str, db: Session = Depends(get_db)):
    trophy = TrophyService(db).get_or_raise(trophy_id)
    return {"trophy": serialize(TrophySchema, trophy)}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_required)])
def create_trophy(data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    trophy = TrophyService(db).create(data)
    return {"trophy": serialize(TrophySchema, trophy)}


@router.patch("/{trophy_id}", dependencies=[Depends(admin_required)])
def update_trophy(trophy_id: str, data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    trophy = TrophyService(db).update(trophy_id, data)
    return {"trophy": serialize(TrophySchema, trophy)}


@router.delete("/{trophy_id}", dependencies=[Depends(admin_required)])
def delete_trophy(trophy_id: str, db: Session = Depends(get_db)):
    trophy = TrophyService(db).delete(trophy_id)
    return {"trophy": serialize(TrophySchema, trophy)}

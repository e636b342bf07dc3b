from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.auth import admin_required
from app.core.database import get_db
from app.core.schemas import serialize, serialize_all
from app.core.utils import get_payload
from app.positions.schemas.position_schema import PositionSchema
from app.positions.services.position_service import PositionService

router = APIRouter()


@router.get("")
def get_all_positions(db: Session = Depends(get_db)):
    positions = PositionService(db).get_all()
    return {"positions": serialize_all(PositionSchema, positions)}


@router.get("/{position_id}")
def get_position(position_id: str, db: Session = Depends(get_db)):
    position = PositionService(db).get_or_raise(position_id)
    return {"position": serialize(PositionSchema, position)}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_required)])
def create_position(data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    position = PositionService(db).create(data)
    return {"position": serialize(PositionSchema, position)}


@router.patch("/{position_id}", dependencies=[Depends(admin_required)])
def update_position(position_id: str, data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    position = PositionService(db).update(position_id, data)
    return {"position": serialize(PositionSchema, position)}


@router.delete("/{position_id}", dependencies=[Depends(admin_required)])
def delete_position(position_id: str, db: Session = Depends(get_db)):
    position = PositionService(db).delete(position_id)
    return {"position": serialize(PositionSchema, position)}

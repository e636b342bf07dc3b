from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.auth import admin_required
from app.core.database import get_db
from app.core.schemas import serialize, serialize_all
from app.core.utils import get_payload
from app.players.schemas.player_schema import PlayerSchema
from app.players.services.player_service import PlayerService

router = APIRouter()


@router.get("")
def get_all_players(db: Session = Depends(get_db)):
    players = PlayerService(db).get_all()
    return {"players": serialize_all(PlayerSchema, players)}


@router.get("/{player_id}")
def get_player(player_id: str, db: Session = Depends(get_db)):
    player = PlayerService(db).get_or_raise(player_id)
    return {"player": serialize(PlayerSchema, player)}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_required)])
def create_player(data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    player = PlayerService(db).create(data)
    return {"player": serialize(PlayerSchema, player)}


@router.patch("/{player_id}", dependencies=[Depends(admin_required)])
def update_player(player_id: str, data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    player = PlayerService(db).update(player_id, data)
    return {"player": serialize(PlayerSchema, player)}


@router.delete("/{player_id}", dependencies=[Depends(admin_required)])
def delete_player(player_id: str, db: Session = Depends(get_db)):
    player = PlayerService(db).delete(player_id)
    return {"player": serialize(PlayerSchema, player)}

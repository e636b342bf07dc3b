from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.auth import admin_required
from app.core.database import get_db
from app.core.schemas import serialize, serialize_all
from app.core.utils import get_payload
from app.transfers.schemas.transfer_schema import TransferSchema
from app.transfers.services.transfer_service import TransferService

router = APIRouter()


@router.get("")
def get_all_transfers(db: Session = Depends(get_db)):
    transfers = TransferService(db).get_all()
    return {"transfers": serialize_all(TransferSchema, transfers)}


@router.get("/{transfer_id}")
def get_transfer(transfer_id: str, db: Session = Depends(get_db)):
    transfer = TransferService(db).get_or_raise(transfer_id)
    return {"transfer": serialize(TransferSchema, transfer)}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_required)])
def create_transfer(data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    transfer = TransferService(db).create(data)
    return {"transfer": serialize(TransferSchema, transfer)}


@router.patch("/{transfer_id}", dependencies=[Depends(admin_required)])
def update_transfer(transfer_id: str, data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    transfer = TransferService(db).update(transfer_id, data)
    return {"transfer": serialize(TransferSchema, transfer)}


@router.delete("/{transfer_id}", dependencies=[Depends(admin_required)])
def delete_transfer(transfer_id: str, db: Session = Depends(get_db)):
    transfer = TransferService(db).delete(transfer_id)
    return {"transfer": serialize(TransferSchema, transfer)}

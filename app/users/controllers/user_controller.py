from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.auth import Principal, admin_required, login_required
from app.core.database import get_db
from app.core.schemas import serialize, serialize_all
from app.core.utils import get_payload
from app.users.schemas.user_schema import UserSchema
from app.users.services.user_service import UserService

router = APIRouter()


@router.get("", dependencies=[Depends(admin_required)])
def get_all_users(db: Session = Depends(get_db)):
    users = UserService(db).get_all()
    return {"users": serialize_all(UserSchema, users)}


# Registered before /{user_id} so "account" is not read as an id
@router.delete("/account")
def delete_own_account(
    principal: Principal = Depends(login_required),
    data: dict = Depends(get_payload),
    db: Session = Depends(get_db),
):
    """Password-confirmed removal of the caller's own account."""
    user = UserService(db).delete_own_account(principal, data)
    return {"user": serialize(UserSchema, user)}


@router.get("/{user_id}", dependencies=[Depends(admin_required)])
def get_user(user_id: str, db: Session = Depends(get_db)):
    user = UserService(db).get_or_raise(user_id)
    return {"user": serialize(UserSchema, user)}


@router.patch("/{user_id}")
def update_user(
    user_id: str,
    principal: Principal = Depends(login_required),
    data: dict = Depends(get_payload),
    db: Session = Depends(get_db),
):
    return UserService(db).update_account(principal, user_id, data)


@router.delete("/{user_id}", dependencies=[Depends(admin_required)])
def delete_user(user_id: str, db: Session = Depends(get_db)):
    user = UserService(db).delete(user_id)
    return {"user": serialize(UserSchema, user)}

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.auth import Principal, login_required
from app.core.database import get_db
from app.core.utils import get_payload
from app.users.services.user_service import UserService

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    """Create a USER account and log it in."""
    return UserService(db).register(data)


@router.post("/login")
def login(data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    return UserService(db).login(data)


@router.get("/user")
def user_info(principal: Principal = Depends(login_required)):
    """The caller's claims together with a freshly signed token."""
    return UserService.refresh_session(principal)

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.auth import admin_required
from app.core.database import get_db
from app.core.schemas import serialize, serialize_all
from app.core.utils import get_payload
from app.country.schemas.country_schema import CountrySchema
from app.country.services.country_service import CountryService

router = APIRouter()


@router.get("")
def get_all_countries(db: Session = Depends(get_db)):
    countries = CountryService(db).get_all()
    return {"countries": serialize_all(CountrySchema, countries)}


@router.get("/{country_id}")
def get_country(country_id: str, db: Session = Depends(get_db)):
    country = CountryService(db).get_or_raise(country_id)
    return {"country": serialize(CountrySchema, country)}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_required)])
def create_country(data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    country = CountryService(db).create(data)
    return {"country": serialize(CountrySchema, country)}


@router.patch("/{country_id}", dependencies=[Depends(admin_required)])
def update_country(country_id: str, data: dict = Depends(get_payload), db: Session = Depends(get_db)):
    country = CountryService(db).update(country_id, data)
    return {"country": serialize(CountrySchema, country)}


@router.delete("/{country_id}", dependencies=[Depends(admin_required)])
def delete_country(country_id: str, db: Session = Depends(get_db)):
    country = CountryService(db).delete(country_id)
    return {"country": serialize(CountrySchema, country)}

from app.core.crud import CrudService
from app.country.models.country_model import Country
from app.country.validations.country_validations import country_validator

class CountryService(CrudService):
    model = Country
    validator = country_validator
    label = "country"

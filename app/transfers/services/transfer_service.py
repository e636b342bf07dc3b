from app.core.crud import CrudService
from app.transfers.models.transfer_model import Transfer
from app.transfers.validations.transfer_validations import transfer_validator

class TransferService(CrudService):
    model = Transfer
    validator = transfer_validator
    label = "transfer"

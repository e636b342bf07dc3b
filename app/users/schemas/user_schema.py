from datetime import datetime
from app.core.schemas import ApiSchema
from app.users.models.user_model import Role


class UserSchema(ApiSchema):
    id: int
    name: str
    email: str
    role: Role
    created_at: datetime
    updated_at: datetime

# user.py
from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    username: str
    # Already hashed; see app.utils.password_hash.
    password: str
    is_admin: bool = False


class UserRecord(UserCreate):
    id: int

    model_config = ConfigDict(from_attributes=True)

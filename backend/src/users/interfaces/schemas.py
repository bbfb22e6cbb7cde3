from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from users.domain.entities import User, UserStatus


class CreateUserRequest(BaseModel):
    username: str
    password: str
    birthday: date | None = None


class LoginRequest(BaseModel):
    username: str
    password: str


class EditUserRequest(BaseModel):
    username: str | None = None
    birthday: date | None = None


class UserResponse(BaseModel):
    """Outward view of a user; password and token are never exposed."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    username: str
    creation_date: date
    status: UserStatus
    birthday: date | None = None


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        creation_date=user.creation_date,
        status=user.status,
        birthday=user.birthday,
    )

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum


class UserStatus(StrEnum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"


@dataclass
class User:
    username: str
    password: str
    token: str
    status: UserStatus
    creation_date: date
    birthday: date | None = field(default=None)
    id: int | None = field(default=None)

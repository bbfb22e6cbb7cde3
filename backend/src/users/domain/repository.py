from typing import Protocol

from users.domain.entities import User


class UserRepository(Protocol):
    async def list_all(self) -> list[User]: ...

    async def get_by_id(self, user_id: int) -> User | None: ...

    async def get_by_username(self, username: str) -> User | None: ...

    async def get_by_password(self, password: str) -> User | None: ...

    async def create(self, user: User) -> User:
        """Stage a new user and return it with its store-assigned id."""
        ...

    async def update(self, user: User) -> User:
        """Stage changes to username, status and birthday."""
        ...

    async def commit(self) -> None: ...

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import ConflictError
from users.domain.entities import User, UserStatus
from users.infrastructure.orm_models import UserModel

# ids outside the signed 64-bit range can never be stored
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class DbUserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> list[User]:
        result = await self.session.execute(select(UserModel).order_by(UserModel.id))
        return [_to_entity(m) for m in result.scalars().all()]

    async def get_by_id(self, user_id: int) -> User | None:
        if not MIN_ID <= user_id <= MAX_ID:
            return None
        model = await self.session.get(UserModel, user_id)
        return _to_entity(model) if model else None

    async def get_by_username(self, username: str) -> User | None:
        result = await self.session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def get_by_password(self, password: str) -> User | None:
        result = await self.session.execute(
            select(UserModel).where(UserModel.password == password).limit(1)
        )
        model = result.scalars().first()
        return _to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = UserModel(
            username=user.username,
            password=user.password,
            token=user.token,
            status=user.status.value,
            creation_date=user.creation_date,
            birthday=user.birthday,
        )
        self.session.add(model)
        await self._flush()
        return _to_entity(model)

    async def update(self, user: User) -> User:
        model = await self.session.get(UserModel, user.id)
        # token and creation_date are never rewritten
        model.username = user.username
        model.status = user.status.value
        model.birthday = user.birthday
        await self._flush()
        return _to_entity(model)

    async def commit(self) -> None:
        await self.session.commit()

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            raise ConflictError("Username already taken")


def _to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        username=model.username,
        password=model.password,
        token=model.token,
        status=UserStatus(model.status),
        creation_date=model.creation_date,
        birthday=model.birthday,
    )

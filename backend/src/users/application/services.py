import logging
from datetime import date
from uuid import uuid4

from shared.config import settings
from shared.exceptions import (
    AppError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    NotFoundError,
)
from users.domain.entities import User, UserStatus
from users.domain.repository import UserRepository

logger = logging.getLogger(__name__)


async def list_users(repo: UserRepository) -> list[User]:
    return await repo.list_all()


async def get_user_profile(repo: UserRepository, user_id: int) -> User:
    user = await repo.get_by_id(user_id)
    if not user:
        raise NotFoundError("User", str(user_id))
    return user


async def create_user(
    repo: UserRepository,
    username: str,
    password: str,
    birthday: date | None = None,
) -> User:
    user = User(
        username=username,
        password=password,
        token=str(uuid4()),
        status=UserStatus(settings.USER_INITIAL_STATUS),
        creation_date=date.today(),
        birthday=birthday,
    )
    await _check_if_user_exists(repo, user)

    user = await repo.create(user)
    await repo.commit()

    logger.info("Created user %s (id=%s)", user.username, user.id)
    return user


async def login_user(repo: UserRepository, username: str, password: str) -> User:
    user = await repo.get_by_username(username)
    if not user or user.password != password:
        logger.info("Rejected login for username %r", username)
        raise AuthenticationError()

    user.status = UserStatus.ONLINE
    user = await repo.update(user)
    await repo.commit()

    logger.info("User %s (id=%s) logged in", user.username, user.id)
    return user


async def edit_user_profile(
    repo: UserRepository,
    user_id: int,
    username: str | None = None,
    birthday: date | None = None,
) -> User:
    user = await repo.get_by_id(user_id)
    if not user:
        raise NotFoundError("User", str(user_id))

    if username is not None and username != user.username:
        if await repo.get_by_username(username):
            raise BadRequestError(
                "The username provided is not unique. "
                "Therefore, the username could not be changed!"
            )
        user.username = username
    if birthday is not None:
        user.birthday = birthday

    user = await repo.update(user)
    await repo.commit()

    logger.debug("Edited profile of user id=%s", user.id)
    return user


async def logout_user(repo: UserRepository, user_id: int) -> None:
    user = await repo.get_by_id(user_id)
    if not user:
        return

    user.status = UserStatus.OFFLINE
    await repo.update(user)
    await repo.commit()

    logger.info("User %s (id=%s) logged out", user.username, user.id)


async def _check_if_user_exists(repo: UserRepository, user: User) -> None:
    """Reject a new user whose username (or, when enabled, password) is taken."""
    if await repo.get_by_username(user.username):
        raise _duplicate_error("add User failed because username already exists")
    if settings.USER_UNIQUE_PASSWORD and await repo.get_by_password(user.password):
        raise _duplicate_error("add User failed because password already exists")


def _duplicate_error(message: str) -> AppError:
    if settings.USER_DUPLICATE_ERROR == "bad_request":
        return BadRequestError(message)
    return ConflictError(message)

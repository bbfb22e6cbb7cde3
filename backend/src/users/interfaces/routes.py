from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from shared.dependencies import get_db
from users.application.services import (
    create_user,
    edit_user_profile,
    get_user_profile,
    list_users,
    login_user,
    logout_user,
)
from users.infrastructure.user_repository import DbUserRepository
from users.interfaces.schemas import (
    CreateUserRequest,
    EditUserRequest,
    LoginRequest,
    UserResponse,
    to_user_response,
)

router = APIRouter(tags=["users"])


@router.get("/users", response_model=list[UserResponse])
async def list_all(db: AsyncSession = Depends(get_db)):
    repo = DbUserRepository(db)
    return [to_user_response(u) for u in await list_users(repo)]


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_one(user_id: int, db: AsyncSession = Depends(get_db)):
    repo = DbUserRepository(db)
    return to_user_response(await get_user_profile(repo, user_id))


@router.post("/users", response_model=UserResponse, status_code=201)
async def create(body: CreateUserRequest, db: AsyncSession = Depends(get_db)):
    repo = DbUserRepository(db)
    user = await create_user(
        repo,
        username=body.username,
        password=body.password,
        birthday=body.birthday,
    )
    return to_user_response(user)


@router.post("/user-logins", response_model=UserResponse, status_code=201)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    repo = DbUserRepository(db)
    user = await login_user(repo, username=body.username, password=body.password)
    return to_user_response(user)


@router.put("/users/{user_id}", status_code=205, response_class=Response)
async def edit(user_id: int, body: EditUserRequest, db: AsyncSession = Depends(get_db)):
    repo = DbUserRepository(db)
    await edit_user_profile(
        repo, user_id=user_id, username=body.username, birthday=body.birthday
    )
    return Response(status_code=205)


@router.put("/user-logouts/{user_id}", status_code=200, response_class=Response)
async def logout(user_id: int, db: AsyncSession = Depends(get_db)):
    repo = DbUserRepository(db)
    await logout_user(repo, user_id)
    return Response(status_code=200)

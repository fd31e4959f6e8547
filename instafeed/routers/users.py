from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from instafeed.database import get_db, get_readonly_db
from instafeed.exceptions import DataConflictError
from instafeed.schemas import ErrorResponse, UserCreate, UserPasswordUpdate, UserResponse
from instafeed.services import user_service

router = APIRouter(
    prefix="/api/v1/users",
    tags=["users"],
    responses={code: {"model": ErrorResponse} for code in (400, 401, 404, 409)},
)

@router.post("", status_code=201, response_model=UserResponse)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await user_service.create_user(db, data)
    except IntegrityError:
        raise DataConflictError("A user with this email already exists")

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_readonly_db)):
    return await user_service.read_user(db, user_id)

@router.patch("/{user_id}/password", response_model=UserResponse)
async def update_password(user_id: int, data: UserPasswordUpdate, db: AsyncSession = Depends(get_db)):
    return await user_service.update_password(db, user_id, data)

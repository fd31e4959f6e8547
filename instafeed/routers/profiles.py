from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from instafeed.database import get_db, get_readonly_db
from instafeed.schemas import (
    CreateProfileResponse,
    ErrorResponse,
    ProfileCreate,
    ProfileUpdate,
    ReadProfileResponse,
    UpdateProfileResponse,
)
from instafeed.services import profile_service

router = APIRouter(
    prefix="/api/v1/profiles",
    tags=["profiles"],
    responses={code: {"model": ErrorResponse} for code in (404, 409)},
)

@router.post("", status_code=201, response_model=CreateProfileResponse)
async def create_profile(data: ProfileCreate, db: AsyncSession = Depends(get_db)):
    return await profile_service.create_profile(db, data)

@router.get("/{profile_id}", response_model=ReadProfileResponse)
async def get_profile(profile_id: int, db: AsyncSession = Depends(get_readonly_db)):
    return await profile_service.read_profile(db, profile_id)

@router.patch("/{profile_id}", response_model=UpdateProfileResponse)
async def update_profile(profile_id: int, data: ProfileUpdate, db: AsyncSession = Depends(get_db)):
    return await profile_service.update_profile(db, profile_id, data)

@router.delete("/{profile_id}", status_code=204)
async def delete_profile(profile_id: int, db: AsyncSession = Depends(get_db)):
    await profile_service.delete_profile(db, profile_id)

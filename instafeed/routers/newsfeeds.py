from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from instafeed.database import get_db, get_readonly_db
from instafeed.dependencies import PaginationParams
from instafeed.schemas import (
    CreateNewsfeedResponse,
    ErrorResponse,
    NewsfeedCreate,
    NewsfeedPage,
    NewsfeedUpdate,
    ReadNewsfeedResponse,
    UpdateNewsfeedResponse,
)
from instafeed.services import newsfeed_service

router = APIRouter(
    prefix="/api/v1/newsfeeds",
    tags=["newsfeeds"],
    responses={code: {"model": ErrorResponse} for code in (404, 409)},
)

@router.post("", status_code=201, response_model=CreateNewsfeedResponse)
async def create_newsfeed(data: NewsfeedCreate, db: AsyncSession = Depends(get_db)):
    return await newsfeed_service.create_newsfeed(db, data.profile_id, data.content, data.image_path)

@router.get("", response_model=NewsfeedPage)
async def list_newsfeeds(
    pagination: PaginationParams = Depends(),
    db: AsyncSession = Depends(get_readonly_db),
):
    return await newsfeed_service.read_all_newsfeeds(db, pagination.page, pagination.page_size)

@router.get("/{newsfeed_id}", response_model=ReadNewsfeedResponse)
async def get_newsfeed(newsfeed_id: int, db: AsyncSession = Depends(get_readonly_db)):
    return await newsfeed_service.read_newsfeed(db, newsfeed_id)

@router.patch("/{newsfeed_id}", response_model=UpdateNewsfeedResponse)
async def update_newsfeed(newsfeed_id: int, data: NewsfeedUpdate, db: AsyncSession = Depends(get_db)):
    return await newsfeed_service.update_newsfeed(db, newsfeed_id, data.content)

@router.delete("/{newsfeed_id}", status_code=204)
async def delete_newsfeed(newsfeed_id: int, db: AsyncSession = Depends(get_db)):
    await newsfeed_service.delete_newsfeed(db, newsfeed_id)

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from instafeed.database import get_db, get_readonly_db
from instafeed.schemas import (
    ErrorResponse,
    FollowerResponse,
    FollowRequestCreate,
    FollowStatusUpdate,
    UpdateFollowerResponse,
)
from instafeed.services import follower_service

router = APIRouter(
    prefix="/api/v1/followers",
    tags=["followers"],
    responses={code: {"model": ErrorResponse} for code in (400, 404, 409)},
)

@router.post("", status_code=201, response_model=FollowerResponse)
async def send_follow_request(data: FollowRequestCreate, db: AsyncSession = Depends(get_db)):
    return await follower_service.send_follow_request(
        db, data.sender_profile_id, data.receiver_profile_id
    )

@router.get("", response_model=list[FollowerResponse])
async def list_followers(db: AsyncSession = Depends(get_readonly_db)):
    return await follower_service.read_all_followers(db)

@router.patch("/{follower_id}", response_model=UpdateFollowerResponse)
async def update_following_status(
    follower_id: int, data: FollowStatusUpdate, db: AsyncSession = Depends(get_db)
):
    return await follower_service.update_following_status(
        db, follower_id, data.request_sender_id, data.status
    )

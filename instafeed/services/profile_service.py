"""
Profile service: the public identity a user posts and follows with.

Profiles soft-delete the same way newsfeeds do.  Deleting a profile does
not cascade to its posts; those stay readable by id until deleted
themselves.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from instafeed import repositories
from instafeed.exceptions import DataAlreadyDeletedError, DataNotFoundError
from instafeed.models import Profile, Visibility
from instafeed.schemas import (
    CreateProfileResponse,
    ProfileCreate,
    ProfileUpdate,
    ReadProfileResponse,
    UpdateProfileResponse,
)

logger = logging.getLogger(__name__)


async def create_profile(db: AsyncSession, data: ProfileCreate) -> CreateProfileResponse:
    user = await repositories.find_user(db, data.user_id)
    if user is None:
        raise DataNotFoundError()

    profile = await repositories.save(
        db,
        Profile(
            user_id=user.id,
            nickname=data.nickname,
            content=data.content,
            image_path=data.image_path,
            is_deleted=False,
        ),
    )
    logger.info("Profile %d created for user %d", profile.id, user.id)
    return CreateProfileResponse.model_validate(profile)


async def read_profile(db: AsyncSession, profile_id: int) -> ReadProfileResponse:
    profile = await repositories.find_profile(db, profile_id)
    if profile is None:
        raise DataNotFoundError()
    return ReadProfileResponse.model_validate(profile)


async def update_profile(
    db: AsyncSession, profile_id: int, data: ProfileUpdate
) -> UpdateProfileResponse:
    """Apply only the fields present in *data* to an active profile."""
    profile = await repositories.find_profile(db, profile_id)
    if profile is None:
        raise DataNotFoundError()

    profile.update(**data.model_dump(exclude_unset=True))
    await db.flush()
    return UpdateProfileResponse.model_validate(profile)


async def delete_profile(db: AsyncSession, profile_id: int) -> None:
    profile = await repositories.find_profile(db, profile_id, Visibility.ANY)
    if profile is None:
        raise DataNotFoundError()
    if profile.state is Visibility.DELETED:
        raise DataAlreadyDeletedError()

    profile.mark_as_deleted()
    await db.flush()
    logger.info("Profile %d deleted", profile.id)

"""
Newsfeed service: lifecycle of a single post.

Design notes
------------
- A post is ACTIVE until deleted, then DELETED for good.  The row is
  kept; ``is_deleted`` flips.  The entity itself refuses to edit or
  re-delete a dead post, so the checks here only decide *which* error
  the caller sees.
- ``read_newsfeed`` and ``update_newsfeed`` look up with
  ``Visibility.ACTIVE``: a deleted post and a missing one both answer
  404.  ``delete_newsfeed`` looks up with ``Visibility.ANY`` so a second
  delete answers 409 instead of 404.
- Service functions flush but do not commit; the transaction boundary
  is owned by the ``get_db`` / ``get_readonly_db`` dependencies.
"""
import logging
import math

from sqlalchemy.ext.asyncio import AsyncSession

from instafeed import repositories
from instafeed.exceptions import DataAlreadyDeletedError, DataNotFoundError
from instafeed.models import Newsfeed, Visibility
from instafeed.schemas import (
    CreateNewsfeedResponse,
    NewsfeedPage,
    ReadNewsfeedResponse,
    UpdateNewsfeedResponse,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def _newsfeed_to_dict(newsfeed: Newsfeed) -> dict:
    return {
        "id": newsfeed.id,
        "profile_id": newsfeed.profile_id,
        "nickname": newsfeed.profile.nickname,
        "content": newsfeed.content,
        "image_path": newsfeed.image_path,
        "is_deleted": newsfeed.is_deleted,
    }


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def create_newsfeed(
    db: AsyncSession,
    profile_id: int,
    content: str,
    image_path: str | None = None,
) -> CreateNewsfeedResponse:
    """
    Publish a new post for the active profile *profile_id*.

    Raises DataNotFoundError, persisting nothing, when the profile is
    missing or soft-deleted.
    """
    profile = await repositories.find_profile(db, profile_id)
    if profile is None:
        raise DataNotFoundError()

    newsfeed = await repositories.save(db, Newsfeed.create(profile, content, image_path))
    logger.info("Newsfeed %d created by profile %d", newsfeed.id, profile.id)
    return CreateNewsfeedResponse(**_newsfeed_to_dict(newsfeed))


async def read_all_newsfeeds(
    db: AsyncSession, page: int = 1, page_size: int = 10
) -> NewsfeedPage:
    """Return one page of active posts, most recently updated first."""
    newsfeeds, total = await repositories.find_newsfeeds_page(
        db, offset=(page - 1) * page_size, limit=page_size
    )
    return NewsfeedPage(
        items=[ReadNewsfeedResponse(**_newsfeed_to_dict(n)) for n in newsfeeds],
        total=total,
        page=page,
        page_size=page_size,
        pages=math.ceil(total / page_size) if total > 0 else 0,
    )


async def read_newsfeed(db: AsyncSession, newsfeed_id: int) -> ReadNewsfeedResponse:
    newsfeed = await repositories.find_newsfeed(db, newsfeed_id)
    if newsfeed is None:
        raise DataNotFoundError()
    return ReadNewsfeedResponse(**_newsfeed_to_dict(newsfeed))


async def update_newsfeed(
    db: AsyncSession, newsfeed_id: int, content: str
) -> UpdateNewsfeedResponse:
    """Replace the body of an active post.  The image path never changes."""
    newsfeed = await repositories.find_newsfeed(db, newsfeed_id)
    if newsfeed is None:
        raise DataNotFoundError()

    newsfeed.update(content)
    await db.flush()
    logger.info("Newsfeed %d updated", newsfeed.id)
    return UpdateNewsfeedResponse(**_newsfeed_to_dict(newsfeed))


async def delete_newsfeed(db: AsyncSession, newsfeed_id: int) -> None:
    """
    Soft-delete the post.

    Raises DataNotFoundError when no row exists at all, and
    DataAlreadyDeletedError when the post was deleted before; deleting
    is deliberately not idempotent.
    """
    newsfeed = await repositories.find_newsfeed(db, newsfeed_id, Visibility.ANY)
    if newsfeed is None:
        raise DataNotFoundError()
    if newsfeed.state is Visibility.DELETED:
        raise DataAlreadyDeletedError()

    newsfeed.mark_as_deleted()
    await db.flush()
    logger.info("Newsfeed %d deleted", newsfeed.id)

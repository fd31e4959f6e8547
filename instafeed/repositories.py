"""
Persistence boundary shared by the service modules.

Soft-deletable rows are always looked up through a single function per
entity that takes an explicit ``Visibility``.  Which operations see
deleted rows is therefore a choice made at the call site (``delete_*``
passes ``Visibility.ANY``, everything else the default ``ACTIVE``)
instead of a family of near-duplicate queries.
"""
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from instafeed.models import Follower, FollowStatus, Newsfeed, Profile, User, Visibility


def _filter_visibility(stmt, model, visibility: Visibility):
    if visibility is Visibility.ACTIVE:
        return stmt.where(model.is_deleted.is_(False))
    if visibility is Visibility.DELETED:
        return stmt.where(model.is_deleted.is_(True))
    return stmt


async def save(db: AsyncSession, entity):
    """Stage *entity* and flush so generated columns (id, timestamps) are populated."""
    db.add(entity)
    await db.flush()
    return entity


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------

async def find_user(db: AsyncSession, user_id: int) -> User | None:
    return await db.get(User, user_id)


async def find_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

async def find_profile(
    db: AsyncSession, profile_id: int, visibility: Visibility = Visibility.ACTIVE
) -> Profile | None:
    stmt = _filter_visibility(select(Profile).where(Profile.id == profile_id), Profile, visibility)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


# ---------------------------------------------------------------------------
# Newsfeed
# ---------------------------------------------------------------------------

async def find_newsfeed(
    db: AsyncSession, newsfeed_id: int, visibility: Visibility = Visibility.ACTIVE
) -> Newsfeed | None:
    stmt = (
        select(Newsfeed)
        .where(Newsfeed.id == newsfeed_id)
        .options(joinedload(Newsfeed.profile))
        # A Newsfeed already in the identity map may carry a noload placeholder
        # for profile; refresh it so the joined row wins.
        .execution_options(populate_existing=True)
    )
    result = await db.execute(_filter_visibility(stmt, Newsfeed, visibility))
    return result.unique().scalar_one_or_none()


async def find_newsfeeds_page(
    db: AsyncSession,
    offset: int,
    limit: int,
    visibility: Visibility = Visibility.ACTIVE,
) -> tuple[list[Newsfeed], int]:
    """
    Return one page of newsfeeds plus the total row count.

    Ordered by ``updated_at`` descending; equal timestamps fall back to
    ``id`` descending so paging is stable.  An offset past the last row
    yields an empty page without issuing the row query.
    """
    count_q = _filter_visibility(select(func.count()).select_from(Newsfeed), Newsfeed, visibility)
    total: int = (await db.execute(count_q)).scalar_one()
    if offset >= total:
        return [], total

    rows_q = _filter_visibility(
        select(Newsfeed)
        .options(joinedload(Newsfeed.profile))
        .execution_options(populate_existing=True),
        Newsfeed,
        visibility,
    )
    rows_q = (
        rows_q.order_by(Newsfeed.updated_at.desc(), Newsfeed.id.desc())
        .offset(offset)
        .limit(limit)
    )
    result = await db.execute(rows_q)
    return list(result.unique().scalars().all()), total


# ---------------------------------------------------------------------------
# Follower
# ---------------------------------------------------------------------------

async def find_follower(db: AsyncSession, follower_id: int) -> Follower | None:
    return await db.get(Follower, follower_id)


async def find_open_follow_request(
    db: AsyncSession, sender_profile_id: int, receiver_profile_id: int
) -> Follower | None:
    """Return the PENDING or ACCEPTED request from sender to receiver, if any."""
    result = await db.execute(
        select(Follower)
        .where(
            Follower.sender_profile_id == sender_profile_id,
            Follower.receiver_profile_id == receiver_profile_id,
            Follower.status.in_([FollowStatus.PENDING, FollowStatus.ACCEPTED]),
        )
        .limit(1)
    )
    return result.scalar_one_or_none()


async def find_all_followers(db: AsyncSession) -> list[Follower]:
    result = await db.execute(select(Follower).order_by(Follower.id.desc()))
    return list(result.scalars().all())

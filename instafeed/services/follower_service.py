"""
Follower service: directed follow requests between profiles.

A request goes sender -> receiver and starts PENDING.  Policy, checked in
this order:

- both profiles must exist and be active (404);
- a profile cannot follow itself (400);
- while a PENDING or ACCEPTED request exists in the same direction, a
  new one is refused (409); after a REJECTED answer the sender may ask
  again;
- the reverse direction is a separate relationship.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from instafeed import repositories
from instafeed.exceptions import DataNotFoundError, InvalidFollowRequestError
from instafeed.models import Follower, FollowStatus
from instafeed.schemas import FollowerResponse, UpdateFollowerResponse

logger = logging.getLogger(__name__)


async def send_follow_request(
    db: AsyncSession, sender_id: int, receiver_id: int
) -> FollowerResponse:
    sender = await repositories.find_profile(db, sender_id)
    receiver = await repositories.find_profile(db, receiver_id)
    if sender is None or receiver is None:
        raise DataNotFoundError()
    if sender.id == receiver.id:
        raise InvalidFollowRequestError("A profile cannot follow itself")

    if await repositories.find_open_follow_request(db, sender.id, receiver.id) is not None:
        raise InvalidFollowRequestError(
            "A follow request between these profiles already exists", status_code=409
        )

    follower = await repositories.save(
        db,
        Follower(
            sender_profile_id=sender.id,
            receiver_profile_id=receiver.id,
            status=FollowStatus.PENDING,
        ),
    )
    logger.info("Follow request %d: profile %d -> %d", follower.id, sender.id, receiver.id)
    return FollowerResponse.model_validate(follower)


async def read_all_followers(db: AsyncSession) -> list[FollowerResponse]:
    return [FollowerResponse.model_validate(f) for f in await repositories.find_all_followers(db)]


async def update_following_status(
    db: AsyncSession, follower_id: int, request_sender_id: int, status: FollowStatus
) -> UpdateFollowerResponse:
    """
    Answer follow request *follower_id*.

    *request_sender_id* must name the profile that sent the request; the
    transition itself is validated by ``Follower.change_status``.
    """
    follower = await repositories.find_follower(db, follower_id)
    if follower is None:
        raise DataNotFoundError()
    if follower.sender_profile_id != request_sender_id:
        raise InvalidFollowRequestError("Request sender does not match this follow request")

    follower.change_status(status)
    await db.flush()
    logger.info("Follow request %d is now %s", follower.id, follower.status.value)
    return UpdateFollowerResponse.model_validate(follower)

"""
User service: account creation and password changes.

Email uniqueness is checked up front so the common case answers a clean
409; the unique constraint on ``users.email`` still backs it up, and the
router translates an ``IntegrityError`` from a racing insert the same way.
"""
import logging
import re

from sqlalchemy.ext.asyncio import AsyncSession

from instafeed import repositories
from instafeed.exceptions import (
    DataConflictError,
    DataNotFoundError,
    InvalidEmailError,
    InvalidPasswordError,
)
from instafeed.models import User
from instafeed.schemas import UserCreate, UserPasswordUpdate, UserResponse
from instafeed.security import hash_password, verify_password

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def validate_email(email: str) -> str:
    """Return *email* normalised to lowercase, or raise InvalidEmailError."""
    email = email.strip()
    if not _EMAIL_RE.match(email):
        raise InvalidEmailError(f"Invalid email format: {email!r}")
    return email.lower()


async def create_user(db: AsyncSession, data: UserCreate) -> UserResponse:
    email = validate_email(data.email)
    if await repositories.find_user_by_email(db, email) is not None:
        raise DataConflictError("A user with this email already exists")

    user = await repositories.save(
        db,
        User(name=data.name, email=email, password=hash_password(data.password)),
    )
    logger.info("User %d created", user.id)
    return UserResponse.model_validate(user)


async def read_user(db: AsyncSession, user_id: int) -> UserResponse:
    user = await repositories.find_user(db, user_id)
    if user is None:
        raise DataNotFoundError()
    return UserResponse.model_validate(user)


async def update_password(
    db: AsyncSession, user_id: int, data: UserPasswordUpdate
) -> UserResponse:
    user = await repositories.find_user(db, user_id)
    if user is None:
        raise DataNotFoundError()
    if not verify_password(data.old_password, user.password):
        raise InvalidPasswordError()

    user.update(hash_password(data.new_password))
    await db.flush()
    logger.info("User %d changed password", user.id)
    return UserResponse.model_validate(user)

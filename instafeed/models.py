from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from instafeed.database import Base
from instafeed.exceptions import (
    DataAlreadyDeletedError,
    DataNotFoundError,
    InvalidFollowRequestError,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Visibility(str, enum.Enum):
    """Which soft-delete states a lookup is allowed to return."""

    ACTIVE = "ACTIVE"
    DELETED = "DELETED"
    ANY = "ANY"


class FollowStatus(str, enum.Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


# ---------------------------------------------------------------------------
# Shared columns
# ---------------------------------------------------------------------------
class TimestampMixin:
    # Assigned in Python so ordering by updated_at does not depend on the
    # backend's clock resolution.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )


class SoftDeleteMixin:
    """
    Two-state lifecycle: ACTIVE -> DELETED, with no way back.

    Mutating methods check the current state themselves, so a caller that
    skips the service layer still cannot edit or re-delete a dead row.
    """

    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    @property
    def state(self) -> Visibility:
        return Visibility.DELETED if self.is_deleted else Visibility.ACTIVE

    def _ensure_active(self) -> None:
        if self.is_deleted:
            raise DataNotFoundError()

    def mark_as_deleted(self) -> None:
        if self.is_deleted:
            raise DataAlreadyDeletedError()
        self.is_deleted = True
        self.updated_at = _utcnow()


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------
class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(16), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def update(self, password: str) -> None:
        """Replace the stored (already hashed) password."""
        self.password = password
        self.updated_at = _utcnow()


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------
class Profile(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nickname: Mapped[str] = mapped_column(String(32), nullable=False)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_path: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # lazy="noload": services load relationships explicitly
    user: Mapped["User"] = relationship("User", lazy="noload")

    def update(
        self,
        nickname: str | None = None,
        content: str | None = None,
        image_path: str | None = None,
    ) -> None:
        self._ensure_active()
        if nickname is not None:
            self.nickname = nickname
        if content is not None:
            self.content = content
        if image_path is not None:
            self.image_path = image_path
        self.updated_at = _utcnow()


# ---------------------------------------------------------------------------
# Newsfeed
# ---------------------------------------------------------------------------
class Newsfeed(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "newsfeeds"

    __table_args__ = (
        # Main feed: active posts, most recently updated first
        Index("ix_newsfeeds_is_deleted_updated_at", "is_deleted", "updated_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    image_path: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    profile_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )

    profile: Mapped["Profile"] = relationship("Profile", lazy="noload")

    @classmethod
    def create(cls, profile: Profile, content: str, image_path: str | None = None) -> "Newsfeed":
        return cls(profile=profile, content=content, image_path=image_path, is_deleted=False)

    def update(self, content: str) -> None:
        """Edit the post body.  The image is fixed once the post exists."""
        self._ensure_active()
        self.content = content
        self.updated_at = _utcnow()


# ---------------------------------------------------------------------------
# Follower
# ---------------------------------------------------------------------------
class Follower(TimestampMixin, Base):
    __tablename__ = "followers"

    __table_args__ = (
        Index("ix_followers_sender_receiver", "sender_profile_id", "receiver_profile_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    status: Mapped[FollowStatus] = mapped_column(
        Enum(FollowStatus, name="follow_status"), default=FollowStatus.PENDING, nullable=False
    )

    sender_profile_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    receiver_profile_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )

    sender_profile: Mapped["Profile"] = relationship(
        "Profile", foreign_keys=[sender_profile_id], lazy="noload"
    )
    receiver_profile: Mapped["Profile"] = relationship(
        "Profile", foreign_keys=[receiver_profile_id], lazy="noload"
    )

    def change_status(self, status: FollowStatus) -> None:
        """A request is answered exactly once: PENDING -> ACCEPTED | REJECTED."""
        if self.status != FollowStatus.PENDING:
            raise InvalidFollowRequestError(
                f"Follow request is already {self.status.value}", status_code=409
            )
        if status == FollowStatus.PENDING:
            raise InvalidFollowRequestError("Cannot move a follow request back to PENDING")
        self.status = status
        self.updated_at = _utcnow()

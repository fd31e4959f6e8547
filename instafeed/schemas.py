from pydantic import BaseModel, ConfigDict, Field

from instafeed.models import FollowStatus


# --- User ---

class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=16)
    email: str = Field(max_length=255)
    password: str = Field(min_length=8, max_length=255)


class UserPasswordUpdate(BaseModel):
    old_password: str
    new_password: str = Field(min_length=8, max_length=255)


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    model_config = ConfigDict(from_attributes=True)


# --- Profile ---

class ProfileCreate(BaseModel):
    user_id: int
    nickname: str = Field(min_length=1, max_length=32)
    content: str | None = None
    image_path: str | None = Field(None, max_length=255)


class ProfileUpdate(BaseModel):
    nickname: str | None = Field(None, min_length=1, max_length=32)
    content: str | None = None
    image_path: str | None = Field(None, max_length=255)


class CreateProfileResponse(BaseModel):
    id: int
    user_id: int
    nickname: str
    image_path: str | None
    content: str | None
    model_config = ConfigDict(from_attributes=True)


class ReadProfileResponse(BaseModel):
    id: int
    nickname: str
    content: str | None
    image_path: str | None
    model_config = ConfigDict(from_attributes=True)


class UpdateProfileResponse(ReadProfileResponse):
    pass


# --- Newsfeed ---

class NewsfeedCreate(BaseModel):
    profile_id: int
    content: str = Field(min_length=1)
    image_path: str | None = Field(None, max_length=255)


class NewsfeedUpdate(BaseModel):
    # Only the body is editable; the image is fixed at creation.
    content: str = Field(min_length=1)


class NewsfeedResponse(BaseModel):
    id: int
    profile_id: int
    nickname: str
    content: str
    image_path: str | None
    is_deleted: bool


class CreateNewsfeedResponse(NewsfeedResponse):
    pass


class ReadNewsfeedResponse(NewsfeedResponse):
    pass


class UpdateNewsfeedResponse(NewsfeedResponse):
    pass


# --- Follower ---

class FollowRequestCreate(BaseModel):
    sender_profile_id: int
    receiver_profile_id: int


class FollowStatusUpdate(BaseModel):
    request_sender_id: int
    status: FollowStatus


class FollowerResponse(BaseModel):
    id: int
    sender_profile_id: int
    receiver_profile_id: int
    status: FollowStatus
    model_config = ConfigDict(from_attributes=True)


class UpdateFollowerResponse(FollowerResponse):
    pass


# --- Pagination ---

class NewsfeedPage(BaseModel):
    items: list[ReadNewsfeedResponse]
    total: int
    page: int
    page_size: int
    pages: int


# --- Errors ---

class ErrorResponse(BaseModel):
    status: int
    message: str

"""
Data transfer objects

Pydantic models for API requests and responses. Field names follow the
JSON wire format (camelCase).
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, ValidationError, field_validator

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validate only; the submitted spelling is kept
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Must be a valid URL")
    return value


class Launch(BaseModel):
    """A published launch"""
    id: str
    title: str = Field(..., min_length=1)
    url: str
    description: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)
    submittedAt: datetime
    tweetUrl: Optional[str] = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        return _check_url(value)

    @field_validator("submittedAt")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class LaunchSubmission(BaseModel):
    """Body of POST /api/launches"""
    tweetUrl: Optional[str] = None
    title: str = Field(..., min_length=1)
    url: str
    description: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)

    @field_validator("tweetUrl", mode="before")
    @classmethod
    def blank_tweet_url(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @field_validator("tweetUrl")
    @classmethod
    def validate_tweet_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _check_url(value)

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        return _check_url(value)


class LaunchListResponse(BaseModel):
    """Body of GET /api/launches"""
    launches: List[Launch]
    total: int


class ErrorResponse(BaseModel):
    """Error body"""
    error: str
    details: Optional[Any] = None

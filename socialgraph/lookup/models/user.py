"""User record data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """Metadata for one social-graph account.

    Records are keyed by ``id``; a cache entry is only valid when the key it
    is stored under equals this field.
    """

    id: int = Field(..., ge=0)
    name: str
    screen_name: str = Field(..., min_length=1)
    followers_count: int = Field(default=0, ge=0)
    friends_count: int = Field(default=0, ge=0)
    statuses_count: int = Field(default=0, ge=0)
    favourites_count: int = Field(default=0, ge=0)
    listed_count: int = Field(default=0, ge=0)
    description: str | None = None
    location: str | None = None
    protected: bool = False
    verified: bool = False
    created_at: datetime | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def profile_url(self) -> str:
        """Public profile URL for the account."""
        return f"https://twitter.com/{self.screen_name}"

"""
Blog post Pydantic models
"""

from typing import Optional
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Naive timestamps are taken to be UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: str = Field(..., alias="firstName", min_length=1)
    last_name: str = Field(..., alias="lastName", min_length=1)

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class BlogPostCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    author: Author
    created: Optional[datetime] = None

    @field_validator('created')
    @classmethod
    def created_is_aware(cls, v):
        return _as_utc(v)


class BlogPostUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    id: Optional[str] = None
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    author: Optional[Author] = None

    def has_changes(self) -> bool:
        return any(value is not None for value in (self.title, self.content, self.author))


class BlogPost(BaseModel):
    """A stored blog post"""
    id: str
    author: Author
    title: str
    content: str
    created: datetime

    @property
    def author_name(self) -> str:
        return self.author.display_name


class BlogPostResponse(BaseModel):
    id: str
    title: str
    content: str
    author: str
    created: datetime

    @classmethod
    def from_post(cls, post: BlogPost) -> "BlogPostResponse":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author=post.author_name,
            created=post.created
        )

"""News Pydantic schemas (request DTOs and response models)."""


from datetime import date, datetime

from pydantic import Field, field_validator

from audit_dashboard.schemas.common import ApiModel

class NewsCreate(ApiModel):
    title: str = Field(min_length=1, max_length=200)
    summary: str = Field(min_length=1, max_length=1000)
    content: str | None = None
    news_date: date

    model_config = {"str_strip_whitespace": True}

class NewsUpdate(ApiModel):
    """Partial update — only fields present in the payload are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    summary: str | None = Field(default=None, min_length=1, max_length=1000)
    content: str | None = None
    news_date: date | None = None

    model_config = {"str_strip_whitespace": True}

    @field_validator("title", "summary", "news_date")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

class NewsOut(ApiModel):
    id: int
    title: str
    summary: str
    content: str | None = None
    news_date: date
    created_by: int | None = None
    created_at: datetime
    updated_at: datetime

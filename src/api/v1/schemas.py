from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Int64 = Annotated[int, Field(ge=-(2 ** 63), le=2 ** 63 - 1)]


class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., alias="Username", min_length=1, max_length=20)
    # Accepted but never checked against a stored credential.
    password: str = Field(..., alias="Password", min_length=1, max_length=20)

    @field_validator("username", "password")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class LoginResponse(BaseModel):
    token: str


class EditNewsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="Id", ge=1, le=2 ** 63 - 1, description="Must match the id in the path")
    title: Optional[str] = Field(None, alias="Title", max_length=100, description="Blank keeps the current title")
    content: Optional[str] = Field(None, alias="Content", description="Blank keeps the current content")
    categories: Optional[List[Int64]] = Field(
        None,
        alias="Categories",
        description="Replaces every category of the news when non-empty"
    )


class EditNewsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(True, alias="Success")


class NewsItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int = Field(..., alias="Id")
    title: str = Field(..., alias="Title")
    content: str = Field(..., alias="Content")
    categories: List[int] = Field(default_factory=list, alias="Categories")


class NewsListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(True, alias="Success")
    news: List[NewsItem] = Field(default_factory=list, alias="News")


class ErrorResponse(BaseModel):
    error: str

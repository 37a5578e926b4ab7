"""Request/response schemas for the project endpoints (editor wire names)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProjectCreate(BaseModel):
    """
    Client payload for creating a project. The owner is taken from the token;
    any userId sent by the client is ignored.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    html_code: str | None = Field(default=None, alias="htmlCode")
    css_code: str | None = Field(default=None, alias="cssCode")
    js_code: str | None = Field(default=None, alias="jsCode")


class ProjectUpdate(BaseModel):
    """Code fields to save. A missing field is stored as an empty string."""

    model_config = ConfigDict(populate_by_name=True)

    html_code: str | None = Field(default=None, alias="htmlCode")
    css_code: str | None = Field(default=None, alias="cssCode")
    js_code: str | None = Field(default=None, alias="jsCode")


class ProjectResponse(BaseModel):
    id: str = Field(..., serialization_alias="_id")
    name: str
    user_id: str = Field(..., serialization_alias="userId")
    html_code: str = Field(default="", serialization_alias="htmlCode")
    css_code: str = Field(default="", serialization_alias="cssCode")
    js_code: str = Field(default="", serialization_alias="jsCode")
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(default=None, serialization_alias="updatedAt")

    model_config = ConfigDict(from_attributes=True)

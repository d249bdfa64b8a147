from pydantic import BaseModel, Field, HttpUrl
from typing import List
from uuid import UUID


class LinkCreate(BaseModel):
    title: str = Field(min_length=3)
    url: HttpUrl


class LinkCreatedResponse(BaseModel):
    link_id: UUID
    message: str


class LinkOut(BaseModel):
    id: UUID
    title: str
    url: str

    model_config = {"from_attributes": True}


class LinksResponse(BaseModel):
    links: List[LinkOut]

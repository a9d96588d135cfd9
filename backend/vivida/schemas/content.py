"""Schemas for the ordered content lists managed in the admin console."""
from datetime import datetime
from typing import List, Optional
from pydantic import Field, field_validator
from vivida.schemas.common import CamelModel, DisplayOrder, reject_null


# Team members

class TeamMemberCreate(CamelModel):
    name: str
    title: str
    bio: str
    image_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    order: DisplayOrder = 0


class TeamMemberUpdate(CamelModel):
    name: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None
    image_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    order: Optional[DisplayOrder] = None

    @field_validator("name", "title", "bio", "order")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class TeamMemberResponse(TeamMemberCreate):
    id: str
    created_at: datetime
    updated_at: datetime


# Services

class ServiceCreate(CamelModel):
    title: str
    description: str
    icon_svg_path: str
    order: DisplayOrder = 0


class ServiceUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    icon_svg_path: Optional[str] = None
    order: Optional[DisplayOrder] = None

    @field_validator("title", "description", "icon_svg_path", "order")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class ServiceResponse(ServiceCreate):
    id: str
    created_at: datetime
    updated_at: datetime


# Journey milestones

class JourneyMilestoneCreate(CamelModel):
    year: str
    title: str
    caption: str
    content: str = Field(..., description="HTML body of the milestone post")
    icon_svg_path: str
    order: DisplayOrder = 0


class JourneyMilestoneUpdate(CamelModel):
    year: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    content: Optional[str] = None
    icon_svg_path: Optional[str] = None
    order: Optional[DisplayOrder] = None

    @field_validator("year", "title", "caption", "content", "icon_svg_path", "order")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class JourneyMilestoneResponse(JourneyMilestoneCreate):
    id: str
    created_at: datetime
    updated_at: datetime


# Portfolio projects

class PortfolioProjectCreate(CamelModel):
    title: str
    description: str
    image_url: str
    tags: List[str] = Field(default_factory=list)
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    order: DisplayOrder = 0


class PortfolioProjectUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    tags: Optional[List[str]] = None
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    order: Optional[DisplayOrder] = None

    @field_validator("title", "description", "image_url", "tags", "order")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class PortfolioProjectResponse(PortfolioProjectCreate):
    id: str
    created_at: datetime
    updated_at: datetime

"""Schemas for the singleton site settings and the public content bundle."""
from datetime import datetime
from typing import List, Optional
from pydantic import field_validator
from vivida.constants import ButtonStyle
from vivida.schemas.common import CamelModel, reject_null
from vivida.schemas.content import (
    TeamMemberResponse,
    ServiceResponse,
    JourneyMilestoneResponse,
    PortfolioProjectResponse,
)


class SiteThemeUpdate(CamelModel):
    """Partial theme update; omitted fields keep their current value."""
    primary_color: Optional[str] = None
    button_style: Optional[ButtonStyle] = None
    font_headline: Optional[str] = None
    font_body: Optional[str] = None

    @field_validator("primary_color", "button_style", "font_headline", "font_body")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class SiteThemeResponse(CamelModel):
    id: int
    primary_color: str
    button_style: ButtonStyle
    font_headline: str
    font_body: str
    updated_at: datetime


class ContactInfoUpdate(CamelModel):
    """Partial contact info update."""
    email: Optional[str] = None
    phone: Optional[str] = None
    office_location: Optional[str] = None

    @field_validator("email", "phone", "office_location")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class ContactInfoResponse(CamelModel):
    id: int
    email: str
    phone: str
    office_location: str
    updated_at: datetime


class PublicContentResponse(CamelModel):
    """Everything the public pages render, fetched in one request."""
    theme: SiteThemeResponse
    team_members: List[TeamMemberResponse]
    services: List[ServiceResponse]
    journey_milestones: List[JourneyMilestoneResponse]
    portfolio_projects: List[PortfolioProjectResponse]
    contact_info: ContactInfoResponse

"""Pydantic schemas for request/response validation."""
from vivida.schemas.auth import LoginRequest, FirebaseLoginRequest, AuthUser, AuthResponse
from vivida.schemas.contact import ContactSubmissionCreate, ContactSubmitResponse, ContactSubmissionResponse
from vivida.schemas.content import (
    TeamMemberCreate,
    TeamMemberUpdate,
    TeamMemberResponse,
    ServiceCreate,
    ServiceUpdate,
    ServiceResponse,
    JourneyMilestoneCreate,
    JourneyMilestoneUpdate,
    JourneyMilestoneResponse,
    PortfolioProjectCreate,
    PortfolioProjectUpdate,
    PortfolioProjectResponse,
)
from vivida.schemas.site import (
    SiteThemeUpdate,
    SiteThemeResponse,
    ContactInfoUpdate,
    ContactInfoResponse,
    PublicContentResponse,
)

__all__ = [
    "LoginRequest",
    "FirebaseLoginRequest",
    "AuthUser",
    "AuthResponse",
    "ContactSubmissionCreate",
    "ContactSubmitResponse",
    "ContactSubmissionResponse",
    "TeamMemberCreate",
    "TeamMemberUpdate",
    "TeamMemberResponse",
    "ServiceCreate",
    "ServiceUpdate",
    "ServiceResponse",
    "JourneyMilestoneCreate",
    "JourneyMilestoneUpdate",
    "JourneyMilestoneResponse",
    "PortfolioProjectCreate",
    "PortfolioProjectUpdate",
    "PortfolioProjectResponse",
    "SiteThemeUpdate",
    "SiteThemeResponse",
    "ContactInfoUpdate",
    "ContactInfoResponse",
    "PublicContentResponse",
]

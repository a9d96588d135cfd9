"""Models package."""
from vivida.models.user import User
from vivida.models.site_theme import SiteTheme
from vivida.models.contact_info import ContactInfo
from vivida.models.team_member import TeamMember
from vivida.models.service import Service
from vivida.models.journey_milestone import JourneyMilestone
from vivida.models.portfolio_project import PortfolioProject
from vivida.models.contact_submission import ContactSubmission

__all__ = [
    "User",
    "SiteTheme",
    "ContactInfo",
    "TeamMember",
    "Service",
    "JourneyMilestone",
    "PortfolioProject",
    "ContactSubmission",
]

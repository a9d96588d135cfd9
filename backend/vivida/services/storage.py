"""Data access for site content, accounts and contact submissions."""
from typing import Any, Dict, List, Optional, Type, TypeVar

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vivida.constants import DEFAULT_CONTACT_INFO, DEFAULT_THEME, SINGLETON_ID
from vivida.database import get_db
from vivida.models import (
    User,
    SiteTheme,
    ContactInfo,
    TeamMember,
    Service,
    JourneyMilestone,
    PortfolioProject,
    ContactSubmission,
)
from vivida.utils.db import get_by_field, get_by_id, list_ordered
from vivida.utils.logger import logger
from vivida.utils.timestamps import utc_now

T = TypeVar("T")


class Storage:
    """
    Every read and write the API performs, bound to one database session.

    Lookups by id return None when the row does not exist; updates and
    deletes report absence the same way (None / False) instead of raising.
    Each write commits on its own and rolls the session back on failure.
    """

    def __init__(self, db: Session):
        self.db = db

    # Generic helpers

    def _commit(self, instance: Optional[Any] = None) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        if instance is not None:
            self.db.refresh(instance)

    def _create(self, model: Type[T], fields: Dict[str, Any]) -> T:
        instance = model(**fields)
        self.db.add(instance)
        self._commit(instance)
        return instance

    def _update(self, model: Type[T], id_value: Any, fields: Dict[str, Any]) -> Optional[T]:
        instance = get_by_id(self.db, model, id_value)
        if not instance:
            return None
        self._apply(instance, fields)
        return instance

    def _apply(self, instance: Any, fields: Dict[str, Any]) -> None:
        for name, value in fields.items():
            setattr(instance, name, value)
        instance.updated_at = utc_now()
        self._commit(instance)

    def _delete(self, model: Type[T], id_value: Any) -> bool:
        instance = get_by_id(self.db, model, id_value)
        if not instance:
            return False
        self.db.delete(instance)
        self._commit()
        return True

    def _get_or_create_singleton(self, model: Type[T], defaults: Dict[str, Any]) -> T:
        instance = get_by_id(self.db, model, SINGLETON_ID)
        if instance:
            return instance

        instance = model(id=SINGLETON_ID, **defaults)
        self.db.add(instance)
        try:
            self.db.commit()
        except IntegrityError:
            # Another request created the row first
            self.db.rollback()
            logger.debug(f"{model.__tablename__} row created concurrently, re-reading")
            return get_by_id(self.db, model, SINGLETON_ID)
        self.db.refresh(instance)
        logger.info(f"Created default {model.__tablename__} row")
        return instance

    # Users

    def get_user(self, user_id: str) -> Optional[User]:
        return get_by_id(self.db, User, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return get_by_field(self.db, User, "email", email)

    def get_user_by_firebase_uid(self, firebase_uid: str) -> Optional[User]:
        return get_by_field(self.db, User, "firebase_uid", firebase_uid)

    def create_user(
        self,
        email: str,
        password_hash: Optional[str] = None,
        firebase_uid: Optional[str] = None,
    ) -> User:
        return self._create(
            User,
            {"email": email, "password_hash": password_hash, "firebase_uid": firebase_uid},
        )

    def link_firebase_uid(self, user: User, firebase_uid: str) -> User:
        """Bind an external identity to an existing account."""
        self._apply(user, {"firebase_uid": firebase_uid})
        return user

    def delete_user(self, user_id: str) -> bool:
        """Remove an account; its outstanding tokens stop authenticating."""
        return self._delete(User, user_id)

    # Public content

    def get_public_content(self) -> Dict[str, Any]:
        """Everything the public pages render, keyed like the response schema."""
        return {
            "theme": self.get_site_theme(),
            "team_members": self.get_team_members(),
            "services": self.get_services(),
            "journey_milestones": self.get_journey_milestones(),
            "portfolio_projects": self.get_portfolio_projects(),
            "contact_info": self.get_contact_info(),
        }

    # Site theme

    def get_site_theme(self) -> SiteTheme:
        return self._get_or_create_singleton(SiteTheme, dict(DEFAULT_THEME))

    def update_site_theme(self, fields: Dict[str, Any]) -> SiteTheme:
        theme = self.get_site_theme()
        self._apply(theme, fields)
        return theme

    # Contact info

    def get_contact_info(self) -> ContactInfo:
        return self._get_or_create_singleton(ContactInfo, dict(DEFAULT_CONTACT_INFO))

    def update_contact_info(self, fields: Dict[str, Any]) -> ContactInfo:
        info = self.get_contact_info()
        self._apply(info, fields)
        return info

    # Team members

    def get_team_members(self) -> List[TeamMember]:
        return list_ordered(self.db, TeamMember)

    def get_team_member(self, member_id: str) -> Optional[TeamMember]:
        return get_by_id(self.db, TeamMember, member_id)

    def create_team_member(self, fields: Dict[str, Any]) -> TeamMember:
        return self._create(TeamMember, fields)

    def update_team_member(self, member_id: str, fields: Dict[str, Any]) -> Optional[TeamMember]:
        return self._update(TeamMember, member_id, fields)

    def delete_team_member(self, member_id: str) -> bool:
        return self._delete(TeamMember, member_id)

    # Services

    def get_services(self) -> List[Service]:
        return list_ordered(self.db, Service)

    def get_service(self, service_id: str) -> Optional[Service]:
        return get_by_id(self.db, Service, service_id)

    def count_services(self) -> int:
        return self.db.query(Service).count()

    def create_service(self, fields: Dict[str, Any]) -> Service:
        return self._create(Service, fields)

    def update_service(self, service_id: str, fields: Dict[str, Any]) -> Optional[Service]:
        return self._update(Service, service_id, fields)

    def delete_service(self, service_id: str) -> bool:
        return self._delete(Service, service_id)

    # Journey milestones

    def get_journey_milestones(self) -> List[JourneyMilestone]:
        return list_ordered(self.db, JourneyMilestone)

    def get_journey_milestone(self, milestone_id: str) -> Optional[JourneyMilestone]:
        return get_by_id(self.db, JourneyMilestone, milestone_id)

    def create_journey_milestone(self, fields: Dict[str, Any]) -> JourneyMilestone:
        return self._create(JourneyMilestone, fields)

    def update_journey_milestone(self, milestone_id: str, fields: Dict[str, Any]) -> Optional[JourneyMilestone]:
        return self._update(JourneyMilestone, milestone_id, fields)

    def delete_journey_milestone(self, milestone_id: str) -> bool:
        return self._delete(JourneyMilestone, milestone_id)

    # Portfolio projects

    def get_portfolio_projects(self) -> List[PortfolioProject]:
        return list_ordered(self.db, PortfolioProject)

    def get_portfolio_project(self, project_id: str) -> Optional[PortfolioProject]:
        return get_by_id(self.db, PortfolioProject, project_id)

    def create_portfolio_project(self, fields: Dict[str, Any]) -> PortfolioProject:
        return self._create(PortfolioProject, fields)

    def update_portfolio_project(self, project_id: str, fields: Dict[str, Any]) -> Optional[PortfolioProject]:
        return self._update(PortfolioProject, project_id, fields)

    def delete_portfolio_project(self, project_id: str) -> bool:
        return self._delete(PortfolioProject, project_id)

    # Contact submissions

    def get_contact_submissions(self) -> List[ContactSubmission]:
        return list_ordered(self.db, ContactSubmission, order_field="created_at")

    def create_contact_submission(self, fields: Dict[str, Any]) -> ContactSubmission:
        return self._create(ContactSubmission, {**fields, "is_read": False})

    def mark_contact_submission_as_read(self, submission_id: str) -> bool:
        return self._update(ContactSubmission, submission_id, {"is_read": True}) is not None


def get_storage(db: Session = Depends(get_db)) -> Storage:
    """Dependency for getting a request-scoped Storage."""
    return Storage(db)

import logging
from typing import Optional

from sqlalchemy.orm import Session

from hospital_roster.config.settings import settings
from hospital_roster.database.schema import Admin, utcnow
from hospital_roster.exceptions import AdminNotFoundError, IncorrectPasswordError

logger = logging.getLogger(__name__)


def admin_login(session: Session, username: str, password: str) -> Optional[Admin]:
    """Return the admin whose username and password hash both match, else None."""
    return session.query(Admin).filter_by(username=username, password=password).first()


def change_admin_password(session: Session, old_password: str, new_password: str,
                          username: Optional[str] = None) -> None:
    """Replace the admin password hash after checking the current one.

    Without ``username`` the account is the one named by
    ``settings.admin_username``; if the database was seeded under another
    name, the lowest-id admin is used instead.

    Raises:
        AdminNotFoundError: no matching admin (or no admin at all)
        IncorrectPasswordError: ``old_password`` does not match the stored hash
    """
    query = session.query(Admin)
    if username:
        admin = query.filter_by(username=username).first()
    else:
        admin = (
            query.filter_by(username=settings.admin_username).first()
            or query.order_by(Admin.id).first()
        )
    if admin is None:
        raise AdminNotFoundError(username or settings.admin_username)
    if admin.password != old_password:
        raise IncorrectPasswordError()

    admin.password = new_password
    admin.updated_at = utcnow()
    session.commit()
    logger.info(f"Password changed for admin '{admin.username}'")

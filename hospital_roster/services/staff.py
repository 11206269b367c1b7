from typing import List, Optional

from sqlalchemy.orm import Session

from hospital_roster.database.schema import Staff, utcnow


def list_staff(session: Session) -> List[Staff]:
    return session.query(Staff).order_by(Staff.id).all()


def create_staff(session: Session, *, name: str, department: str,
                 position: Optional[str] = None, status: Optional[str] = None) -> Staff:
    staff = Staff(
        name=name,
        department=department,
        position=position or "",
        status=status or "active",
    )
    session.add(staff)
    session.commit()
    session.refresh(staff)
    return staff


def update_staff(session: Session, staff_id: int, *, name: Optional[str], department: Optional[str],
                 position: Optional[str], status: Optional[str]) -> int:
    """Overwrite every field of a staff row; returns the number of rows changed.

    Values are written exactly as given, so callers must send the full record.
    """
    changes = (
        session.query(Staff)
        .filter(Staff.id == staff_id)
        .update(
            {
                Staff.name: name,
                Staff.department: department,
                Staff.position: position,
                Staff.status: status,
                Staff.updated_at: utcnow(),
            },
            synchronize_session=False,
        )
    )
    session.commit()
    return changes


def delete_staff(session: Session, staff_id: int) -> int:
    # duty rows pointing at this staff member are left in place
    changes = session.query(Staff).filter(Staff.id == staff_id).delete(synchronize_session=False)
    session.commit()
    return changes

import logging
from typing import Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hospital_roster.database.schema import Duty, Staff
from hospital_roster.exceptions import DuplicateDutyError

logger = logging.getLogger(__name__)


def get_duty_by_date(session: Session, date: str) -> List[Dict]:
    """Duty rows for ``date`` with the staff name and department attached.

    Ordered by department, then shift label (plain string order). Rows whose
    staff member was deleted come back with ``name``/``department`` set to None.
    """
    rows = (
        session.query(Duty, Staff.name, Staff.department)
        .outerjoin(Staff, Duty.staff_id == Staff.id)
        .filter(Duty.date == date)
        .order_by(Staff.department.asc(), Duty.shift.asc())
        .all()
    )
    return [
        {
            "id": duty.id,
            "staff_id": duty.staff_id,
            "date": duty.date,
            "shift": duty.shift,
            "created_at": duty.created_at,
            "updated_at": duty.updated_at,
            "name": name,
            "department": department,
        }
        for duty, name, department in rows
    ]


def create_duty(session: Session, *, staff_id: int, date: str, shift: str) -> Duty:
    """Put a staff member on a shift.

    Raises DuplicateDutyError if the same (staff_id, date, shift) is already
    booked. The unique constraint on the table catches concurrent inserts that
    slip past the lookup.
    """
    existing = (
        session.query(Duty.id)
        .filter_by(staff_id=staff_id, date=date, shift=shift)
        .first()
    )
    if existing:
        raise DuplicateDutyError(staff_id, date, shift)

    duty = Duty(staff_id=staff_id, date=date, shift=shift)
    session.add(duty)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        logger.warning(f"Duplicate duty rejected by constraint: staff={staff_id} date={date} shift={shift}")
        raise DuplicateDutyError(staff_id, date, shift)
    session.refresh(duty)
    return duty

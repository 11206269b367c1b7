from typing import Optional

from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.orm import Session

from hospital_roster.database.schema import HOSPITAL_INFO_ID, HospitalInfo, utcnow


def get_hospital_info(session: Session) -> Optional[HospitalInfo]:
    return session.get(HospitalInfo, HOSPITAL_INFO_ID)


def update_hospital_info(session: Session, *, name: str, introduction: Optional[str] = None,
                         address: Optional[str] = None, phone: Optional[str] = None,
                         emergency_phone: Optional[str] = None) -> int:
    """
    Insert or overwrite the hospital info record.

    Runs as one INSERT ... ON CONFLICT DO UPDATE on the fixed record id, so
    there is no window between the existence check and the write.

    Returns:
        Number of rows written (1)
    """
    now = utcnow()
    table = HospitalInfo.__table__

    stmt = insert(table).values(
        id=HOSPITAL_INFO_ID,
        name=name,
        introduction=introduction or "",
        address=address or "",
        phone=phone or "",
        emergencyPhone=emergency_phone or "",
        created_at=now,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=['id'],
        set_={
            'name': stmt.excluded.name,
            'introduction': stmt.excluded.introduction,
            'address': stmt.excluded.address,
            'phone': stmt.excluded.phone,
            'emergencyPhone': stmt.excluded.emergencyPhone,
            'updated_at': stmt.excluded.updated_at,
        }
    )

    result = session.execute(stmt)
    session.commit()
    return result.rowcount

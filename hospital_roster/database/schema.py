"""
Roster database schema
Tables: admin, hospital_info, staff, duty
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# hospital_info holds a single record addressed by this key
HOSPITAL_INFO_ID = 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Admin(Base):
    """Admin table - back-office accounts"""
    __tablename__ = 'admin'

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False)
    # hex digest, compared as-is on login
    password = Column(String(255), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Admin(id={self.id}, username={self.username})>"


class HospitalInfo(Base):
    """Hospital info table - the public profile shown to visitors"""
    __tablename__ = 'hospital_info'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    introduction = Column(Text)
    address = Column(String(512))
    phone = Column(String(50))
    emergency_phone = Column('emergencyPhone', String(50))

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<HospitalInfo(id={self.id}, name={self.name})>"


class Staff(Base):
    """Staff table - everyone who can be put on duty"""
    __tablename__ = 'staff'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    department = Column(String(255), nullable=False)
    position = Column(String(255))
    status = Column(String(50), default='active')

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Staff(id={self.id}, name={self.name}, department={self.department})>"


class Duty(Base):
    """Duty table - one staff member on one shift of one date"""
    __tablename__ = 'duty'
    __table_args__ = (
        UniqueConstraint('staff_id', 'date', 'shift', name='uq_duty_staff_date_shift'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    # SQLite leaves foreign keys unenforced, so deleting staff does not touch duty rows
    staff_id = Column(Integer, ForeignKey('staff.id'), nullable=False, index=True)
    date = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    shift = Column(String(50), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Duty(id={self.id}, staff_id={self.staff_id}, date={self.date}, shift={self.shift})>"


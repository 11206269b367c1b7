"""Read-only endpoints for the public site."""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hospital_roster.api.schemas import DutyResponse, HospitalInfoResponse, StaffResponse
from hospital_roster.api.state import get_db
from hospital_roster.services import duty, hospital, staff

router = APIRouter(tags=["Public"])


@router.get("/hospital/query-info", response_model=Optional[HospitalInfoResponse])
def query_hospital_info(db: Session = Depends(get_db)):
    """Return the hospital profile, or null if it has not been created."""
    return hospital.get_hospital_info(db)


@router.get("/staffs/get-all-staffs", response_model=List[StaffResponse])
def get_all_staffs(db: Session = Depends(get_db)):
    return staff.list_staff(db)


@router.get("/staffs/query-duty/{date}", response_model=List[DutyResponse])
def query_duty(date: str, db: Session = Depends(get_db)):
    """Duty for one date, ordered by department then shift."""
    return duty.get_duty_by_date(db, date)

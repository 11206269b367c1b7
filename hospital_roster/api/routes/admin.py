"""Back-office endpoints under /admin."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hospital_roster.api.schemas import (
    AdminResponse,
    ChangesResponse,
    DutyCreateRequest,
    HospitalInfoUpdateRequest,
    IdResponse,
    LoginRequest,
    PasswordChangeRequest,
    StaffCreateRequest,
    StaffUpdateRequest,
    SuccessResponse,
)
from hospital_roster.api.state import get_db
from hospital_roster.services import admin, duty, hospital, staff

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/login", response_model=Optional[AdminResponse])
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """
    Check admin credentials.

    Returns the admin on success and null otherwise; a failed login is not an
    error response. AdminResponse has no password field, so the stored hash
    is never sent back to the client.
    """
    return admin.admin_login(db, request.username, request.password)


@router.post("/staffs/add-staff", response_model=IdResponse)
def add_staff(request: StaffCreateRequest, db: Session = Depends(get_db)):
    created = staff.create_staff(
        db,
        name=request.name,
        department=request.department,
        position=request.position,
        status=request.status,
    )
    return {"id": created.id}


@router.put("/staffs/update-staff/{staff_id}", response_model=ChangesResponse)
def update_staff(staff_id: int, request: StaffUpdateRequest, db: Session = Depends(get_db)):
    changes = staff.update_staff(
        db,
        staff_id,
        name=request.name,
        department=request.department,
        position=request.position,
        status=request.status,
    )
    return {"changes": changes}


@router.delete("/staffs/delete-staff/{staff_id}", response_model=ChangesResponse)
def delete_staff(staff_id: int, db: Session = Depends(get_db)):
    return {"changes": staff.delete_staff(db, staff_id)}


@router.post("/arrange-duty", response_model=IdResponse)
def arrange_duty(request: DutyCreateRequest, db: Session = Depends(get_db)):
    """Book a staff member on a shift; 400 if that exact booking exists."""
    created = duty.create_duty(db, staff_id=request.staff_id, date=request.date, shift=request.shift)
    return {"id": created.id}


@router.put("/hospital/update-info", response_model=ChangesResponse)
def update_hospital_info(request: HospitalInfoUpdateRequest, db: Session = Depends(get_db)):
    changes = hospital.update_hospital_info(
        db,
        name=request.name,
        introduction=request.introduction,
        address=request.address,
        phone=request.phone,
        emergency_phone=request.emergency_phone,
    )
    return {"changes": changes}


@router.post("/update-password", response_model=SuccessResponse)
def update_password(request: PasswordChangeRequest, db: Session = Depends(get_db)):
    admin.change_admin_password(db, request.old_password, request.new_password)
    return {"success": True}

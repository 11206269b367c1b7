"""Pydantic models for the roster API."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Requests
# ============================================================================

class StaffCreateRequest(BaseModel):
    name: str = Field(..., description="Staff member name")
    department: str = Field(..., description="Department the staff member belongs to")
    position: Optional[str] = Field(None, description="Job title, empty when omitted")
    status: Optional[str] = Field(None, description="Defaults to 'active'")


class StaffUpdateRequest(BaseModel):
    """Full replacement of a staff record; omitted fields are written as null"""
    name: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    status: Optional[str] = None


class DutyCreateRequest(BaseModel):
    staff_id: int = Field(..., description="Staff member to put on duty")
    date: str = Field(..., description="Calendar date, YYYY-MM-DD", min_length=1)
    shift: str = Field(..., description="Shift label, e.g. morning/afternoon/night", min_length=1)


class HospitalInfoUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    introduction: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    emergency_phone: Optional[str] = Field(None, alias="emergencyPhone")


class LoginRequest(BaseModel):
    username: str
    password: str = Field(..., description="Password hash as stored")


class PasswordChangeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_password: str = Field(..., alias="oldPassword")
    new_password: str = Field(..., alias="newPassword", min_length=1)


# ============================================================================
# Responses
# ============================================================================

class StaffResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    department: str
    position: Optional[str] = None
    status: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class DutyResponse(BaseModel):
    """A duty row joined with its staff member (null when the staff was deleted)"""
    id: int
    staff_id: int
    date: str
    shift: str
    created_at: datetime
    updated_at: datetime
    name: Optional[str] = None
    department: Optional[str] = None


class HospitalInfoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    introduction: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    emergency_phone: Optional[str] = Field(None, alias="emergencyPhone")
    created_at: datetime
    updated_at: datetime


class AdminResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    created_at: datetime
    updated_at: datetime


class IdResponse(BaseModel):
    id: int


class ChangesResponse(BaseModel):
    changes: int


class SuccessResponse(BaseModel):
    success: bool


class HealthResponse(BaseModel):
    status: str
    database_connected: bool

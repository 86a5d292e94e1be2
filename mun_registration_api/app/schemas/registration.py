"""
Pydantic models for registrations.

``RegistrationCreate`` is the public form payload.  Field rules beyond
basic types (name length, grade and section sets, committee id, email
syntax) are enforced by ``RegistrationService`` so that all violations
are reported together.  ``RegistrationRead`` is what the API returns;
it uses the wire names ``class`` and ``createdAt`` as aliases.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# Grade levels, lowest to highest.  The last two count as senior.
CLASS_LEVELS = ("8th", "9th", "10th", "11th", "12th")
SENIOR_CLASS_LEVELS = CLASS_LEVELS[-2:]
DIVISIONS = ("A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K")

MIN_NAME_LENGTH = 2


class RegistrationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"


class RegistrationCreate(BaseModel):
    """Schema for submitting a registration."""

    name: str = Field(..., example="Asha Rao")
    class_: str = Field(..., alias="class", example="10th")
    division: str = Field(..., example="B")
    committee: str = Field(..., example="lok-sabha")
    email: Optional[str] = Field(None, example="asha@example.com")
    suggestions: Optional[str] = Field(None, example="More crisis committees please")

    model_config = {
        "populate_by_name": True,
    }


class RegistrationRead(BaseModel):
    """Schema for reading a stored registration."""

    id: int
    name: str
    class_: str = Field(..., alias="class")
    division: str
    committee: str
    email: Optional[str] = None
    suggestions: Optional[str] = None
    status: RegistrationStatus
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class StatusUpdate(BaseModel):
    """Body of ``PATCH /registrations/{id}/status``.

    Kept as a plain string so that unknown values reach the service and
    are reported as a validation error with the usual envelope.
    """

    status: str = Field(..., example="confirmed")


class RegistrationStats(BaseModel):
    """Aggregate counts for the admin dashboard.

    ``internationalCommittees`` is always ``total - indianCommittees``.
    """

    total: int = 0
    indian_committees: int = Field(0, alias="indianCommittees")
    international_committees: int = Field(0, alias="internationalCommittees")
    senior_students: int = Field(0, alias="seniorStudents")
    pending: int = 0
    confirmed: int = 0
    rejected: int = 0

    model_config = {
        "populate_by_name": True,
    }


class RegistrationResponse(BaseModel):
    success: bool = True
    registration: RegistrationRead


class RegistrationListResponse(BaseModel):
    success: bool = True
    registrations: List[RegistrationRead]


class StatsResponse(BaseModel):
    success: bool = True
    stats: RegistrationStats


class MessageResponse(BaseModel):
    success: bool = True
    message: str

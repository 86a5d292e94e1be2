"""
Registration endpoints.

The public form posts to ``POST /registrations``; everything else is
the admin dashboard (listing, statistics, CSV export and triage) and
sits behind the ``require_admin`` dependency.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from mun_registration_api.app.core.security import require_admin
from mun_registration_api.app.schemas.registration import (
    MessageResponse,
    RegistrationCreate,
    RegistrationListResponse,
    RegistrationResponse,
    StatsResponse,
    StatusUpdate,
)
from mun_registration_api.app.services.registration_service import RegistrationService


router = APIRouter()


@router.post("", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
async def create_registration(data: RegistrationCreate) -> RegistrationResponse:
    """Submit a registration.

    Responds with 400 when a field is invalid or when the same name,
    class and division is already registered.
    """
    registration = await RegistrationService.create_registration(data)
    return RegistrationResponse(registration=registration)


@router.get("", response_model=RegistrationListResponse)
async def list_registrations(
    status_filter: Optional[str] = Query(None, alias="status"),
    committee: Optional[str] = Query(None),
    class_filter: Optional[str] = Query(None, alias="class"),
    division: Optional[str] = Query(None),
    category: Optional[str] = Query(None, description="'domestic' or 'international'"),
    _admin: Optional[dict] = Depends(require_admin),
) -> RegistrationListResponse:
    """List registrations in submission order.

    - **status**, **committee**, **class**, **division**: exact match.
    - **category**: committee category from the catalog.
    """
    registrations = await RegistrationService.list_registrations(
        status=status_filter,
        committee=committee,
        class_=class_filter,
        division=division,
        category=category,
    )
    return RegistrationListResponse(registrations=registrations)


@router.get("/stats", response_model=StatsResponse)
async def registration_stats(_admin: Optional[dict] = Depends(require_admin)) -> StatsResponse:
    return StatsResponse(stats=await RegistrationService.stats())


@router.get("/export")
async def export_registrations(_admin: Optional[dict] = Depends(require_admin)) -> Response:
    """Download all registrations as a CSV attachment."""
    content = await RegistrationService.export_csv()
    filename = RegistrationService.export_filename()
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{registration_id}", response_model=RegistrationResponse)
async def get_registration(
    registration_id: int,
    _admin: Optional[dict] = Depends(require_admin),
) -> RegistrationResponse:
    return RegistrationResponse(registration=await RegistrationService.get_registration(registration_id))


@router.patch("/{registration_id}/status", response_model=RegistrationResponse)
async def update_registration_status(
    registration_id: int,
    update: StatusUpdate,
    _admin: Optional[dict] = Depends(require_admin),
) -> RegistrationResponse:
    """Confirm, reject or reset a registration to pending.

    Responds with 400 for an unknown status and 404 for an unknown id.
    """
    registration = await RegistrationService.update_status(registration_id, update.status)
    return RegistrationResponse(registration=registration)


@router.delete("/{registration_id}", response_model=MessageResponse)
async def delete_registration(
    registration_id: int,
    _admin: Optional[dict] = Depends(require_admin),
) -> MessageResponse:
    """Permanently delete a registration."""
    await RegistrationService.delete_registration(registration_id)
    return MessageResponse(message=f"Registration {registration_id} deleted")

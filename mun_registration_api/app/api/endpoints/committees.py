"""
Committee catalog endpoints.

Read-only views over the static catalog used by the registration form.
"""

from typing import Optional

from fastapi import APIRouter, Query

from mun_registration_api.app.core.exceptions import NotFoundError
from mun_registration_api.app.schemas.committee import CommitteeListResponse, CommitteeResponse
from mun_registration_api.app.services.committee_catalog import committee_catalog
from mun_registration_api.app.services.registration_service import parse_category


router = APIRouter()


@router.get("", response_model=CommitteeListResponse)
async def list_committees(
    category: Optional[str] = Query(None, description="'domestic' or 'international'"),
) -> CommitteeListResponse:
    """List committees in catalog order, optionally for one category."""
    if category is None:
        committees = committee_catalog.all()
    else:
        committees = committee_catalog.filter_by_category(parse_category(category))
    return CommitteeListResponse(committees=list(committees))


@router.get("/{committee_id}", response_model=CommitteeResponse)
async def get_committee(committee_id: str) -> CommitteeResponse:
    committee = committee_catalog.get_by_id(committee_id)
    if committee is None:
        raise NotFoundError("Committee", committee_id)
    return CommitteeResponse(committee=committee)

"""
Top‑level API router.

Aggregates the domain routers under a single router that ``main``
mounts at ``/api``.  The resulting paths (``/api/admin/login``,
``/api/registrations`` ...) are what existing clients call, so prefixes
here must not change.
"""

from fastapi import APIRouter

from .endpoints import admin, committees, registrations


router = APIRouter()

router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(registrations.router, prefix="/registrations", tags=["registrations"])
router.include_router(committees.router, prefix="/committees", tags=["committees"])


@router.get("/health", tags=["health"])
async def health() -> dict:
    return {"success": True, "status": "ok"}

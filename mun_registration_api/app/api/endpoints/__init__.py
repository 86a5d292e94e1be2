"""
Domain-specific routers.

Each module defines an ``APIRouter`` named ``router`` that is included
by ``api.router`` under its own prefix.
"""

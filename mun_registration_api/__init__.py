"""
Top‑level package for the MUN Registration API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``mun_registration_api.app.main:app``.
"""

__all__ = []

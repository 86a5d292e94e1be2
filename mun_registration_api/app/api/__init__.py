"""
API package containing the HTTP routes.

``router`` in ``api.router`` includes every domain router and is
mounted by ``main.create_app`` under ``/api``.
"""

"""
Service layer.

``committee_catalog`` holds the static committee data,
``registration_store`` persists registrations and
``registration_service`` implements the business rules on top of both.
"""

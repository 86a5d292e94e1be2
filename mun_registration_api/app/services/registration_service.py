"""
Business logic for registrations.

``RegistrationService`` validates submissions, rejects duplicates,
triages registrations through their status lifecycle and computes the
dashboard statistics.  Persistence is delegated to
``RegistrationStore`` and committee lookups to the static
``CommitteeCatalog``.
"""

from __future__ import annotations

import csv
import io
import logging
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

from email_validator import EmailNotValidError, validate_email

from ..core.exceptions import DuplicateRegistrationError, ValidationError
from ..schemas.committee import CommitteeCategory
from ..schemas.registration import (
    CLASS_LEVELS,
    DIVISIONS,
    MIN_NAME_LENGTH,
    SENIOR_CLASS_LEVELS,
    RegistrationCreate,
    RegistrationRead,
    RegistrationStats,
    RegistrationStatus,
)
from .committee_catalog import CommitteeCatalog, committee_catalog
from .registration_store import RegistrationStore


logger = logging.getLogger(__name__)

EXPORT_HEADERS = ["Name", "Class", "Division", "Committee", "Email", "Suggestions", "Registration Time"]


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def validate_registration(data: RegistrationCreate, catalog: CommitteeCatalog) -> List[Dict[str, str]]:
    """Return every field-level violation in ``data`` (empty when valid)."""
    errors: List[Dict[str, str]] = []
    if len(data.name.strip()) < MIN_NAME_LENGTH:
        errors.append({"field": "name", "message": f"Name must be at least {MIN_NAME_LENGTH} characters"})
    if data.class_ not in CLASS_LEVELS:
        errors.append({"field": "class", "message": f"Class must be one of: {', '.join(CLASS_LEVELS)}"})
    if data.division not in DIVISIONS:
        errors.append({"field": "division", "message": f"Division must be one of: {', '.join(DIVISIONS)}"})
    if data.committee not in catalog:
        errors.append({"field": "committee", "message": "Please select a valid committee"})
    email = _blank_to_none(data.email)
    if email is not None:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            errors.append({"field": "email", "message": "Invalid email address"})
    return errors


def parse_status(value: str) -> RegistrationStatus:
    try:
        return RegistrationStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in RegistrationStatus)
        raise ValidationError(
            [{"field": "status", "message": f"Status must be one of: {allowed}"}],
            message="Invalid status",
        ) from None


def parse_category(value: str) -> CommitteeCategory:
    try:
        return CommitteeCategory(value)
    except ValueError:
        allowed = ", ".join(c.value for c in CommitteeCategory)
        raise ValidationError(
            [{"field": "category", "message": f"Category must be one of: {allowed}"}],
            message="Invalid category",
        ) from None


class RegistrationService:
    """Registration intake, triage and statistics."""

    store = RegistrationStore
    catalog: CommitteeCatalog = committee_catalog

    @classmethod
    async def create_registration(cls, data: RegistrationCreate) -> RegistrationRead:
        """Validate and persist a new registration.

        Raises ``ValidationError`` listing every invalid field, or
        ``DuplicateRegistrationError`` when the same name, class and
        division is already registered.  The lookup below only gives an
        early answer; the table's UNIQUE constraint decides races.
        """
        errors = validate_registration(data, cls.catalog)
        if errors:
            raise ValidationError(errors)

        existing = cls.store.find_by_natural_key(data.name, data.class_, data.division)
        if existing is not None:
            logger.info(
                "Rejected duplicate registration for %s (%s-%s), existing id %s",
                data.name, data.class_, data.division, existing.id,
            )
            raise DuplicateRegistrationError(data.name, data.class_, data.division)

        registration = cls.store.insert(
            name=data.name,
            class_=data.class_,
            division=data.division,
            committee=data.committee,
            email=_blank_to_none(data.email),
            suggestions=_blank_to_none(data.suggestions),
        )
        logger.info(
            "Registration %s created for committee '%s'", registration.id, registration.committee
        )
        return registration

    @classmethod
    async def list_registrations(
        cls,
        status: Optional[str] = None,
        committee: Optional[str] = None,
        class_: Optional[str] = None,
        division: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[RegistrationRead]:
        """Return registrations in submission order, optionally filtered.

        ``category`` selects registrations whose committee belongs to
        that catalog category; registrations naming committees missing
        from the catalog never match a category filter.
        """
        filters: Dict[str, List[str]] = {}
        if status is not None:
            filters["status"] = [parse_status(status).value]
        if class_ is not None:
            filters["class"] = [class_]
        if division is not None:
            filters["division"] = [division]
        committees: Optional[List[str]] = [committee] if committee is not None else None
        if category is not None:
            in_category = [c.id for c in cls.catalog.filter_by_category(parse_category(category))]
            if committees is None:
                committees = in_category
            else:
                committees = [c for c in committees if c in in_category]
        if committees is not None:
            filters["committee"] = committees
        return cls.store.find_all(filters)

    @classmethod
    async def get_registration(cls, registration_id: int) -> RegistrationRead:
        return cls.store.get(registration_id)

    @classmethod
    async def update_status(cls, registration_id: int, new_status: str) -> RegistrationRead:
        """Set the status of a registration.

        Any transition between the three states is allowed and setting
        the current status again is a successful no-op.
        """
        status = parse_status(new_status)
        registration = cls.store.update_status(registration_id, status)
        logger.info("Registration %s marked %s", registration_id, status.value)
        return registration

    @classmethod
    async def delete_registration(cls, registration_id: int) -> None:
        cls.store.delete(registration_id)
        logger.info("Registration %s deleted", registration_id)

    @classmethod
    async def stats(cls) -> RegistrationStats:
        """Compute the dashboard counts in a single pass over the table.

        The international count is ``total - domestic`` so that the two
        always add up to the total, even for committee ids that are not
        in the catalog.
        """
        domestic_ids = [c.id for c in cls.catalog.filter_by_category(CommitteeCategory.DOMESTIC)]
        predicates = {
            "total": {},
            "domestic": {"committee": domestic_ids},
            "senior": {"class": list(SENIOR_CLASS_LEVELS)},
        }
        for status in RegistrationStatus:
            predicates[status.value] = {"status": [status.value]}
        counts = cls.store.count_where(predicates)
        total = counts["total"]
        return RegistrationStats(
            total=total,
            indian_committees=counts["domestic"],
            international_committees=total - counts["domestic"],
            senior_students=counts["senior"],
            pending=counts[RegistrationStatus.PENDING.value],
            confirmed=counts[RegistrationStatus.CONFIRMED.value],
            rejected=counts[RegistrationStatus.REJECTED.value],
        )

    @classmethod
    async def export_csv(cls) -> str:
        """Render all registrations as CSV for spreadsheet import.

        Every field is quoted.  Committees show their display name,
        falling back to the stored id, and a missing email shows as
        ``Not provided``.
        """
        registrations = cls.store.find_all()
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(EXPORT_HEADERS)
        for reg in registrations:
            writer.writerow([
                reg.name,
                reg.class_,
                reg.division,
                cls.catalog.display_name(reg.committee),
                reg.email or "Not provided",
                reg.suggestions or "",
                reg.created_at.strftime("%Y-%m-%d %H:%M:%S"),
            ])
        logger.info("Exported %d registrations", len(registrations))
        return buffer.getvalue()

    @staticmethod
    def export_filename(day: Optional[date] = None) -> str:
        """Download name for the export, dated in UTC like its timestamps."""
        day = day or datetime.now(timezone.utc).date()
        return f"mun_registrations_{day.isoformat()}.csv"

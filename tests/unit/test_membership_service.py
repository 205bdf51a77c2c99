"""
Unit tests for membership applications.
It asserts expected behavior and guards against regressions in the corresponding component.
"""

from __future__ import annotations

import pytest

from union_cms.api.error_handlers import ConflictError, InvalidInputError, NotFoundError
from union_cms.api.services.membership_service import MembershipService

FIELDS = {
    "full_name": "Mariem",
    "email": "mariem@example.com",
    "phone": "0550",
    "university": "Oran 1",
    "major": "Medicine",
    "academic_level": "M1",
    "wilaya": "Oran",
}


def test_submit_returns_new_id_with_pending_status(db) -> None:
    service = MembershipService(db=db)
    application_id = service.submit(**FIELDS)

    assert service.get_by_id(application_id)["status"] == "pending"


def test_duplicate_email_raises_conflict(db) -> None:
    service = MembershipService(db=db)
    service.submit(**FIELDS)

    with pytest.raises(ConflictError, match="This email is already registered"):
        service.submit(**{**FIELDS, "full_name": "Someone Else"})


def test_invalid_email_is_rejected(db) -> None:
    service = MembershipService(db=db)
    with pytest.raises(InvalidInputError, match="Invalid email format"):
        service.submit(**{**FIELDS, "email": "mariem@"})


def test_stats_count_each_status(db) -> None:
    service = MembershipService(db=db)
    first = service.submit(**FIELDS)
    second = service.submit(**{**FIELDS, "email": "b@example.com"})
    service.submit(**{**FIELDS, "email": "c@example.com"})
    service.update_status(first, "approved")
    service.update_status(second, "rejected")

    assert service.stats() == {"total": 3, "pending": 1, "approved": 1, "rejected": 1}


def test_stats_on_empty_table(db) -> None:
    assert MembershipService(db=db).stats() == {
        "total": 0,
        "pending": 0,
        "approved": 0,
        "rejected": 0,
    }


def test_update_status_on_missing_application(db) -> None:
    with pytest.raises(NotFoundError, match="Application not found"):
        MembershipService(db=db).update_status(99, "approved")

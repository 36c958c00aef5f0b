"""
Lending registry models.

Pydantic models for the data the registry works with:
- CirculatingItem: catalog entries and their kind-specific details
- LoanRecord: an active loan of one item to one member
- Outcomes: structured results of borrow and return requests
- Summaries: point-in-time snapshots for external rendering
"""

from .item import (
    BookDetails,
    CirculatingItem,
    DvdDetails,
    ItemDescription,
    ItemDetails,
    ItemKind,
    ItemState,
    ItemStatus,
    MagazineDetails,
    MediaDetails,
    ReportDetails,
    describe,
)
from .loan import LoanRecord
from .outcomes import (
    Borrowed,
    BorrowOutcome,
    EntityKind,
    NotBorrowed,
    NotFound,
    Outcome,
    OutcomeStatus,
    Returned,
    ReturnOutcome,
    Unavailable,
)
from .summary import ItemSummary, MemberSummary, RegistrySummary

__all__ = [
    "BookDetails",
    "BorrowOutcome",
    "Borrowed",
    "CirculatingItem",
    "DvdDetails",
    "EntityKind",
    "ItemDescription",
    "ItemDetails",
    "ItemKind",
    "ItemState",
    "ItemStatus",
    "ItemSummary",
    "LoanRecord",
    "MagazineDetails",
    "MediaDetails",
    "MemberSummary",
    "NotBorrowed",
    "NotFound",
    "Outcome",
    "OutcomeStatus",
    "RegistrySummary",
    "ReportDetails",
    "ReturnOutcome",
    "Returned",
    "Unavailable",
    "describe",
]

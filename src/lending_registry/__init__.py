"""
Lending Registry Package.

An in-memory registry of circulating items and the members who borrow them.

Key Components:
- models: Pydantic models for items, loan records, outcomes and summaries
- ledger: per-member bookkeeping of active loans
- member: registered borrowers
- registry: catalog/roster owner and borrow/return routing
- config: configuration management with Pydantic v2
"""

__version__ = "0.1.0"

from .config import RegistryConfig, configure_logging, get_config, reset_config
from .exceptions import DuplicateError, RegistryException, StateConflictError
from .ledger import LoanLedger
from .member import Member
from .models import (
    Borrowed,
    CirculatingItem,
    EntityKind,
    ItemDescription,
    ItemKind,
    LoanRecord,
    NotBorrowed,
    NotFound,
    OutcomeStatus,
    RegistrySummary,
    Returned,
    Unavailable,
)
from .registry import Registry

__all__ = [
    "Borrowed",
    "CirculatingItem",
    "DuplicateError",
    "EntityKind",
    "ItemDescription",
    "ItemKind",
    "LoanLedger",
    "LoanRecord",
    "Member",
    "NotBorrowed",
    "NotFound",
    "OutcomeStatus",
    "Registry",
    "RegistryConfig",
    "RegistryException",
    "RegistrySummary",
    "Returned",
    "StateConflictError",
    "Unavailable",
    "__version__",
    "configure_logging",
    "get_config",
    "reset_config",
]

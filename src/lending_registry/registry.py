"""
Registry implementation for the lending registry.

The registry owns the catalog and the roster and is the only place ids are
resolved to objects. Borrow and return requests flow one way:

1. Resolve the member id, then the item id (``NotFound`` for either)
2. Delegate to the member's ledger
3. The ledger asks the item to transition and records the loan on success

Every read or write of item state and ledger contents happens under a single
re-entrant lock, so concurrent checkouts of the same item serialize and only
the first one succeeds.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from threading import RLock

from .config import RegistryConfig, get_config
from .exceptions import DuplicateError, StateConflictError
from .member import Member
from .models.item import CirculatingItem
from .models.loan import LoanRecord
from .models.outcomes import (
    Borrowed,
    EntityKind,
    NotBorrowed,
    NotFound,
    Returned,
    Unavailable,
)
from .models.summary import ItemSummary, MemberSummary, RegistrySummary

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class Registry:
    """
    Catalog of circulating items and roster of members.

    Args:
        config: Loan policy; defaults to the global configuration
        clock: Zero-argument callable giving the current time
    """

    def __init__(self, config: RegistryConfig | None = None, clock: Clock | None = None):
        self.config = config or get_config()
        self._clock: Clock = clock or datetime.now
        self._items: dict[str, CirculatingItem] = {}
        self._members: dict[str, Member] = {}
        self._lock = RLock()

    def __repr__(self) -> str:
        return f"Registry(items={len(self._items)}, members={len(self._members)})"

    # -------------------------------------------------------------------------
    # Catalog and roster
    # -------------------------------------------------------------------------

    def add_item(self, item: CirculatingItem) -> None:
        """
        Add an item to the catalog.

        Raises:
            DuplicateError: If an item with the same id is already registered
            StateConflictError: If the item is already on loan
        """
        with self._lock:
            if item.id in self._items:
                logger.warning("Rejected duplicate item id %s", item.id)
                raise DuplicateError("item", item.id)
            if not item.is_available:
                logger.warning("Rejected item %s already on loan to %s", item.id, item.holder_id)
                raise StateConflictError("item", item.id, f"already on loan to {item.holder_id}")
            self._items[item.id] = item
        logger.debug("Added %s %s to catalog", item.kind.value, item.id)

    def add_member(self, member: Member) -> None:
        """
        Add a member to the roster.

        Raises:
            DuplicateError: If a member with the same id is already registered
            StateConflictError: If the member already holds loans
        """
        with self._lock:
            if member.id in self._members:
                logger.warning("Rejected duplicate member id %s", member.id)
                raise DuplicateError("member", member.id)
            if len(member.ledger) > 0:
                logger.warning("Rejected member %s with %d active loans", member.id, len(member.ledger))
                raise StateConflictError("member", member.id, f"holds {len(member.ledger)} active loans")
            self._members[member.id] = member
        logger.debug("Added member %s to roster", member.id)

    def find_item(self, item_id: str) -> CirculatingItem | None:
        with self._lock:
            return self._items.get(item_id)

    def find_member(self, member_id: str) -> Member | None:
        with self._lock:
            return self._members.get(member_id)

    def items(self) -> list[CirculatingItem]:
        """Catalog items in the order they were added."""
        with self._lock:
            return list(self._items.values())

    def members(self) -> list[Member]:
        """Members in the order they were added."""
        with self._lock:
            return list(self._members.values())

    def holder_of(self, item_id: str) -> Member | None:
        """Member currently holding an item, or None if it is available or unknown."""
        with self._lock:
            item = self._items.get(item_id)
            if item is None or item.holder_id is None:
                return None
            return self._members.get(item.holder_id)

    # -------------------------------------------------------------------------
    # Circulation
    # -------------------------------------------------------------------------

    def borrow(
        self,
        member_id: str,
        item_id: str,
        borrow_days: int | None = None,
    ) -> Borrowed | NotFound | Unavailable:
        """
        Check an item out to a member.

        Args:
            member_id: Id of the borrowing member
            item_id: Id of the item to borrow
            borrow_days: Loan period in days (defaults to the configured period)

        Returns:
            ``Borrowed`` with the new loan record, ``NotFound`` for an unknown
            member or item (member checked first), or ``Unavailable``

        Raises:
            ValueError: If borrow_days is outside the configured bounds or the
                due time is out of range
        """
        days = self.config.check_loan_days(
            self.config.default_loan_days if borrow_days is None else borrow_days
        )

        with self._lock:
            resolved = self._resolve(member_id, item_id)
            if isinstance(resolved, NotFound):
                logger.info("Borrow rejected - %s %s not found", resolved.entity.value, resolved.id)
                return resolved
            member, item = resolved

            outcome = member.ledger.open_loan(item, borrow_days=days, now=self._clock())

        if isinstance(outcome, Borrowed):
            logger.info(
                "Item %s borrowed by %s, due %s",
                item_id,
                member_id,
                outcome.loan.due_time.isoformat() if outcome.loan else "-",
            )
        else:
            logger.info("Borrow rejected - item %s is unavailable", item_id)
        return outcome

    def return_item(self, member_id: str, item_id: str) -> Returned | NotFound | NotBorrowed:
        """
        Check an item back in from a member.

        Returns:
            ``Returned`` with the closed loan record, ``NotFound`` for an
            unknown member or item, or ``NotBorrowed`` if the member does not
            hold the item
        """
        with self._lock:
            resolved = self._resolve(member_id, item_id)
            if isinstance(resolved, NotFound):
                logger.info("Return rejected - %s %s not found", resolved.entity.value, resolved.id)
                return resolved
            member, _ = resolved

            outcome = member.ledger.close_loan(item_id)

        if isinstance(outcome, Returned):
            logger.info("Item %s returned by %s", item_id, member_id)
        else:
            logger.info("Return rejected - %s does not hold item %s", member_id, item_id)
        return outcome

    def _resolve(
        self, member_id: str, item_id: str
    ) -> tuple[Member, CirculatingItem] | NotFound:
        member = self._members.get(member_id)
        if member is None:
            return NotFound(entity=EntityKind.MEMBER, id=member_id)
        item = self._items.get(item_id)
        if item is None:
            return NotFound(entity=EntityKind.ITEM, id=item_id)
        return member, item

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def summary(self) -> RegistrySummary:
        """Snapshot of every item's state and every member's holdings."""
        with self._lock:
            items = [
                ItemSummary(
                    description=item.describe(),
                    available=item.is_available,
                    holder_id=item.holder_id,
                )
                for item in self._items.values()
            ]
            members = [
                MemberSummary(
                    id=member.id,
                    name=member.name,
                    borrowed_item_ids=[record.item_id for record in member.active_loans()],
                )
                for member in self._members.values()
            ]
            return RegistrySummary(taken_at=self._clock(), items=items, members=members)

    def overdue_loans(self, at: datetime | None = None) -> list[LoanRecord]:
        """Loans past their due time, soonest due first."""
        with self._lock:
            moment = at or self._clock()
            overdue = [
                record
                for member in self._members.values()
                for record in member.ledger.overdue_loans(moment)
            ]
        return sorted(overdue, key=lambda record: record.due_time)

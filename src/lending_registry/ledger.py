"""
Per-member loan ledger.

The ledger is the bookkeeping half of a checkout. It never changes an item's
state itself: it asks the item to transition and only records or removes a
loan once the item confirms. That ordering keeps the ledger and the item
state from ever disagreeing:

1. **open_loan**: build the LoanRecord, item.check_out succeeds -> append it
2. **close_loan**: record found and item.check_in succeeds -> drop the record

Any rejection from the item is handed back to the caller untouched.
"""

import logging
from datetime import datetime

from .config import get_config
from .models.item import CirculatingItem, ItemDescription
from .models.loan import LoanRecord
from .models.outcomes import Borrowed, NotBorrowed, Returned, Unavailable

logger = logging.getLogger(__name__)


class LoanLedger:
    """
    Active loans held by one member, in borrow order.

    The ledger is keyed by item id, so it can never hold two records for the
    same item.
    """

    def __init__(self, member_id: str, member_name: str):
        self.member_id = member_id
        self.member_name = member_name
        self._records: dict[str, LoanRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"LoanLedger(member_id={self.member_id!r}, active={len(self._records)})"

    def open_loan(
        self,
        item: CirculatingItem,
        borrow_days: int | None = None,
        now: datetime | None = None,
    ) -> Borrowed | Unavailable:
        """
        Check an item out to this member and record the loan.

        The record is built before the item is touched, so a period that
        cannot be represented leaves both the item and the ledger unchanged.

        Args:
            item: Item to borrow
            borrow_days: Loan period in days (defaults to the configured period)
            now: Checkout time (defaults to the current local time)

        Returns:
            ``Borrowed`` carrying the new loan record, or the item's
            ``Unavailable`` outcome unchanged

        Raises:
            ValueError: If borrow_days is less than one or the due time is
                out of range
        """
        if borrow_days is None:
            borrow_days = get_config().default_loan_days
        if borrow_days < 1:
            raise ValueError(f"borrow_days must be at least 1, got {borrow_days}")

        record = LoanRecord.open(
            item=item,
            member_id=self.member_id,
            checkout_time=now or datetime.now(),
            borrow_days=borrow_days,
        )

        outcome = item.check_out(self.member_id, self.member_name)
        if not isinstance(outcome, Borrowed):
            logger.debug("Item %s refused checkout for %s", item.id, self.member_id)
            return outcome

        self._records[item.id] = record
        return outcome.model_copy(update={"loan": record})

    def close_loan(self, item_id: str) -> Returned | NotBorrowed:
        """
        Check an item back in and drop its loan record.

        Args:
            item_id: Id of the item being returned

        Returns:
            ``Returned`` carrying the closed record, or ``NotBorrowed`` if this
            member does not hold the item
        """
        record = self._records.get(item_id)
        if record is None:
            return NotBorrowed(item_id=item_id)

        outcome = record.item.check_in()
        if not isinstance(outcome, Returned):
            # Only reachable if the item was checked in behind the ledger's back
            logger.warning(
                "Ledger of %s holds %s but the item is not on loan",
                self.member_id,
                item_id,
            )
            return outcome

        del self._records[item_id]
        return outcome.model_copy(update={"loan": record})

    def active_loans(self) -> tuple[LoanRecord, ...]:
        """Active loan records, oldest first."""
        return tuple(self._records.values())

    def holds(self, item_id: str) -> bool:
        return item_id in self._records

    def borrowed_items(self) -> list[ItemDescription]:
        """Descriptions of the items currently held, oldest loan first."""
        return [record.item.describe() for record in self._records.values()]

    def overdue_loans(self, at: datetime) -> list[LoanRecord]:
        return [record for record in self._records.values() if record.is_overdue(at)]

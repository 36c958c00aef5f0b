"""
Member model for the lending registry.

Members are the people who borrow items. Each member owns a loan ledger that
the registry routes checkout and return requests to.
"""

from pydantic import BaseModel, Field, PrivateAttr

from .ledger import LoanLedger
from .models.item import ItemDescription
from .models.loan import LoanRecord


class Member(BaseModel):
    """A registered borrower and their active loans."""

    id: str = Field(
        ...,
        description="Unique identifier of the member within the roster",
        min_length=1,
        frozen=True,
        examples=["MEM001", "MEM002"],
    )

    name: str = Field(
        ...,
        description="Full name of the member",
        min_length=1,
        max_length=200,
        frozen=True,
        examples=["Alice", "Bob Smith"],
    )

    _ledger: LoanLedger = PrivateAttr()

    def model_post_init(self, __context) -> None:
        """Give every new member an empty ledger."""
        self._ledger = LoanLedger(member_id=self.id, member_name=self.name)

    @property
    def ledger(self) -> LoanLedger:
        return self._ledger

    def active_loans(self) -> tuple[LoanRecord, ...]:
        return self._ledger.active_loans()

    def borrowed_items(self) -> list[ItemDescription]:
        return self._ledger.borrowed_items()

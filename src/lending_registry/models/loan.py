"""
Loan record model for the lending registry.

A loan record ties a member to an item for the duration of a checkout. It is
created by a member's ledger only after the item confirms the checkout, and
removed only after the item confirms the check-in. Due times are descriptive:
nothing in the registry acts on them automatically.
"""

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .item import CirculatingItem
from .outcomes import Borrowed, Returned


class LoanRecord(BaseModel):
    """An active loan of one item to one member."""

    model_config = ConfigDict(frozen=True)

    item: CirculatingItem = Field(
        ...,
        description="The loaned item; owned by the registry, referenced here",
    )

    member_id: str = Field(
        ...,
        description="Id of the member holding the item",
        min_length=1,
    )

    checkout_time: datetime = Field(
        ...,
        description="When the item was checked out",
    )

    due_time: datetime = Field(
        ...,
        description="When the item should be returned",
    )

    @model_validator(mode="after")
    def validate_times(self) -> "LoanRecord":
        """Ensure the due time is after the checkout time."""
        if self.due_time <= self.checkout_time:
            raise ValueError("Due time must be after checkout time")
        return self

    @classmethod
    def open(
        cls,
        item: CirculatingItem,
        member_id: str,
        checkout_time: datetime,
        borrow_days: int,
    ) -> "LoanRecord":
        """
        Create a record due ``borrow_days`` after ``checkout_time``.

        Raises:
            ValueError: If the due time falls outside the representable range
        """
        try:
            due_time = checkout_time + timedelta(days=borrow_days)
        except OverflowError as e:
            raise ValueError(
                f"Due time for a {borrow_days}-day loan from {checkout_time.isoformat()} is out of range"
            ) from e
        return cls(
            item=item,
            member_id=member_id,
            checkout_time=checkout_time,
            due_time=due_time,
        )

    @property
    def item_id(self) -> str:
        return self.item.id

    @property
    def loan_period_days(self) -> int:
        """Length of the loan period in whole days."""
        return (self.due_time - self.checkout_time).days

    def is_overdue(self, at: datetime) -> bool:
        """Check if the loan is past its due time at the given moment."""
        return at > self.due_time

    def days_until_due(self, at: datetime) -> int:
        """Whole days left until the due time (negative once overdue)."""
        return (self.due_time.date() - at.date()).days


# Outcomes reference LoanRecord by name; resolve it now that it exists.
Borrowed.model_rebuild()
Returned.model_rebuild()

"""
Structured outcomes of lending operations.

Every command in the registry returns one of these models instead of a
message string. Callers branch on ``status`` (or the ``ok`` shortcut) and
render the payload however they like:

- Borrowed / Returned: the transition happened
- NotFound: a member or item id did not resolve
- Unavailable: the item is already on loan
- NotBorrowed: the item is not out, or not held by the requesting member
"""

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .loan import LoanRecord


class OutcomeStatus(str, Enum):
    """Discriminant shared by all outcomes."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    NOT_BORROWED = "not_borrowed"


class EntityKind(str, Enum):
    """What kind of id failed to resolve."""

    ITEM = "item"
    MEMBER = "member"


class Outcome(BaseModel):
    """Base class for operation outcomes."""

    model_config = ConfigDict(frozen=True)

    status: OutcomeStatus

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS


class Borrowed(Outcome):
    """An item was checked out to a member."""

    status: Literal[OutcomeStatus.SUCCESS] = OutcomeStatus.SUCCESS
    item_id: str
    member_id: str
    borrower_name: str
    # Attached by the ledger once the loan record exists
    loan: "LoanRecord | None" = None


class Returned(Outcome):
    """An item was checked back in."""

    status: Literal[OutcomeStatus.SUCCESS] = OutcomeStatus.SUCCESS
    item_id: str
    member_id: str | None = None
    loan: "LoanRecord | None" = None


class NotFound(Outcome):
    """A member or item id is not registered."""

    status: Literal[OutcomeStatus.NOT_FOUND] = OutcomeStatus.NOT_FOUND
    entity: EntityKind
    id: str


class Unavailable(Outcome):
    """Checkout was attempted on an item that is already on loan."""

    status: Literal[OutcomeStatus.UNAVAILABLE] = OutcomeStatus.UNAVAILABLE
    item_id: str


class NotBorrowed(Outcome):
    """Return was attempted for an item that is not out to the requester."""

    status: Literal[OutcomeStatus.NOT_BORROWED] = OutcomeStatus.NOT_BORROWED
    item_id: str


BorrowOutcome = Annotated[Borrowed | NotFound | Unavailable, Field(discriminator="status")]
ReturnOutcome = Annotated[Returned | NotFound | NotBorrowed, Field(discriminator="status")]

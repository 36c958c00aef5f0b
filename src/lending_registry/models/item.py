"""
Circulating item model for the lending registry.

A circulating item is any catalog entry that can be checked out and returned:
books, magazines, DVDs, learning media and research reports. Each item carries

1. An immutable identity (id and title)
2. A closed set of kind-specific details, discriminated on ``kind``
3. A state that is either available or on loan to exactly one member

The state is the single source of truth for loanability. Checkout and check-in
are the only transitions that change it, and both report wrong-state requests
as outcome values instead of raising.
"""

from enum import Enum
from typing import Annotated, Literal, assert_never

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .outcomes import Borrowed, NotBorrowed, Returned, Unavailable


class ItemKind(str, Enum):
    """Kinds of circulating items."""

    BOOK = "book"
    MAGAZINE = "magazine"
    DVD = "dvd"
    MEDIA = "media"
    REPORT = "report"

    @property
    def label(self) -> str:
        """Human-facing name of the kind."""
        return _KIND_LABELS[self]


_KIND_LABELS = {
    ItemKind.BOOK: "Book",
    ItemKind.MAGAZINE: "Magazine",
    ItemKind.DVD: "DVD",
    ItemKind.MEDIA: "Learning Media",
    ItemKind.REPORT: "Research Report",
}


# === Kind-specific details ===


class BookDetails(BaseModel):
    """Details of a book."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["book"] = "book"
    author: str = Field(..., min_length=1, examples=["John Doe"])


class MagazineDetails(BaseModel):
    """Details of a magazine issue."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["magazine"] = "magazine"
    issue_date: str = Field(
        ...,
        description="Issue label, usually a year and month",
        min_length=1,
        examples=["2023-09"],
    )


class DvdDetails(BaseModel):
    """Details of a DVD."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["dvd"] = "dvd"
    duration_minutes: int = Field(..., ge=1, examples=[120])
    director: str | None = Field(None, examples=["Jane Director"])


class MediaDetails(BaseModel):
    """Details of learning media (video, audio, e-learning courses)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["media"] = "media"
    media_type: str = Field(..., min_length=1, examples=["Video", "Audio", "eLearning"])
    duration_minutes: int = Field(..., ge=1, examples=[90])


class ReportDetails(BaseModel):
    """Details of a research report."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["report"] = "report"
    author: str = Field(..., min_length=1, examples=["Dr. Smith"])
    year: int = Field(..., ge=1450, examples=[2024])


ItemDetails = Annotated[
    BookDetails | MagazineDetails | DvdDetails | MediaDetails | ReportDetails,
    Field(discriminator="kind"),
]


# === Item state ===


class ItemStatus(str, Enum):
    """Circulation status of an item."""

    AVAILABLE = "available"
    ON_LOAN = "on_loan"


class ItemState(BaseModel):
    """
    Either ``AVAILABLE`` or ``ON_LOAN`` to a single member.

    The holder id is present exactly when the item is on loan, so the flag and
    the holder can never disagree.
    """

    model_config = ConfigDict(frozen=True)

    status: ItemStatus = ItemStatus.AVAILABLE
    member_id: str | None = None

    @model_validator(mode="after")
    def validate_holder(self) -> "ItemState":
        """Require a holder for loaned items and none for available ones."""
        if self.status == ItemStatus.ON_LOAN and not self.member_id:
            raise ValueError("An item on loan must name its holder")
        if self.status == ItemStatus.AVAILABLE and self.member_id is not None:
            raise ValueError("An available item cannot have a holder")
        return self

    @classmethod
    def available(cls) -> "ItemState":
        return cls(status=ItemStatus.AVAILABLE)

    @classmethod
    def on_loan(cls, member_id: str) -> "ItemState":
        return cls(status=ItemStatus.ON_LOAN, member_id=member_id)


# === Structured description ===


class ItemDescription(BaseModel):
    """Kind-specific structured description of an item, ready for rendering."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    title: str
    kind: ItemKind
    kind_label: str
    attributes: dict[str, str | int | None] = Field(default_factory=dict)


def describe(item: "CirculatingItem") -> ItemDescription:
    """Build the structured description of an item from its kind details."""
    details = item.details
    if isinstance(details, BookDetails):
        attributes = {"author": details.author}
    elif isinstance(details, MagazineDetails):
        attributes = {"issue_date": details.issue_date}
    elif isinstance(details, DvdDetails):
        attributes = {
            "duration_minutes": details.duration_minutes,
            "director": details.director,
        }
    elif isinstance(details, MediaDetails):
        attributes = {
            "media_type": details.media_type,
            "duration_minutes": details.duration_minutes,
        }
    elif isinstance(details, ReportDetails):
        attributes = {"author": details.author, "year": details.year}
    else:
        assert_never(details)

    kind = ItemKind(details.kind)
    return ItemDescription(
        item_id=item.id,
        title=item.title,
        kind=kind,
        kind_label=kind.label,
        attributes=attributes,
    )


# === Circulating item ===


class CirculatingItem(BaseModel):
    """
    A catalog entry that members can borrow.

    ``id``, ``title`` and ``details`` are frozen after creation; only
    ``check_out`` and ``check_in`` move the item between states.
    """

    id: str = Field(
        ...,
        description="Unique identifier of the item within the catalog",
        min_length=1,
        frozen=True,
        examples=["B001", "M001", "LM001"],
    )

    title: str = Field(
        ...,
        description="Title of the item",
        min_length=1,
        max_length=500,
        frozen=True,
        examples=["TypeScript Guide", "Tech Monthly"],
    )

    details: ItemDetails = Field(..., frozen=True)

    state: ItemState = Field(
        default_factory=ItemState.available,
        description="Current circulation state",
    )

    # Construction helpers, one per kind

    @classmethod
    def book(cls, item_id: str, title: str, author: str) -> "CirculatingItem":
        return cls(id=item_id, title=title, details=BookDetails(author=author))

    @classmethod
    def magazine(cls, item_id: str, title: str, issue_date: str) -> "CirculatingItem":
        return cls(id=item_id, title=title, details=MagazineDetails(issue_date=issue_date))

    @classmethod
    def dvd(
        cls,
        item_id: str,
        title: str,
        duration_minutes: int,
        director: str | None = None,
    ) -> "CirculatingItem":
        return cls(
            id=item_id,
            title=title,
            details=DvdDetails(duration_minutes=duration_minutes, director=director),
        )

    @classmethod
    def media(
        cls, item_id: str, title: str, media_type: str, duration_minutes: int
    ) -> "CirculatingItem":
        return cls(
            id=item_id,
            title=title,
            details=MediaDetails(media_type=media_type, duration_minutes=duration_minutes),
        )

    @classmethod
    def report(cls, item_id: str, title: str, author: str, year: int) -> "CirculatingItem":
        return cls(id=item_id, title=title, details=ReportDetails(author=author, year=year))

    @property
    def kind(self) -> ItemKind:
        return ItemKind(self.details.kind)

    @property
    def is_available(self) -> bool:
        """Check if the item can be checked out."""
        return self.state.status == ItemStatus.AVAILABLE

    @property
    def holder_id(self) -> str | None:
        """Id of the member holding the item, if it is on loan."""
        return self.state.member_id

    def check_out(self, member_id: str, borrower_name: str) -> Borrowed | Unavailable:
        """
        Mark the item as on loan to a member.

        Args:
            member_id: Id of the borrowing member
            borrower_name: Name of the borrowing member

        Returns:
            ``Borrowed`` on success, ``Unavailable`` if the item is already out
        """
        if not self.is_available:
            return Unavailable(item_id=self.id)
        self.state = ItemState.on_loan(member_id)
        return Borrowed(item_id=self.id, member_id=member_id, borrower_name=borrower_name)

    def check_in(self) -> Returned | NotBorrowed:
        """
        Mark the item as available again.

        Returns:
            ``Returned`` on success, ``NotBorrowed`` if the item was not out
        """
        if self.is_available:
            return NotBorrowed(item_id=self.id)
        holder = self.state.member_id
        self.state = ItemState.available()
        return Returned(item_id=self.id, member_id=holder)

    def describe(self) -> ItemDescription:
        return describe(self)

"""
Tests for the CirculatingItem model.

These tests verify that items correctly:
1. Validate their identity and kind-specific details
2. Transition between available and on-loan states
3. Report wrong-state requests as outcomes without mutating
4. Describe themselves as structured views
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from lending_registry.models.item import (
    BookDetails,
    CirculatingItem,
    ItemDetails,
    ItemKind,
    ItemState,
    ItemStatus,
    MediaDetails,
)
from lending_registry.models.outcomes import (
    Borrowed,
    NotBorrowed,
    OutcomeStatus,
    Returned,
    Unavailable,
)


class TestItemCreation:
    """Test suite for building catalog items."""

    def test_new_item_is_available(self, book):
        """Test that a freshly created item can be borrowed."""
        assert book.is_available is True
        assert book.holder_id is None
        assert book.state.status == ItemStatus.AVAILABLE
        assert book.kind == ItemKind.BOOK

    def test_construction_from_raw_data(self):
        """Test building an item from plain data through the kind discriminator."""
        item = CirculatingItem.model_validate(
            {
                "id": "LM001",
                "title": "Intro to AI",
                "details": {"kind": "media", "media_type": "Video", "duration_minutes": 90},
            }
        )

        assert isinstance(item.details, MediaDetails)
        assert item.kind == ItemKind.MEDIA

    def test_unknown_kind_rejected(self):
        """Test that the kind set is closed."""
        with pytest.raises(ValidationError):
            TypeAdapter(ItemDetails).validate_python({"kind": "comic", "author": "X"})

    def test_empty_identity_rejected(self):
        """Test that id and title must be non-empty."""
        with pytest.raises(ValidationError):
            CirculatingItem.book("", "Title", author="Someone")
        with pytest.raises(ValidationError):
            CirculatingItem.book("B009", "", author="Someone")

    def test_identity_is_immutable(self, book):
        """Test that id, title and details cannot be reassigned."""
        with pytest.raises(ValidationError):
            book.id = "B999"
        with pytest.raises(ValidationError):
            book.title = "Another Title"
        with pytest.raises(ValidationError):
            book.details = BookDetails(author="Someone Else")

    def test_invalid_details_rejected(self):
        """Test kind-specific field validation."""
        with pytest.raises(ValidationError):
            CirculatingItem.dvd("D002", "Short", duration_minutes=0)
        with pytest.raises(ValidationError):
            CirculatingItem.report("RR002", "Ancient", author="Scribe", year=1000)


class TestItemState:
    """Test suite for the available / on-loan state."""

    def test_on_loan_requires_holder(self):
        with pytest.raises(ValidationError, match="must name its holder"):
            ItemState(status=ItemStatus.ON_LOAN)

    def test_available_cannot_have_holder(self):
        with pytest.raises(ValidationError, match="cannot have a holder"):
            ItemState(status=ItemStatus.AVAILABLE, member_id="MEM001")

    def test_factories(self):
        assert ItemState.available().member_id is None
        assert ItemState.on_loan("MEM001").status == ItemStatus.ON_LOAN


class TestCheckOutAndIn:
    """Test suite for the checkout / check-in transitions."""

    def test_check_out_available_item(self, book):
        """Test that checkout flips the state and names the borrower."""
        outcome = book.check_out("MEM001", "Alice")

        assert isinstance(outcome, Borrowed)
        assert outcome.ok is True
        assert outcome.item_id == "B001"
        assert outcome.member_id == "MEM001"
        assert outcome.borrower_name == "Alice"
        assert outcome.loan is None
        assert book.is_available is False
        assert book.holder_id == "MEM001"

    def test_check_out_loaned_item_is_rejected(self, book):
        """Test that a second checkout reports Unavailable and changes nothing."""
        book.check_out("MEM001", "Alice")
        state_before = book.state

        outcome = book.check_out("MEM002", "Bob")

        assert isinstance(outcome, Unavailable)
        assert outcome.status == OutcomeStatus.UNAVAILABLE
        assert outcome.ok is False
        assert outcome.item_id == "B001"
        assert book.state == state_before
        assert book.holder_id == "MEM001"

    def test_check_in_loaned_item(self, book):
        """Test that check-in restores availability."""
        book.check_out("MEM001", "Alice")

        outcome = book.check_in()

        assert isinstance(outcome, Returned)
        assert outcome.ok is True
        assert outcome.member_id == "MEM001"
        assert book.is_available is True
        assert book.holder_id is None

    def test_check_in_available_item_is_rejected(self, book):
        """Test that checking in an item that is not out is a no-op."""
        outcome = book.check_in()

        assert isinstance(outcome, NotBorrowed)
        assert outcome.status == OutcomeStatus.NOT_BORROWED
        assert book.is_available is True

    def test_items_cycle_indefinitely(self, book):
        """Test that there is no terminal state."""
        for member_id in ["MEM001", "MEM002", "MEM001"]:
            assert book.check_out(member_id, member_id).ok
            assert book.check_in().ok
        assert book.is_available is True


class TestDescribe:
    """Test suite for structured item descriptions."""

    def test_describe_every_kind(self, catalog):
        """Test the description of each kind carries its own fields."""
        descriptions = {item.id: item.describe() for item in catalog}

        assert descriptions["B001"].kind == ItemKind.BOOK
        assert descriptions["B001"].kind_label == "Book"
        assert descriptions["B001"].attributes == {"author": "John Doe"}

        assert descriptions["M001"].kind_label == "Magazine"
        assert descriptions["M001"].attributes == {"issue_date": "2023-09"}

        assert descriptions["D001"].kind_label == "DVD"
        assert descriptions["D001"].attributes == {
            "duration_minutes": 120,
            "director": "Jane Director",
        }

        assert descriptions["LM001"].kind_label == "Learning Media"
        assert descriptions["LM001"].attributes == {"media_type": "Video", "duration_minutes": 90}

        assert descriptions["RR001"].kind_label == "Research Report"
        assert descriptions["RR001"].attributes == {"author": "Dr. Smith", "year": 2024}

    def test_describe_includes_identity(self, book):
        description = book.describe()

        assert description.item_id == "B001"
        assert description.title == "TypeScript Guide"

    def test_dvd_without_director(self):
        """Test that the director is optional."""
        dvd = CirculatingItem.dvd("D002", "Untitled", duration_minutes=45)

        assert dvd.describe().attributes["director"] is None

    def test_describe_is_pure(self, book):
        """Test that describing does not touch the state."""
        book.check_out("MEM001", "Alice")
        state = book.state

        book.describe()

        assert book.state == state

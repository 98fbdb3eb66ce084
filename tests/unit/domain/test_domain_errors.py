"""Unit tests for domain errors."""

from codeflix_catalog.domain import errors


class TestEntityValidationError:
    """Tests for the EntityValidationError domain error."""

    @staticmethod
    def test_is_a_domain_error() -> None:
        """Test that validation errors can be caught as DomainError."""
        assert issubclass(errors.EntityValidationError, errors.DomainError)

    @staticmethod
    def test_attributes() -> None:
        """Test that the error keeps the offending field name."""
        error = errors.EntityValidationError("Name is bad", field_name="Name")
        assert error.field_name == "Name"

    @staticmethod
    def test_field_name_is_optional() -> None:
        """Test that field_name defaults to None."""
        assert errors.EntityValidationError("bad").field_name is None

    @staticmethod
    def test_error_message() -> None:
        """Test that the message is exactly the one given."""
        error = errors.EntityValidationError("Name should not be empty or null", "Name")
        assert str(error) == "Name should not be empty or null"

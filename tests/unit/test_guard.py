"""
Unit Tests for Guard

Run with:
    pytest tests/unit/test_guard.py -v
"""

import pytest

from melonbar.exceptions import EmptyCollectionError, MelonbarException, NullArgumentError
from melonbar.guard import non_null, not_empty


class TestNonNull:
    """Tests for non_null"""

    def test_passes_when_all_present(self):
        """No error when every argument is set"""
        non_null("a", 0, [], False)

    def test_passes_with_no_arguments(self):
        non_null()

    def test_reports_position_of_first_null(self):
        """The error names the index of the first None"""
        with pytest.raises(NullArgumentError, match=r"at i=1") as exc_info:
            non_null("a", None, None)

        assert exc_info.value.index == 1
        assert "Null object found in ['a', None, None]" in str(exc_info.value)

    def test_single_null(self):
        with pytest.raises(NullArgumentError, match=r"at i=0"):
            non_null(None)

    def test_error_is_value_error(self):
        """Callers catching ValueError also catch guard failures"""
        with pytest.raises(ValueError):
            non_null(None)


class TestNotEmpty:
    """Tests for not_empty"""

    def test_passes_for_non_empty(self):
        not_empty([1])
        not_empty({"a": 1})

    def test_raises_for_empty_names_type(self):
        with pytest.raises(EmptyCollectionError, match=r"Input collection \[list\] is empty!"):
            not_empty([])

    def test_raises_for_none(self):
        with pytest.raises(EmptyCollectionError, match=r"Input collection \[None\] is empty!"):
            not_empty(None)

    def test_error_serializes(self):
        with pytest.raises(MelonbarException) as exc_info:
            not_empty(set())

        assert exc_info.value.to_dict() == {
            "error": "empty_collection",
            "message": "Input collection [set] is empty!",
            "details": {"collection_type": "set"},
        }

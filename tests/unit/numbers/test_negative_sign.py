"""Tests for strmech/numbers/negative_sign.py"""

import pytest

from strmech.exceptions import InvalidArgumentError, InvalidSpecError, SearchError
from strmech.model.enums import NumSignSymbolPosition
from strmech.model.rune_array import RuneArrayDto
from strmech.numbers.negative_sign import NegativeNumberSearchSpec, NegNumSearchSpecCollection


class TestConstructors:
    def test_new_leading(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading("-")
        assert spec.position is NumSignSymbolPosition.BEFORE
        assert spec.leading_symbols.text == "-"
        assert spec.trailing_symbols.is_empty()
        assert spec.is_valid()

    def test_new_trailing(self) -> None:
        spec = NegativeNumberSearchSpec.new_trailing("CR")
        assert spec.position is NumSignSymbolPosition.AFTER
        assert spec.trailing_symbols.text == "CR"

    def test_new_leading_and_trailing(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading_and_trailing("(", ")")
        assert spec.position is NumSignSymbolPosition.BEFORE_AND_AFTER

    def test_empty_symbols_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            NegativeNumberSearchSpec.new_leading("")
        with pytest.raises(TypeError):
            NegativeNumberSearchSpec.new_trailing(None)  # type: ignore[arg-type]

    def test_validate_position_symbol_mismatch(self) -> None:
        spec = NegativeNumberSearchSpec(
            position=NumSignSymbolPosition.BEFORE,
            trailing_symbols=RuneArrayDto.new("-"),
        )
        with pytest.raises(InvalidSpecError):
            spec.validate()
        assert not NegativeNumberSearchSpec().is_valid()


class TestSearchBefore:
    def test_found_before_first_digit(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading("-")
        result = spec.search("-123", 0, False)

        assert result.found_negative_sign
        assert result.index == 0
        assert result.position is NumSignSymbolPosition.BEFORE
        assert spec.found_neg_num_sign

    def test_reported_as_previous_on_later_calls(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading("-")
        spec.search("- 123", 0, False)
        result = spec.search("- 123", 1, False)

        assert not result.found_negative_sign
        assert result.found_on_previous_search
        assert result.index == 0

    def test_ignored_after_first_digit(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading("-")
        result = spec.search("12-", 2, True)

        assert not result.found_negative_sign
        assert spec.found_first_numeric_digit

    def test_index_out_of_range(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading("-")
        with pytest.raises(InvalidArgumentError):
            spec.search("-1", 5, False)


class TestSearchAfter:
    def test_found_after_digits(self) -> None:
        spec = NegativeNumberSearchSpec.new_trailing("-")
        assert not spec.search("123-", 0, False).found_negative_sign
        result = spec.search("123-", 3, True)

        assert result.found_negative_sign
        assert result.index == 3
        assert spec.found_trailing_sign_index == 3


class TestSearchBeforeAndAfter:
    def test_both_symbols_required(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading_and_trailing("(", ")")
        target = "(123)"

        first = spec.search(target, 0, False)
        assert not first.found_negative_sign
        assert first.secondary_position is NumSignSymbolPosition.BEFORE
        assert spec.found_leading_sign

        second = spec.search(target, 4, True)
        assert second.found_negative_sign
        assert second.secondary_position is NumSignSymbolPosition.AFTER
        assert second.index == 4

    def test_trailing_without_leading(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading_and_trailing("(", ")")
        assert not spec.search("123)", 3, True).found_negative_sign
        assert not spec.found_neg_num_sign

    def test_empty_processing_flags_resets_state(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading_and_trailing("(", ")")
        spec.search("(1)", 0, False)
        spec.search("(1)", 2, True)
        spec.empty_processing_flags()

        assert not spec.found_neg_num_sign
        assert spec.found_leading_sign_index == -1
        assert spec.position is NumSignSymbolPosition.BEFORE_AND_AFTER


class TestCopySerialize:
    def test_copy_and_equal(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading_and_trailing("(", ")")
        spec.search("(1)", 0, False)
        copied = spec.copy()

        assert copied.equal(spec)
        copied.leading_symbols.chars.append("[")
        assert spec.leading_symbols.text == "("

    def test_dict_round_trip(self) -> None:
        spec = NegativeNumberSearchSpec.new_trailing("-")
        restored = NegativeNumberSearchSpec.from_dict(spec.to_dict())
        assert restored.equal(spec)

    def test_empty(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading("-")
        spec.empty()
        assert spec.position is NumSignSymbolPosition.NONE
        assert spec.leading_symbols.is_empty()

    def test_parameter_listing(self) -> None:
        listing = NegativeNumberSearchSpec.new_leading("-").parameter_listing()
        assert listing.startswith("NegativeNumberSearchSpec Parameters\n")
        assert "'-'" in listing
        assert "(empty)" in listing


class TestCollection:
    def test_us_collection(self) -> None:
        collection = NegNumSearchSpecCollection.new_united_states()
        assert len(collection) == 2
        assert collection[0].position is NumSignSymbolPosition.BEFORE
        assert collection[1].position is NumSignSymbolPosition.BEFORE_AND_AFTER

    def test_search_first_match_wins(self) -> None:
        collection = NegNumSearchSpecCollection.new_german()
        result = collection.search("5-", 1, True)

        assert result.found_negative_sign
        assert result.position is NumSignSymbolPosition.AFTER

    def test_search_empty_collection(self) -> None:
        with pytest.raises(SearchError):
            NegNumSearchSpecCollection().search("-1", 0, False)

    def test_validate_empty_collection(self) -> None:
        collection = NegNumSearchSpecCollection()
        assert not collection.is_valid()

    def test_add_spec_copies(self) -> None:
        spec = NegativeNumberSearchSpec.new_leading("-")
        collection = NegNumSearchSpecCollection([spec])
        spec.leading_symbols.chars[0] = "~"
        assert collection[0].leading_symbols.text == "-"

    def test_add_invalid_spec(self) -> None:
        with pytest.raises(InvalidSpecError):
            NegNumSearchSpecCollection().add_spec(NegativeNumberSearchSpec())

    def test_copy_equal_and_empty(self) -> None:
        collection = NegNumSearchSpecCollection.new_french()
        copied = collection.copy()
        assert copied.equal(collection)
        copied.empty()
        assert len(copied) == 0
        assert len(collection) == 1

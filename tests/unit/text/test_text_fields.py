"""Tests for strmech/text/fields.py"""

from datetime import datetime

import pytest

from strmech.exceptions import InvalidSpecError
from strmech.model.enums import TextFieldType, TextJustify
from strmech.text.fields import (
    MAX_FIELD_LENGTH,
    TextFieldSpec,
    TextFieldSpecDateTime,
    TextFieldSpecFiller,
    TextFieldSpecLabel,
    TextFieldSpecSpacer,
)


class TestLabel:
    def test_natural_length(self) -> None:
        label = TextFieldSpecLabel("Total")
        assert label.formatted_text() == "Total"
        assert label.formatted_length() == 5

    @pytest.mark.parametrize(
        "justification, expected",
        [
            (TextJustify.LEFT, "Qty     "),
            (TextJustify.RIGHT, "     Qty"),
            (TextJustify.CENTER, "  Qty   "),
        ],
    )
    def test_justified(self, justification: TextJustify, expected: str) -> None:
        assert TextFieldSpecLabel("Qty", 8, justification).formatted_text() == expected

    def test_empty_text_with_field_length(self) -> None:
        assert TextFieldSpecLabel("", 3).formatted_text() == "   "

    def test_text_longer_than_field(self) -> None:
        assert TextFieldSpecLabel("Description", 4).formatted_text() == "Description"

    @pytest.mark.parametrize(
        "label",
        [
            TextFieldSpecLabel(""),
            TextFieldSpecLabel("a\nb"),
            TextFieldSpecLabel("abc", 0),
            TextFieldSpecLabel("abc", MAX_FIELD_LENGTH + 1),
            TextFieldSpecLabel("abc", 5, TextJustify.NONE),
        ],
    )
    def test_invalid(self, label: TextFieldSpecLabel) -> None:
        assert not label.is_valid()
        with pytest.raises(InvalidSpecError):
            label.formatted_text()

    def test_field_type_and_dict(self) -> None:
        label = TextFieldSpecLabel("Name", 6, TextJustify.RIGHT)
        assert label.field_type is TextFieldType.LABEL
        assert label.to_dict() == {
            "field_type": "Label",
            "text": "Name",
            "field_len": 6,
            "justification": "Right",
        }

    def test_copy_and_equal(self) -> None:
        label = TextFieldSpecLabel("Name", 6)
        copied = label.copy()
        assert copied is not label
        assert copied.equal(label)
        copied.text = "Other"
        assert not copied.equal(label)

    def test_str(self) -> None:
        assert str(TextFieldSpecLabel("ab", 4, TextJustify.RIGHT)) == "  ab"


class TestSpacerFiller:
    def test_spacer(self) -> None:
        assert TextFieldSpecSpacer(3).formatted_text() == "   "
        assert TextFieldSpecSpacer(0).formatted_text() == ""
        assert TextFieldSpecSpacer.field_type is TextFieldType.SPACER
        assert not TextFieldSpecSpacer(-1).is_valid()

    def test_filler(self) -> None:
        assert TextFieldSpecFiller("-*", 3).formatted_text() == "-*-*-*"
        assert TextFieldSpecFiller.field_type is TextFieldType.FILLER

    @pytest.mark.parametrize(
        "filler",
        [TextFieldSpecFiller("", 2), TextFieldSpecFiller("-", 0), TextFieldSpecFiller("\n", 1)],
    )
    def test_filler_invalid(self, filler: TextFieldSpecFiller) -> None:
        with pytest.raises(InvalidSpecError):
            filler.validate()

    def test_filler_total_length_limit(self) -> None:
        assert not TextFieldSpecFiller("ab", MAX_FIELD_LENGTH).is_valid()

    def test_different_types_never_equal(self) -> None:
        assert not TextFieldSpecSpacer(1).equal(TextFieldSpecFiller(" ", 1))


class TestDateTime:
    def test_default_format(self) -> None:
        field = TextFieldSpecDateTime(datetime(2024, 1, 2, 3, 4, 5, 600))
        assert field.formatted_text() == "2024-01-02 03:04:05.000600"

    def test_custom_format_and_field(self) -> None:
        field = TextFieldSpecDateTime(datetime(2024, 12, 31), "%d.%m.%Y", 14, TextJustify.CENTER)
        assert field.formatted_text() == "  31.12.2024  "
        assert field.field_type is TextFieldType.DATE_TIME

    def test_invalid(self) -> None:
        assert not TextFieldSpecDateTime(datetime(2024, 1, 1), "").is_valid()
        assert not TextFieldSpecDateTime("2024-01-01").is_valid()  # type: ignore[arg-type]


def test_base_class_is_abstract() -> None:
    with pytest.raises(TypeError):
        TextFieldSpec()  # type: ignore[abstract]

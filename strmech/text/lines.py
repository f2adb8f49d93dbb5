"""
text/lines.py

(Краткое RU: Спецификации текстовых строк: пустые строки, сплошные линии, простой
текст, стандартные строки из полей, строки таймера, коллекции строк и заголовок-маркиза.)

EN: Text line specs for building plain-text reports.

Each line spec renders one or more complete lines, terminated by ``new_line``
unless the terminator is switched off. TextLineSpecLinesCollection keeps an
ordered list of line specs and renders them in order.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import ClassVar, Final, Iterator, List, Optional, Sequence, Tuple

from ..exceptions import InvalidArgumentError, InvalidSpecError
from ..model.enums import TextFieldType, TextJustify
from ..numbers.integer_separator import IntegerSeparatorSpec
from .fields import (
    DEFAULT_DATE_TIME_FORMAT,
    MAX_FIELD_LENGTH,
    TextFieldSpec,
    TextFieldSpecLabel,
    TextFieldSpecSpacer,
)

logger: Final = logging.getLogger(__name__)

MAX_LINE_COUNT: Final[int] = 1_000_000
TIMER_LINE_WIDTH: Final[int] = 78
MAX_TIMER_LABEL_WIDTH: Final[int] = 55
AVERAGE_TIME_LINE_WIDTH: Final[int] = 60
MIN_AVERAGE_TIME_LINE_WIDTH: Final[int] = 10

DEFAULT_START_TIME_LABEL: Final[str] = "Start Time"
DEFAULT_END_TIME_LABEL: Final[str] = "End Time"
DEFAULT_ELAPSED_TIME_LABEL: Final[str] = "Elapsed Time"
DEFAULT_TIMER_LABEL_RIGHT_MARGIN: Final[str] = ": "


def _check_count(value: int, minimum: int, maximum: int, label: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidSpecError(f"{label} must be int, got {type(value).__name__}")
    if value < minimum or value > maximum:
        raise InvalidSpecError(f"{label} must be {minimum}..{maximum}, got {value}")


def _check_margin(margin: str, label: str) -> None:
    if not isinstance(margin, str):
        raise InvalidSpecError(f"{label} must be str, got {type(margin).__name__}")
    if len(margin) > MAX_FIELD_LENGTH:
        raise InvalidSpecError(f"{label} length {len(margin)} exceeds {MAX_FIELD_LENGTH}")


def _check_new_line(new_line: str, turned_off: bool = False) -> None:
    if turned_off:
        return
    if not isinstance(new_line, str) or not new_line:
        raise InvalidSpecError("New line characters are empty")


class TextLineSpec(ABC):
    """Base class of text line specs."""

    __slots__ = ()

    field_type: ClassVar[TextFieldType] = TextFieldType.NONE

    @abstractmethod
    def validate(self) -> None: ...

    @abstractmethod
    def _render(self) -> str: ...

    def formatted_text(self) -> str:
        self.validate()
        return self._render()

    def formatted_length(self) -> int:
        return len(self.formatted_text())

    def lines(self) -> List[str]:
        """Rendered output split into lines, terminators kept."""
        return self.formatted_text().splitlines(keepends=True)

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidSpecError:
            return False
        return True

    def copy(self) -> "TextLineSpec":
        return replace(self)  # type: ignore[type-var]

    def equal(self, other: "TextLineSpec") -> bool:
        return type(self) is type(other) and self == other

    def __str__(self) -> str:
        return self.formatted_text()


@dataclass(slots=True)
class TextLineSpecBlankLines(TextLineSpec):
    num_blank_lines: int = 1
    new_line: str = "\n"

    field_type: ClassVar[TextFieldType] = TextFieldType.BLANK_LINE

    def validate(self) -> None:
        _check_count(self.num_blank_lines, 1, MAX_LINE_COUNT, "Number of blank lines")
        _check_new_line(self.new_line)

    def _render(self) -> str:
        return self.new_line * self.num_blank_lines


@dataclass(slots=True)
class TextLineSpecSolidLine(TextLineSpec):
    """
    A line of repeated characters, e.g. "  ==========".

    Rendered as left_margin + solid_chars * repeat_count + right_margin + new_line.
    """

    solid_chars: str = "-"
    repeat_count: int = 1
    left_margin: str = ""
    right_margin: str = ""
    new_line: str = "\n"
    turn_line_terminator_off: bool = False

    field_type: ClassVar[TextFieldType] = TextFieldType.SOLID_LINE

    @staticmethod
    def new_with_margins(
        solid_chars: str, repeat_count: int, left_margin: int = 0, right_margin: int = 0
    ) -> "TextLineSpecSolidLine":
        """Margins given as numbers of spaces."""
        _check_count(left_margin, 0, MAX_FIELD_LENGTH, "Left margin")
        _check_count(right_margin, 0, MAX_FIELD_LENGTH, "Right margin")
        line = TextLineSpecSolidLine(
            solid_chars=solid_chars,
            repeat_count=repeat_count,
            left_margin=" " * left_margin,
            right_margin=" " * right_margin,
        )
        line.validate()
        return line

    def validate(self) -> None:
        if not isinstance(self.solid_chars, str) or not self.solid_chars:
            raise InvalidSpecError("Solid line characters are empty")
        if "\n" in self.solid_chars:
            raise InvalidSpecError("Solid line characters contain a new line character")
        _check_count(self.repeat_count, 1, MAX_FIELD_LENGTH, "Solid line repeat count")
        _check_margin(self.left_margin, "Left margin")
        _check_margin(self.right_margin, "Right margin")
        _check_new_line(self.new_line, self.turn_line_terminator_off)

    def _render(self) -> str:
        terminator = "" if self.turn_line_terminator_off else self.new_line
        return f"{self.left_margin}{self.solid_chars * self.repeat_count}{self.right_margin}{terminator}"


@dataclass(slots=True)
class TextLineSpecPlainText(TextLineSpec):
    text: str = ""
    left_margin: str = ""
    right_margin: str = ""
    new_line: str = "\n"
    turn_line_terminator_off: bool = False

    def validate(self) -> None:
        if not isinstance(self.text, str) or not self.text:
            raise InvalidSpecError("Plain text line is empty")
        if len(self.text) > MAX_FIELD_LENGTH:
            raise InvalidSpecError(f"Plain text length {len(self.text)} exceeds {MAX_FIELD_LENGTH}")
        _check_margin(self.left_margin, "Left margin")
        _check_margin(self.right_margin, "Right margin")
        _check_new_line(self.new_line, self.turn_line_terminator_off)

    def _render(self) -> str:
        terminator = "" if self.turn_line_terminator_off else self.new_line
        return f"{self.left_margin}{self.text}{self.right_margin}{terminator}"


@dataclass(slots=True)
class TextLineSpecStandardLine(TextLineSpec):
    """
    A line assembled from text fields, repeated num_of_std_lines times.

    Example:
        >>> line = TextLineSpecStandardLine()
        >>> line.add_field(TextFieldSpecLabel("Name", 8, TextJustify.LEFT))
        0
        >>> line.add_field(TextFieldSpecLabel("Qty", 5, TextJustify.RIGHT))
        1
        >>> line.formatted_text()
        'Name      Qty\\n'
    """

    fields: List[TextFieldSpec] = field(default_factory=list)
    num_of_std_lines: int = 1
    new_line: str = "\n"
    turn_line_terminator_off: bool = False

    def add_field(self, text_field: TextFieldSpec) -> int:
        """Append a copy of text_field; returns its index."""
        self._check_field(text_field)
        self.fields.append(text_field.copy())
        return len(self.fields) - 1

    def insert_field(self, text_field: TextFieldSpec, index: int) -> int:
        """Insert a copy at index; an index past the end appends. Returns the final index."""
        self._check_field(text_field)
        if index < 0:
            raise InvalidArgumentError(f"Field index must be >= 0, got {index}")
        if index >= len(self.fields):
            return self.add_field(text_field)
        self.fields.insert(index, text_field.copy())
        return index

    def delete_field(self, index: int) -> None:
        self._check_index(index)
        del self.fields[index]

    def peek_field(self, index: int) -> TextFieldSpec:
        self._check_index(index)
        return self.fields[index].copy()

    def empty_fields(self) -> None:
        self.fields.clear()

    def num_of_fields(self) -> int:
        return len(self.fields)

    def _check_index(self, index: int) -> None:
        if not self.fields:
            raise InvalidArgumentError("Standard line has no text fields")
        if index < 0 or index >= len(self.fields):
            raise InvalidArgumentError(f"Field index {index} is outside 0..{len(self.fields) - 1}")

    @staticmethod
    def _check_field(text_field: TextFieldSpec) -> None:
        if not isinstance(text_field, TextFieldSpec):
            raise TypeError(f"Expected TextFieldSpec, got {type(text_field).__name__}")
        text_field.validate()

    def validate(self) -> None:
        if not self.fields:
            raise InvalidSpecError("Standard line has no text fields")
        for text_field in self.fields:
            text_field.validate()
        _check_count(self.num_of_std_lines, 1, MAX_LINE_COUNT, "Number of standard lines")
        _check_new_line(self.new_line, self.turn_line_terminator_off)

    def _render(self) -> str:
        terminator = "" if self.turn_line_terminator_off else self.new_line
        line = "".join(text_field.formatted_text() for text_field in self.fields) + terminator
        return line * self.num_of_std_lines

    def copy(self) -> "TextLineSpecStandardLine":
        return TextLineSpecStandardLine(
            fields=[text_field.copy() for text_field in self.fields],
            num_of_std_lines=self.num_of_std_lines,
            new_line=self.new_line,
            turn_line_terminator_off=self.turn_line_terminator_off,
        )


_DURATION_UNITS: Final = (
    ("Days", 86_400_000_000),
    ("Hours", 3_600_000_000),
    ("Minutes", 60_000_000),
    ("Seconds", 1_000_000),
    ("Milliseconds", 1_000),
)


def _to_microseconds(delta: timedelta) -> int:
    return (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds


def _duration_strings(total_microseconds: int, max_width: int, total_label: str) -> List[str]:
    """
    Break a duration into units, wrap the units at max_width and append a
    "<total_label>: <microseconds>" line. Leading zero units are omitted.
    """
    separator = IntegerSeparatorSpec.new_united_states()

    parts: List[str] = []
    remaining = total_microseconds
    found_first = False
    for name, size in _DURATION_UNITS:
        count, remaining = divmod(remaining, size)
        if count > 0 or found_first:
            parts.append(f"{separator.apply(str(count))} {name} ")
            found_first = True
    parts.append(f"{separator.apply(str(remaining))} Microseconds")

    wrapped: List[str] = []
    current = ""
    for part in parts:
        if current and len(current) + len(part) >= max_width:
            wrapped.append(current.rstrip())
            current = ""
        current += part
    wrapped.append(current)
    wrapped.append(f"{total_label}: {separator.apply(str(total_microseconds))}")
    return wrapped


@dataclass(slots=True)
class TextLineSpecTimerLines(TextLineSpec):
    """
    Start time, end time and elapsed time as aligned, labelled lines:

        Start Time: 2024-01-01 10:00:00.000000
          End Time: 2024-01-01 10:00:01.500000
      Elapsed Time: 1 Seconds 500 Milliseconds 0 Microseconds
                    Total Elapsed Microseconds: 1,500,000

    label_field_len -1 sizes the label column to the longest label.
    """

    start_time: datetime = field(default_factory=datetime.now)
    end_time: datetime = field(default_factory=datetime.now)
    start_label: str = DEFAULT_START_TIME_LABEL
    end_label: str = DEFAULT_END_TIME_LABEL
    elapsed_label: str = DEFAULT_ELAPSED_TIME_LABEL
    time_format: str = DEFAULT_DATE_TIME_FORMAT
    label_field_len: int = -1
    label_justification: TextJustify = TextJustify.RIGHT
    label_left_margin: str = ""
    label_right_margin: str = DEFAULT_TIMER_LABEL_RIGHT_MARGIN
    new_line: str = "\n"

    def resolved_label_len(self) -> int:
        longest = max(len(self.start_label), len(self.end_label), len(self.elapsed_label))
        return max(longest, self.label_field_len)

    def total_label_len(self) -> int:
        return len(self.label_left_margin) + self.resolved_label_len() + len(self.label_right_margin)

    def validate(self) -> None:
        if not isinstance(self.start_time, datetime) or not isinstance(self.end_time, datetime):
            raise InvalidSpecError("Start and end times must be datetime values")
        if self.end_time < self.start_time:
            raise InvalidSpecError(
                f"End time {self.end_time.isoformat()} occurs before start time {self.start_time.isoformat()}"
            )
        for label in (self.start_label, self.end_label, self.elapsed_label):
            if not isinstance(label, str) or not label:
                raise InvalidSpecError("Timer labels must be non-empty strings")
        if not self.time_format:
            raise InvalidSpecError("Time format is empty")
        if self.label_field_len != -1:
            _check_count(self.label_field_len, 1, MAX_TIMER_LABEL_WIDTH, "Label field length")
        if not isinstance(self.label_justification, TextJustify) or not self.label_justification.is_valid():
            raise InvalidSpecError(f"Invalid label justification: {self.label_justification!r}")
        _check_margin(self.label_left_margin, "Label left margin")
        _check_margin(self.label_right_margin, "Label right margin")
        if self.total_label_len() > MAX_TIMER_LABEL_WIDTH:
            raise InvalidSpecError(
                f"Total label width {self.total_label_len()} exceeds {MAX_TIMER_LABEL_WIDTH}"
            )
        _check_new_line(self.new_line)

    def elapsed_time_strings(self) -> List[str]:
        """Elapsed time broken into units and wrapped to fit beside the label column."""
        return _duration_strings(
            _to_microseconds(self.end_time - self.start_time),
            TIMER_LINE_WIDTH - self.total_label_len(),
            "Total Elapsed Microseconds",
        )

    def _label_line(self, label: str, value: str) -> str:
        label_field = TextFieldSpecLabel(label, self.resolved_label_len(), self.label_justification)
        return f"{self.label_left_margin}{label_field.formatted_text()}{self.label_right_margin}{value}{self.new_line}"

    def _render(self) -> str:
        out = [
            self._label_line(self.start_label, self.start_time.strftime(self.time_format)),
            self._label_line(self.end_label, self.end_time.strftime(self.time_format)),
        ]
        indent = " " * self.total_label_len()
        for i, text in enumerate(self.elapsed_time_strings()):
            if i == 0:
                out.append(self._label_line(self.elapsed_label, text))
            else:
                out.append(f"{indent}{text}{self.new_line}")
        return "".join(out)


class TextLineSpecLinesCollection:
    """Ordered collection of line specs. Stored specs are copies."""

    def __init__(self, line_specs: Optional[Sequence[TextLineSpec]] = None) -> None:
        self._lines: List[TextLineSpec] = []
        for spec in line_specs or []:
            self.add(spec)

    @staticmethod
    def _checked_copy(spec: TextLineSpec) -> TextLineSpec:
        if not isinstance(spec, TextLineSpec):
            raise TypeError(f"Expected TextLineSpec, got {type(spec).__name__}")
        spec.validate()
        return spec.copy()

    def _check_index(self, index: int) -> None:
        if not self._lines:
            raise InvalidArgumentError("Text line collection is empty")
        if index < 0 or index >= len(self._lines):
            raise InvalidArgumentError(f"Line index {index} is outside 0..{len(self._lines) - 1}")

    # --- add / change ---

    def add(self, spec: TextLineSpec) -> int:
        self._lines.append(self._checked_copy(spec))
        return len(self._lines) - 1

    def add_blank_line(self, num_blank_lines: int = 1) -> int:
        return self.add(TextLineSpecBlankLines(num_blank_lines))

    def add_solid_line(
        self, solid_chars: str, repeat_count: int, left_margin: str = "", right_margin: str = ""
    ) -> int:
        return self.add(TextLineSpecSolidLine(solid_chars, repeat_count, left_margin, right_margin))

    def add_plain_text(self, text: str, left_margin: str = "", right_margin: str = "") -> int:
        return self.add(TextLineSpecPlainText(text, left_margin, right_margin))

    def insert(self, spec: TextLineSpec, index: int) -> int:
        """Insert at index; an index past the end appends. Returns the final index."""
        if index < 0:
            raise InvalidArgumentError(f"Line index must be >= 0, got {index}")
        if index >= len(self._lines):
            return self.add(spec)
        self._lines.insert(index, self._checked_copy(spec))
        return index

    def replace(self, spec: TextLineSpec, index: int) -> None:
        self._check_index(index)
        self._lines[index] = self._checked_copy(spec)

    def delete(self, index: int) -> None:
        self._check_index(index)
        del self._lines[index]

    def empty(self) -> None:
        self._lines.clear()

    def extend(self, other: "TextLineSpecLinesCollection") -> None:
        for spec in other:
            self.add(spec)

    # --- peek / pop ---

    def peek_at(self, index: int) -> TextLineSpec:
        self._check_index(index)
        return self._lines[index].copy()

    def peek_first(self) -> TextLineSpec:
        return self.peek_at(0)

    def peek_last(self) -> TextLineSpec:
        return self.peek_at(len(self._lines) - 1)

    def pop_at(self, index: int) -> TextLineSpec:
        self._check_index(index)
        return self._lines.pop(index)

    def pop_first(self) -> TextLineSpec:
        return self.pop_at(0)

    def pop_last(self) -> TextLineSpec:
        return self.pop_at(len(self._lines) - 1)

    # --- output ---

    def formatted_lines(self) -> List[str]:
        """Rendered text of each line spec, in order."""
        return [spec.formatted_text() for spec in self._lines]

    def formatted_text(self) -> str:
        if not self._lines:
            raise InvalidSpecError("Text line collection is empty")
        return "".join(self.formatted_lines())

    def validate(self) -> None:
        for spec in self._lines:
            spec.validate()

    def copy(self) -> "TextLineSpecLinesCollection":
        copied = TextLineSpecLinesCollection()
        copied._lines = [spec.copy() for spec in self._lines]
        return copied

    def equal(self, other: "TextLineSpecLinesCollection") -> bool:
        return len(self) == len(other) and all(a.equal(b) for a, b in zip(self, other))

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[TextLineSpec]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"TextLineSpecLinesCollection({len(self._lines)} lines)"


class TextLineSpecTitleMarquee(TextLineSpec):
    """
    Report title block: leading lines, centred title lines, trailing lines.

    Example:
        >>> m = TextLineSpecTitleMarquee.new_marquee(["Report"], line_len=10, num_leading_blank_lines=0,
        ...     num_trailing_blank_lines=0)
        >>> print(m.formatted_text(), end="")
        ==========
          Report
        ==========
    """

    __slots__ = ("leading_lines", "title_lines", "trailing_lines", "line_len", "left_margin", "right_margin")

    def __init__(
        self,
        leading_lines: Optional[TextLineSpecLinesCollection] = None,
        title_lines: Optional[TextLineSpecLinesCollection] = None,
        trailing_lines: Optional[TextLineSpecLinesCollection] = None,
        line_len: int = 0,
        left_margin: int = 0,
        right_margin: int = 0,
    ) -> None:
        self.leading_lines = leading_lines if leading_lines is not None else TextLineSpecLinesCollection()
        self.title_lines = title_lines if title_lines is not None else TextLineSpecLinesCollection()
        self.trailing_lines = trailing_lines if trailing_lines is not None else TextLineSpecLinesCollection()
        self.line_len = line_len
        self.left_margin = left_margin
        self.right_margin = right_margin

    @staticmethod
    def new_marquee(
        title_lines: Sequence[str],
        line_len: int,
        solid_char: str = "=",
        left_margin: int = 0,
        right_margin: int = 0,
        num_leading_blank_lines: int = 1,
        num_trailing_blank_lines: int = 1,
        num_solid_lines: int = 1,
    ) -> "TextLineSpecTitleMarquee":
        """
        Build a marquee: blank lines, solid lines, centred titles, solid lines, blank lines.

        Raises:
            InvalidArgumentError: if the margins leave no room inside line_len.
        """
        _check_count(left_margin, 0, MAX_FIELD_LENGTH, "Left margin")
        _check_count(right_margin, 0, MAX_FIELD_LENGTH, "Right margin")
        _check_count(num_leading_blank_lines, 0, MAX_LINE_COUNT, "Number of leading blank lines")
        _check_count(num_trailing_blank_lines, 0, MAX_LINE_COUNT, "Number of trailing blank lines")
        _check_count(num_solid_lines, 0, MAX_LINE_COUNT, "Number of solid lines")
        inner_len = line_len - left_margin - right_margin
        if inner_len < 1:
            raise InvalidArgumentError(
                f"Line length {line_len} leaves no room inside margins {left_margin}/{right_margin}"
            )

        marquee = TextLineSpecTitleMarquee(line_len=line_len, left_margin=left_margin, right_margin=right_margin)
        solid = TextLineSpecSolidLine.new_with_margins(solid_char, inner_len, left_margin, right_margin)
        solid.repeat_count = max(1, inner_len // len(solid_char))

        if num_leading_blank_lines:
            marquee.leading_lines.add_blank_line(num_leading_blank_lines)
        for _ in range(num_solid_lines):
            marquee.leading_lines.add(solid)
        for title in title_lines:
            marquee.add_title_line(title)
        for _ in range(num_solid_lines):
            marquee.trailing_lines.add(solid)
        if num_trailing_blank_lines:
            marquee.trailing_lines.add_blank_line(num_trailing_blank_lines)
        return marquee

    def add_title_line(self, title: str) -> int:
        """Append a title centred within the marquee's inner width."""
        inner_len = self.line_len - self.left_margin - self.right_margin
        line = TextLineSpecStandardLine()
        if self.left_margin:
            line.add_field(TextFieldSpecSpacer(self.left_margin))
        line.add_field(TextFieldSpecLabel(title, inner_len, TextJustify.CENTER))
        if self.right_margin:
            line.add_field(TextFieldSpecSpacer(self.right_margin))
        return self.title_lines.add(line)

    def validate(self) -> None:
        if not self.title_lines:
            raise InvalidSpecError("Title marquee has no title lines")
        self.leading_lines.validate()
        self.title_lines.validate()
        self.trailing_lines.validate()

    def _render(self) -> str:
        return "".join(
            collection.formatted_text()
            for collection in (self.leading_lines, self.title_lines, self.trailing_lines)
            if len(collection)
        )

    def copy(self) -> "TextLineSpecTitleMarquee":
        return TextLineSpecTitleMarquee(
            leading_lines=self.leading_lines.copy(),
            title_lines=self.title_lines.copy(),
            trailing_lines=self.trailing_lines.copy(),
            line_len=self.line_len,
            left_margin=self.left_margin,
            right_margin=self.right_margin,
        )

    def equal(self, other: "TextLineSpec") -> bool:
        return (
            isinstance(other, TextLineSpecTitleMarquee)
            and self.leading_lines.equal(other.leading_lines)
            and self.title_lines.equal(other.title_lines)
            and self.trailing_lines.equal(other.trailing_lines)
        )


@dataclass(slots=True)
class TextLineSpecAverageTime(TextLineSpec):
    """
    Accumulates timed events and reports their average duration.

    The full report shows average, maximum and minimum durations; the
    abbreviated report shows the average only. Each section looks like:

        ==============================
          Average Duration
          2024-01-01 12:00:00
            2 Seconds 0 Milliseconds
            0 Microseconds
        ------------------------------
          Total Microseconds: 2,000,000
        ==============================

    report_time None stamps each rendering with the current time.
    """

    num_events: int = 0
    total_duration_us: int = 0
    maximum_duration_us: int = 0
    minimum_duration_us: int = 0
    abbreviated_report: bool = False
    report_time: Optional[datetime] = None
    time_format: str = DEFAULT_DATE_TIME_FORMAT
    line_len: int = AVERAGE_TIME_LINE_WIDTH
    new_line: str = "\n"

    # --- events ---

    def add_duration_event(self, duration: timedelta) -> None:
        if not isinstance(duration, timedelta):
            raise TypeError(f"duration must be timedelta, got {type(duration).__name__}")
        if duration < timedelta(0):
            raise InvalidArgumentError(f"Event duration is negative: {duration}")
        micros = _to_microseconds(duration)
        self.num_events += 1
        self.total_duration_us += micros
        self.maximum_duration_us = max(self.maximum_duration_us, micros)
        if self.num_events == 1:
            self.minimum_duration_us = micros
        else:
            self.minimum_duration_us = min(self.minimum_duration_us, micros)

    def add_start_stop_event(self, start_time: datetime, end_time: datetime) -> None:
        """Record end_time - start_time. Equal times record nothing."""
        if not isinstance(start_time, datetime) or not isinstance(end_time, datetime):
            raise TypeError("start_time and end_time must be datetime values")
        if end_time < start_time:
            raise InvalidArgumentError(
                f"Start time {start_time.isoformat()} occurs after end time {end_time.isoformat()}"
            )
        if end_time == start_time:
            logger.debug("add_start_stop_event: zero duration event ignored")
            return
        self.add_duration_event(end_time - start_time)

    def calc_avg_time_duration(self) -> timedelta:
        """
        Raises:
            InvalidSpecError: if no events have been recorded.
        """
        return self.calc_avg_time_duration_detail()[0]

    def calc_avg_time_duration_detail(self) -> Tuple[timedelta, timedelta, timedelta]:
        """Returns (average, maximum, minimum); the average drops fractional microseconds."""
        self.validate()
        return (
            timedelta(microseconds=self.total_duration_us // self.num_events),
            timedelta(microseconds=self.maximum_duration_us),
            timedelta(microseconds=self.minimum_duration_us),
        )

    # --- report format ---

    def set_full_report_format(self) -> None:
        self.abbreviated_report = False

    def set_abbreviated_report_format(self) -> None:
        self.abbreviated_report = True

    def is_full_report_format(self) -> bool:
        return not self.abbreviated_report

    def set_initialize_timer_to_zero(self) -> None:
        """Discard recorded events; report settings are kept."""
        self.num_events = 0
        self.total_duration_us = 0
        self.maximum_duration_us = 0
        self.minimum_duration_us = 0

    def empty(self) -> None:
        self.set_initialize_timer_to_zero()
        self.abbreviated_report = False
        self.report_time = None

    # --- validation / rendering ---

    def validate(self) -> None:
        for value, label in (
            (self.total_duration_us, "Total duration"),
            (self.maximum_duration_us, "Maximum duration"),
            (self.minimum_duration_us, "Minimum duration"),
        ):
            if not isinstance(value, int) or value < 0:
                raise InvalidSpecError(f"{label} must be a non-negative int, got {value!r}")
        if not isinstance(self.num_events, int) or self.num_events < 1:
            raise InvalidSpecError("No timer events have been recorded")
        if self.minimum_duration_us > self.maximum_duration_us:
            raise InvalidSpecError(
                f"Minimum duration {self.minimum_duration_us} exceeds maximum {self.maximum_duration_us}"
            )
        _check_count(self.line_len, MIN_AVERAGE_TIME_LINE_WIDTH, MAX_FIELD_LENGTH, "Report line length")
        if self.report_time is not None and not isinstance(self.report_time, datetime):
            raise InvalidSpecError("Report time must be a datetime value")
        if not self.time_format:
            raise InvalidSpecError("Time format is empty")
        _check_new_line(self.new_line)

    def _section(self, title: str, duration: timedelta, stamp: str) -> TextLineSpecLinesCollection:
        inner_len = self.line_len - 2
        section = TextLineSpecLinesCollection()
        section.add_blank_line(2)
        section.add_solid_line("=", inner_len, " ")
        for text in (title, stamp):
            line = TextLineSpecStandardLine()
            line.add_field(TextFieldSpecSpacer(2))
            line.add_field(TextFieldSpecLabel(text, inner_len, TextJustify.CENTER))
            section.add(line)
        strings = _duration_strings(_to_microseconds(duration), inner_len - 2, "Total Microseconds")
        for text in strings[:-1]:
            section.add_plain_text(text, "    ")
        section.add_solid_line("-", inner_len, " ")
        total = TextLineSpecStandardLine()
        total.add_field(TextFieldSpecSpacer(2))
        total.add_field(TextFieldSpecLabel(strings[-1], inner_len, TextJustify.CENTER))
        section.add(total)
        section.add_solid_line("=", inner_len, " ")
        section.add_blank_line(2)
        return section

    def _render(self) -> str:
        average, maximum, minimum = self.calc_avg_time_duration_detail()
        stamp = (self.report_time or datetime.now()).strftime(self.time_format)
        sections = [("Average Duration", average)]
        if not self.abbreviated_report:
            sections.extend([("Maximum Duration", maximum), ("Minimum Duration", minimum)])
        text = "".join(self._section(title, duration, stamp).formatted_text() for title, duration in sections)
        return (text + "\n").replace("\n", self.new_line)


__all__ = [
    "AVERAGE_TIME_LINE_WIDTH",
    "TextLineSpec",
    "TextLineSpecAverageTime",
    "TextLineSpecBlankLines",
    "TextLineSpecLinesCollection",
    "TextLineSpecPlainText",
    "TextLineSpecSolidLine",
    "TextLineSpecStandardLine",
    "TextLineSpecTimerLines",
    "TextLineSpecTitleMarquee",
]

"""
text

Спецификации текстовых полей и строк для построения текстовых отчётов.

Public API:
    - Поля: TextFieldSpecLabel, TextFieldSpecSpacer, TextFieldSpecFiller, TextFieldSpecDateTime
    - Строки: TextLineSpecBlankLines, TextLineSpecSolidLine, TextLineSpecPlainText,
      TextLineSpecStandardLine, TextLineSpecTimerLines, TextLineSpecAverageTime
    - Коллекции: TextLineSpecLinesCollection, TextLineSpecTitleMarquee
"""

from .fields import (
    TextFieldSpec,
    TextFieldSpecDateTime,
    TextFieldSpecFiller,
    TextFieldSpecLabel,
    TextFieldSpecSpacer,
)
from .lines import (
    TextLineSpec,
    TextLineSpecAverageTime,
    TextLineSpecBlankLines,
    TextLineSpecLinesCollection,
    TextLineSpecPlainText,
    TextLineSpecSolidLine,
    TextLineSpecStandardLine,
    TextLineSpecTimerLines,
    TextLineSpecTitleMarquee,
)

__all__ = [
    "TextFieldSpec",
    "TextFieldSpecDateTime",
    "TextFieldSpecFiller",
    "TextFieldSpecLabel",
    "TextFieldSpecSpacer",
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

"""Report column layouts

A ``ReportSchema`` is an ordered list of columns, each a header plus a
function extracting the cell text from a ``CombinedRecord``. The two
layouts differ only in their columns, the tested-file fields they
require, and their default output file name.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from ..utils.exceptions import ValidationError
from .models import CombinedRecord


TESTED_STYLES: Dict[str, Dict[bool, str]] = {
    "word": {True: "true", False: "false"},
    "glyph": {True: "✅", False: "❌"},
}


@dataclass(frozen=True)
class Column:
    header: str
    extract: Callable[[CombinedRecord], str]


@dataclass(frozen=True)
class ReportSchema:
    name: str
    output_name: str
    extended: bool
    columns: List[Column]

    @property
    def headers(self) -> List[str]:
        return [column.header for column in self.columns]

    def cells(self, record: CombinedRecord) -> List[str]:
        return [column.extract(record) for column in self.columns]


def format_tags(tags: List[str]) -> str:
    return ", ".join(tags)


def _base_columns(tested_style: str) -> List[Column]:
    labels = TESTED_STYLES[tested_style]
    return [
        Column("tested", lambda r: labels[r.tested.tested]),
        Column("name", lambda r: r.challenge.name),
        Column("author", lambda r: r.challenge.author),
        Column("category", lambda r: r.challenge.category),
        Column("tags", lambda r: format_tags(r.challenge.tags)),
    ]


def _minimal(tested_style: str) -> ReportSchema:
    return ReportSchema(
        name="minimal",
        output_name="README.md",
        extended=False,
        columns=_base_columns(tested_style),
    )


def _extended(tested_style: str) -> ReportSchema:
    # solver is parsed for validation but has no column
    columns = _base_columns(tested_style) + [
        Column("tester", lambda r: r.tested.tester or ""),
        Column("tested_url", lambda r: r.tested.tested_url or ""),
    ]
    return ReportSchema(
        name="extended",
        output_name="TESTED.md",
        extended=True,
        columns=columns,
    )


VARIANTS: Dict[str, Callable[[str], ReportSchema]] = {
    "minimal": _minimal,
    "extended": _extended,
}


def get_schema(variant: str = "minimal", tested_style: str = "word") -> ReportSchema:
    """
    Look up a report layout

    Args:
        variant: 'minimal' or 'extended'
        tested_style: 'word' (true/false) or 'glyph' (✅/❌)

    Raises:
        ValidationError: Unknown variant or style
    """
    if variant not in VARIANTS:
        raise ValidationError(
            f"Unknown report variant '{variant}' (expected one of: {', '.join(VARIANTS)})"
        )
    if tested_style not in TESTED_STYLES:
        raise ValidationError(
            f"Unknown tested style '{tested_style}' (expected one of: {', '.join(TESTED_STYLES)})"
        )
    return VARIANTS[variant](tested_style)

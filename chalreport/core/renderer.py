"""Markdown report rendering"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from tabulate import tabulate

from ..utils.config import Config
from ..utils.exceptions import ReportWriteError, ValidationError
from ..utils.logger import logger
from .loader import try_load_record
from .models import CombinedRecord
from .scanner import scan
from .schema import ReportSchema, get_schema


@dataclass
class ReportConfig:
    """Resolved options for one report run"""
    challenge_file: str = field(default_factory=Config.get_challenge_file)
    tested_file: str = field(default_factory=Config.get_tested_file)
    dir_path: str = Config.DIR_PATH
    output_path: str = Config.OUTPUT_PATH
    output_name: Optional[str] = None
    variant: str = Config.DEFAULT_VARIANT
    tested_style: str = Config.DEFAULT_TESTED_STYLE
    max_depth: Optional[int] = None

    @property
    def schema(self) -> ReportSchema:
        return get_schema(self.variant, self.tested_style)

    @property
    def output_file(self) -> Path:
        return Path(self.output_path) / (self.output_name or self.schema.output_name)

    def validate(self) -> None:
        """Raise ValidationError for options that can never produce a report"""
        if self.max_depth is not None and self.max_depth < 0:
            raise ValidationError(f"max_depth must be >= 0, got {self.max_depth}")
        if not self.challenge_file or not self.tested_file:
            raise ValidationError("Challenge and tested file names must not be empty")


def _escape(cell: str) -> str:
    return cell.replace("|", "\\|").replace("\n", " ")


def format_row(cells: List[str]) -> str:
    """Format cells as one pipe-delimited markdown row"""
    return "| " + " | ".join(_escape(cell) for cell in cells) + " |"


def format_header(schema: ReportSchema) -> List[str]:
    """Column-name row and separator row for ``schema``"""
    separator = "|" + "|".join("-" * (len(h) + 2) for h in schema.headers) + "|"
    return [format_row(schema.headers), separator]


def iter_records(config: ReportConfig) -> Iterator[CombinedRecord]:
    """Yield a record for every scanned entry that loads, in scan order"""
    extended = config.schema.extended
    for entry in scan(config.dir_path, max_depth=config.max_depth):
        record = try_load_record(
            entry,
            challenge_file=config.challenge_file,
            tested_file=config.tested_file,
            extended=extended,
        )
        if record is not None:
            yield record


def render_table(records: Iterable[CombinedRecord], schema: ReportSchema) -> str:
    """Render the full markdown table in memory"""
    lines = format_header(schema)
    lines.extend(format_row(schema.cells(record)) for record in records)
    return "\n".join(lines) + "\n"


def render_json(records: Iterable[CombinedRecord]) -> str:
    """Render records as a JSON list, one object per challenge"""
    return json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)


def render_preview(
    records: Iterable[CombinedRecord],
    schema: ReportSchema,
    tablefmt: str = Config.PREVIEW_TABLEFMT,
) -> str:
    """Render records as a terminal table"""
    rows = [schema.cells(record) for record in records]
    return tabulate(rows, headers=schema.headers, tablefmt=tablefmt, disable_numparse=True)


def write_report(config: ReportConfig) -> Path:
    """
    Scan ``config.dir_path`` and write the markdown table to ``config.output_file``

    The output file is truncated before scanning starts and rows are
    written as each record loads. A write failure leaves whatever was
    already written on disk.

    Returns:
        Path of the written report

    Raises:
        ValidationError: Invalid configuration
        ReportWriteError: Output file could not be created or written
    """
    config.validate()
    if not Path(config.dir_path).is_dir():
        logger.warning(f"Directory not found, writing an empty report: {config.dir_path}")
    schema = config.schema
    output_file = config.output_file

    try:
        f = open(output_file, "w", encoding="utf-8", newline="\n")
    except OSError as e:
        raise ReportWriteError(f"Cannot create {output_file}: {e}") from e

    rows = 0
    try:
        with f:
            for line in format_header(schema):
                f.write(line + "\n")
            for record in iter_records(config):
                f.write(format_row(schema.cells(record)) + "\n")
                rows += 1
    except OSError as e:
        raise ReportWriteError(f"Failed writing {output_file}: {e}") from e

    logger.info(f"Wrote {rows} challenge(s) to {output_file}")
    return output_file

"""Public API for chalreport"""

from pathlib import Path
from typing import List, Optional

from .core.models import CombinedRecord
from .core.renderer import ReportConfig, iter_records, render_json, render_preview, write_report
from .utils.config import Config


def _build_config(
    dir_path: str,
    challenge_file: Optional[str],
    tested_file: Optional[str],
    variant: str,
    tested_style: str,
    max_depth: Optional[int],
    output_path: str = Config.OUTPUT_PATH,
    output_name: Optional[str] = None,
) -> ReportConfig:
    return ReportConfig(
        challenge_file=challenge_file or Config.get_challenge_file(),
        tested_file=tested_file or Config.get_tested_file(),
        dir_path=dir_path,
        output_path=output_path,
        output_name=output_name,
        variant=variant,
        tested_style=tested_style,
        max_depth=max_depth,
    )


def generate_report(
    dir_path: str = Config.DIR_PATH,
    output_path: str = Config.OUTPUT_PATH,
    output_name: Optional[str] = None,
    challenge_file: Optional[str] = None,
    tested_file: Optional[str] = None,
    variant: str = Config.DEFAULT_VARIANT,
    tested_style: str = Config.DEFAULT_TESTED_STYLE,
    max_depth: Optional[int] = None,
) -> Path:
    """
    Scan ``dir_path`` and write the challenge table

    Args:
        dir_path: Root of the challenge tree
        output_path: Directory to write the report into
        output_name: Report file name (default: README.md or TESTED.md by variant)
        challenge_file: Challenge metadata file name (default: challenge.yml)
        tested_file: Tested-status file name (default: tested.yml)
        variant: 'minimal' or 'extended'
        tested_style: 'word' or 'glyph'
        max_depth: Scan depth limit, or None for unlimited

    Returns:
        Path of the written report

    Raises:
        ValidationError: Invalid options
        ReportWriteError: Report could not be written
    """
    config = _build_config(
        dir_path, challenge_file, tested_file, variant, tested_style, max_depth,
        output_path=output_path, output_name=output_name,
    )
    return write_report(config)


def collect_records(
    dir_path: str = Config.DIR_PATH,
    challenge_file: Optional[str] = None,
    tested_file: Optional[str] = None,
    variant: str = Config.DEFAULT_VARIANT,
    max_depth: Optional[int] = None,
) -> List[CombinedRecord]:
    """Load every valid challenge under ``dir_path`` in scan order"""
    config = _build_config(
        dir_path, challenge_file, tested_file, variant,
        Config.DEFAULT_TESTED_STYLE, max_depth,
    )
    config.validate()
    return list(iter_records(config))


def preview_report(
    dir_path: str = Config.DIR_PATH,
    challenge_file: Optional[str] = None,
    tested_file: Optional[str] = None,
    variant: str = Config.DEFAULT_VARIANT,
    tested_style: str = Config.DEFAULT_TESTED_STYLE,
    max_depth: Optional[int] = None,
    tablefmt: str = Config.PREVIEW_TABLEFMT,
) -> str:
    """
    Render the challenge table for the terminal without writing a file

    ``tablefmt`` is any tabulate format, or 'json' for the full
    records (including solver) as a JSON list.
    """
    config = _build_config(
        dir_path, challenge_file, tested_file, variant, tested_style, max_depth,
    )
    config.validate()
    if tablefmt == "json":
        return render_json(iter_records(config))
    return render_preview(iter_records(config), config.schema, tablefmt=tablefmt)

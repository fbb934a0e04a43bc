"""CLI command implementations"""

from typing import Optional

from ..api import generate_report, preview_report
from ..utils.logger import logger


def build_report(
    dir_path: str,
    output_path: str,
    output_name: Optional[str],
    challenge_file: str,
    tested_file: str,
    variant: str,
    tested_style: str,
    max_depth: Optional[int],
) -> None:
    """Write the challenge table into ``output_path``"""
    logger.debug(
        f"Scanning '{dir_path}' for '{challenge_file}' + '{tested_file}' "
        f"({variant} layout)"
    )

    report = generate_report(
        dir_path=dir_path,
        output_path=output_path,
        output_name=output_name,
        challenge_file=challenge_file,
        tested_file=tested_file,
        variant=variant,
        tested_style=tested_style,
        max_depth=max_depth,
    )

    logger.info(f"✓ Report written: {report}")


def show_report(
    dir_path: str,
    challenge_file: str,
    tested_file: str,
    variant: str,
    tested_style: str,
    max_depth: Optional[int],
    tablefmt: str,
) -> None:
    """Print the challenge table to stdout instead of writing a file"""
    table = preview_report(
        dir_path=dir_path,
        challenge_file=challenge_file,
        tested_file=tested_file,
        variant=variant,
        tested_style=tested_style,
        max_depth=max_depth,
        tablefmt=tablefmt,
    )
    print(table)

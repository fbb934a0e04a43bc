"""Per-entry loading of challenge and tested files"""

from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..utils.exceptions import RecordError, RecordNotFoundError, RecordParseError
from ..utils.logger import logger
from .models import Challenge, CombinedRecord, TestedStatus


def read_yaml(path: Path) -> Any:
    """
    Read and parse one YAML file

    Raises:
        RecordNotFoundError: File does not exist or is not a regular file
        RecordParseError: File is not valid YAML or cannot be decoded
    """
    if not path.is_file():
        raise RecordNotFoundError(path, "file not found")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except FileNotFoundError as e:
        raise RecordNotFoundError(path, str(e)) from e
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise RecordParseError(path, f"invalid YAML: {e}") from e
    except OSError as e:
        raise RecordParseError(path, f"cannot read file: {e}") from e


def load_record(
    entry: Union[str, Path],
    challenge_file: str = "challenge.yml",
    tested_file: str = "tested.yml",
    extended: bool = False,
) -> CombinedRecord:
    """
    Build the combined record for one scanned entry

    Args:
        entry: Candidate challenge directory
        challenge_file: Name of the challenge metadata file inside ``entry``
        tested_file: Name of the tested-status file inside ``entry``
        extended: Require the extended tested fields (tester, solver, tested_url)

    Returns:
        CombinedRecord for the entry

    Raises:
        RecordNotFoundError: Either file is missing
        RecordParseError: Either file is malformed or lacks a required field
    """
    entry = Path(entry)
    challenge_path = entry / challenge_file
    tested_path = entry / tested_file

    challenge = Challenge.from_dict(read_yaml(challenge_path), challenge_path)
    tested = TestedStatus.from_dict(read_yaml(tested_path), tested_path, extended=extended)

    return CombinedRecord(challenge=challenge, tested=tested, path=entry)


def try_load_record(
    entry: Union[str, Path],
    challenge_file: str = "challenge.yml",
    tested_file: str = "tested.yml",
    extended: bool = False,
) -> Optional[CombinedRecord]:
    """Like ``load_record`` but returns None for entries that are not challenges"""
    try:
        return load_record(entry, challenge_file, tested_file, extended=extended)
    except RecordError as e:
        logger.debug(f"Skipping {entry}: {e}")
        return None

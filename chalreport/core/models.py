"""Challenge metadata models.

These are plain frozen dataclasses. ``from_dict`` performs the minimal
shape checks the report needs and raises ``RecordParseError`` on any
missing key or wrong type; unknown keys are ignored because
``challenge.yml`` is usually a full ctfcli challenge spec.
"""

import datetime
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..utils.exceptions import RecordParseError


def _require(data: Dict[str, Any], key: str, kind: type, path: Path) -> Any:
    if key not in data:
        raise RecordParseError(path, f"missing required key '{key}'")
    value = data[key]
    if not isinstance(value, kind):
        raise RecordParseError(
            path,
            f"key '{key}' must be {kind.__name__}, got {type(value).__name__}",
        )
    return value


def _require_text(data: Dict[str, Any], key: str, path: Path) -> str:
    if key not in data:
        raise RecordParseError(path, f"missing required key '{key}'")
    return _scalar_text(data[key], f"key '{key}'", path)


def _scalar_text(value: Any, what: str, path: Path) -> str:
    # Plain YAML scalars (2048, 1.5, 2023-01-01) are text for display
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, datetime.date)):
        return str(value)
    raise RecordParseError(
        path, f"{what} must be a scalar, got {type(value).__name__}"
    )


def _require_mapping(data: Any, path: Path) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise RecordParseError(path, "document is not a mapping")
    return data


@dataclass(frozen=True)
class Challenge:
    """Descriptive metadata for one challenge."""
    name: str
    author: str
    category: str
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, path: Path) -> "Challenge":
        data = _require_mapping(data, path)
        tags = _require(data, "tags", list, path)
        return cls(
            name=_require_text(data, "name", path),
            author=_require_text(data, "author", path),
            category=_require_text(data, "category", path),
            tags=[_scalar_text(tag, f"tag {tag!r}", path) for tag in tags],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "author": self.author,
            "category": self.category,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class TestedStatus:
    """Verification metadata for one challenge.

    The minimal variant only carries ``tested``; the extended variant
    also requires ``tester``, ``solver`` and ``tested_url``.
    """
    __test__ = False  # not a pytest test class

    tested: bool
    tester: Optional[str] = None
    solver: Optional[str] = None
    tested_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: Path, extended: bool = False) -> "TestedStatus":
        data = _require_mapping(data, path)
        tested = _require(data, "tested", bool, path)
        if not extended:
            return cls(tested=tested)
        return cls(
            tested=tested,
            tester=_require(data, "tester", str, path),
            solver=_require(data, "solver", str, path),
            tested_url=_require(data, "tested_url", str, path),
        )

    @property
    def extended(self) -> bool:
        return self.tester is not None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"tested": self.tested}
        if self.extended:
            result.update(
                tester=self.tester,
                solver=self.solver,
                tested_url=self.tested_url,
            )
        return result


@dataclass(frozen=True)
class CombinedRecord:
    """One reportable row: a challenge paired with its tested status."""
    challenge: Challenge
    tested: TestedStatus
    path: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": str(self.path) if self.path is not None else None,
            "challenge": self.challenge.to_dict(),
            "tested": self.tested.to_dict(),
        }

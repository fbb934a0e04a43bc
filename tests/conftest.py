"""Shared fixtures for building challenge trees on disk"""

from pathlib import Path
from typing import Optional

import pytest
import yaml


def write_yaml(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def make_challenge(tmp_path):
    """Create ``<tmp_path>/<rel>`` with challenge.yml and/or tested.yml"""

    def _make(
        rel: str,
        challenge: Optional[dict] = None,
        tested: Optional[dict] = None,
        challenge_file: str = "challenge.yml",
        tested_file: str = "tested.yml",
    ) -> Path:
        directory = tmp_path / rel
        directory.mkdir(parents=True, exist_ok=True)
        if challenge is not None:
            write_yaml(directory / challenge_file, challenge)
        if tested is not None:
            write_yaml(directory / tested_file, tested)
        return directory

    return _make


@pytest.fixture
def chal_tree(tmp_path, make_challenge):
    """chal_a is a complete challenge, chal_b has no challenge.yml"""
    make_challenge(
        "chal_a",
        challenge={"name": "A", "author": "X", "category": "web", "tags": ["a", "b"]},
        tested={"tested": True},
    )
    make_challenge("chal_b", tested={"tested": False})
    return tmp_path

"""
chalreport: challenge table generator for CTF challenge repositories

Walks a directory of challenge folders, reads each folder's
``challenge.yml`` and ``tested.yml``, and writes a markdown table
summarizing every challenge found.

Basic Usage:
    >>> from chalreport import generate_report
    >>> generate_report("challenges/", output_path="challenges/")
    PosixPath('challenges/README.md')

    # Extended layout with tester and tested URL columns
    >>> generate_report("challenges/", variant="extended", tested_style="glyph")
    PosixPath('TESTED.md')

    # Iterate records without writing anything
    >>> for record in collect_records("challenges/"):
    ...     print(record.challenge.name, record.tested.tested)
"""

from .__version__ import __version__


_LAZY_EXPORTS = {
    "generate_report",
    "collect_records",
    "preview_report",
}


def __getattr__(name: str):
    if name in _LAZY_EXPORTS:
        from . import api as _api
        return getattr(_api, name)
    raise AttributeError(f"module 'chalreport' has no attribute {name!r}")


__all__ = ["__version__", *_LAZY_EXPORTS]

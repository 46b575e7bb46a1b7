"""
pedigree_builder: survey fact records -> renderer-ready family pedigree.

NOTE:
- Keep this module import-safe; logging is configured on first use of a
  submodule, not on ``import pedigree_builder``.
"""

from __future__ import annotations

from typing import Iterable, Tuple

__version__ = "1.0.0"


def build_pedigree(records: Iterable) -> Tuple[str, bool]:
    from .family.builder import build_pedigree as _fn
    return _fn(records)


__all__ = [
    "__version__",
    "build_pedigree",
]

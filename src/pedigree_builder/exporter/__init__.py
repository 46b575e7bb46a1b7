"""
Exporter package.

Re-exports the pedigree text writer and the file/JSON export helpers.
"""

from __future__ import annotations

from .exporter import write_pedigree
from .json_exporter import export_family_json, family_to_dict
from .pedigree_writer import HEADER, build_label, label_field, serialize_family

__all__ = [
    "HEADER",
    "build_label",
    "export_family_json",
    "family_to_dict",
    "label_field",
    "serialize_family",
    "write_pedigree",
]

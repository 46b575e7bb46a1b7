# src/pedigree_builder/records/__init__.py

"""
Fact-record model and loaders.

    from pedigree_builder.records import FactRecord, load_fact_records
"""

from __future__ import annotations

from .fact_record import CancerFact, FactRecord
from .loader import load_fact_records, sort_fact_records

__all__ = [
    "CancerFact",
    "FactRecord",
    "load_fact_records",
    "sort_fact_records",
]

"""
json_exporter.py
Structured JSON view of a finalized Family.

The pedigree text is what the renderer consumes; this view exists for
inspection and debugging. It:
- converts dataclasses and enums to plain JSON values
- keeps members in emission order
- includes each member's rendered label
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from pedigree_builder.exporter.pedigree_writer import build_label, quadrant_flags
from pedigree_builder.family.entities import Family
from pedigree_builder.logger import get_logger

log = get_logger(__name__)


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Enums → their value
    - Primitives pass through
    - dataclasses → dict (recursively)
    - dict → dict (recursively)
    - list / tuple / set → list (recursively)
    - Anything else → str(obj)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(_to_json_compatible(k)): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def family_to_dict(family: Family) -> Dict[str, Any]:
    members = []
    for member in family.members:
        data = _to_json_compatible(member)
        # Drop types that were never reported
        data["cancers"] = {
            key: history
            for key, history in data["cancers"].items()
            if history["value"] is not None or history["multiple"] is not None
        }
        data["label"] = build_label(member)
        data["quadrants"] = quadrant_flags(member)
        members.append(data)

    return {
        "count": len(members),
        "has_multiple_cancers": family.has_multiple_cancers(),
        "members": members,
    }


def serialize_family_to_json_string(family: Family, indent: int = 2) -> str:
    return json.dumps(family_to_dict(family), indent=indent, ensure_ascii=False)


def export_family_json(family: Family, output_path: str | Path, indent: int = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info("Exporting family JSON to: %s (members=%d)", output_path, len(family))

    with output_path.open("w", encoding="utf-8") as f:
        f.write(serialize_family_to_json_string(family, indent=indent))

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)

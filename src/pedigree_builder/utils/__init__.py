# src/pedigree_builder/utils/__init__.py

from .pathing import (
    project_root,
    resolve_project_path,
    tests_data_path,
)

__all__ = [
    "project_root",
    "resolve_project_path",
    "tests_data_path",
]

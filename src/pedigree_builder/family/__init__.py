"""
Family model: roles, accumulated people and the finalized pedigree members.

Builders and the assigner are imported from their modules directly:

    from pedigree_builder.family.builder import build_pedigree
"""

from __future__ import annotations

from .entities import CancerHistory, Family, FamilyMember, Household
from .roles import Role, RouteResult, route_step

__all__ = [
    "CancerHistory",
    "Family",
    "FamilyMember",
    "Household",
    "Role",
    "RouteResult",
    "route_step",
]

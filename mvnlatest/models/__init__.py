"""
Unified data model exports for mvnlatest.

This module re-exports all core data models to provide a stable and
convenient public API. Users can import models directly from
``mvnlatest.models`` instead of individual submodules.

Example:
    >>> from mvnlatest.models import Coordinate, Qualifier, Outcome
"""

from __future__ import annotations

from mvnlatest.models.qualifier import Qualifier, Restrictiveness
from mvnlatest.models.coordinate import Coordinate, ResolutionRequest
from mvnlatest.models.result import Outcome, ResolutionResult

__all__ = [
    "Coordinate",
    "Outcome",
    "Qualifier",
    "ResolutionRequest",
    "ResolutionResult",
    "Restrictiveness",
]

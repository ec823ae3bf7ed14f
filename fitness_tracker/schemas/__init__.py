"""
Pydantic Schemas
Read-only snapshots of computed values, ready for serialization.
"""

from fitness_tracker.schemas.metrics import MealTotals, UserMetrics

__all__ = ["MealTotals", "UserMetrics"]

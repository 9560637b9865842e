"""
Deal-aware weekly meal planner.

Builds weekly meal plans from a recipe catalog and current grocery deals,
with a per-store shopping list and a savings summary.
"""

__version__ = "0.1.0"

"""
Pool state snapshots.
"""

from .pool import RexPoolState

__all__ = ["RexPoolState"]

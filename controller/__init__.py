"""
Elevator Controller

This package provides the Decision procedure that starts an idle
elevator moving.
"""

__version__ = "0.1.0"

from .interfaces.decision_strategy import IDecisionStrategy
from .algorithms.home_floor_decision import HomeFloorDecision

__all__ = ['IDecisionStrategy', 'HomeFloorDecision']

"""
Elevator System Analyzer

This package provides statistical analysis and reporting tools
for elevator system performance data.

Components:
- Statistics: Trace-based data collection (trajectory, doors, event log)
- SimulationStatistics: Simulation-only metrics with "God's view"
"""

__version__ = "0.1.0"

from .statistics import Statistics
from .simulation_statistics import SimulationStatistics

__all__ = ['Statistics', 'SimulationStatistics']

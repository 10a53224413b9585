"""
Simulator Tests

Tests for the simulation core including:
- Agenda ordering and scheduling handles
- Elevator steps E1-E9 and user steps U1-U6
- Whole-run scenarios
"""

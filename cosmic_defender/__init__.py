"""
cosmic_defender
---------------
Arcade shooter: a ship slides along the bottom edge, fires upward and
survives falling enemies for as long as possible.
"""

__version__ = "1.0.0"

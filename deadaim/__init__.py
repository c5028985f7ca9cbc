"""
DeadAim - a terminal grid-shooter.
"""

__version__ = "0.1.0"

"""
Gameplay systems for DeadAim.
NO UI DEPENDENCIES.
"""

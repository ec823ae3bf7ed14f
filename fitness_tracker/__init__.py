"""
Fitness Tracker
Personal fitness data model: profiles, body tracking, workouts and meals.
"""

__version__ = "1.0.0"

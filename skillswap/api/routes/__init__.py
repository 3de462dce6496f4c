"""
API routes package.
"""

from . import exchanges, feedback, health, root, saved_skills, skills, users

__all__ = [
    "exchanges",
    "feedback",
    "health",
    "root",
    "saved_skills",
    "skills",
    "users",
]

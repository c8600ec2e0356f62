"""
Pilot passport Pydantic models package.

Entity models shared by the services and store layers.
"""

from .airport import AirportModel

__all__ = [
    "AirportModel",
]

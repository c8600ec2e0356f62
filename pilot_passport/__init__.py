"""
Pilot Passport: a log of visited airports.

Each entry records a 4-character airport identifier, the city it serves,
when it was visited and a 1-5 rating. Every add and edit is validated
before it reaches the store, and duplicate identifiers are rejected.
"""

__version__ = "0.1.0"

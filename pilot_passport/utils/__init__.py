"""Configuration and logging helpers for the pilot passport."""

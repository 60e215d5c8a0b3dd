"""Shared infrastructure for cetkaik callers."""

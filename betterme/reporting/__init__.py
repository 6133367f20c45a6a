"""Presentation helpers and export sinks for scored entries."""

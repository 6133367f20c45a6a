"""Scoring, aggregation, and pipeline orchestration for the daily log."""

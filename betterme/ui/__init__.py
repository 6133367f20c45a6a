"""Streamlit user interface for the dashboard."""

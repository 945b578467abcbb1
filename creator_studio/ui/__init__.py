"""Streamlit UI components for both studio apps.

Each module inside `ui` focuses purely on presentation / user interaction
logic, delegating model calls and state changes to the `helpers` package.
"""

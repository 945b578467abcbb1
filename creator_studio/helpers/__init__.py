"""Common helper utilities used across the Streamlit app.

The helpers package holds the business-logic flows that UI layers (Streamlit)
call: activity logging, report exports and storybook page generation.
"""

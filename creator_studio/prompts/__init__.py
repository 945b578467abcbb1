"""Centralized model prompts for both studio apps.

Available modules:
- topic_analysis: YouTube market report and niche refresh prompts + schemas
- storybook: style analysis prompt and illustration prompt phrases
"""

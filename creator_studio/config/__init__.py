"""Configuration loader helpers."""

from .settings import SETTINGS, StudioSettings, update_from_kwargs  # noqa: F401

__all__ = ["SETTINGS", "StudioSettings", "update_from_kwargs"]

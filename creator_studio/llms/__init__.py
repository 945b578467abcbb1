from .base import (  # noqa: F401
    ImageData,
    LLMClient,
    get_client,
    get_default_client,
    get_image_client,
)

__all__ = [
    "ImageData",
    "LLMClient",
    "get_client",
    "get_default_client",
    "get_image_client",
]

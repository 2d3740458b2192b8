"""Definition loaders for target stores."""

from .base import BaseDefinitionLoader, LoadResult
from .shopify_loader import ShopifyDefinitionLoader

__all__ = [
    "BaseDefinitionLoader",
    "LoadResult",
    "ShopifyDefinitionLoader",
]

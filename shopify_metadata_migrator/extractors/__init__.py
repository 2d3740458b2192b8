"""Definition extractors for source stores."""

from .base import BaseDefinitionExtractor, ExtractionResult
from .shopify_extractor import ShopifyDefinitionExtractor

__all__ = [
    "BaseDefinitionExtractor",
    "ExtractionResult",
    "ShopifyDefinitionExtractor",
]

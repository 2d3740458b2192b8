"""Base extractor interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List
import logging

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """Result of fetching one page of definitions from the source store."""
    entity: str
    records: List[Any] = field(default_factory=list)
    has_more: bool = False

    @property
    def total_extracted(self) -> int:
        return len(self.records)


class BaseDefinitionExtractor(ABC):
    """
    Base class for definition extractors.

    Extractors read definitions from a source store and return them as
    input models ready to be replayed on a target.
    """

    @abstractmethod
    def extract_metaobject_definitions(self) -> ExtractionResult:
        """
        Fetch metaobject definitions.

        Returns:
            ExtractionResult whose records are MetaobjectDefinitionInput
        """
        pass

    @abstractmethod
    def extract_metafield_definitions(self, owner_type: str) -> ExtractionResult:
        """
        Fetch metafield definitions for one owner type.

        Args:
            owner_type: MetafieldOwnerType token, e.g. ``PRODUCT``

        Returns:
            ExtractionResult whose records are MetafieldDefinitionInput
        """
        pass

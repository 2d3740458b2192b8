"""Base loader interface for target stores."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from ..models.definition import MetafieldDefinitionInput, MetaobjectDefinitionInput

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Result of submitting one definition to the target."""
    name: str
    success: bool = False
    user_errors: List[Dict[str, Any]] = field(default_factory=list)
    dry_run: bool = False


class BaseDefinitionLoader(ABC):
    """
    Base class for definition loaders.

    A loader submits one create mutation per definition and interprets the
    payload. Business rejections come back as an unsuccessful LoadResult;
    transport and protocol failures propagate to the caller.
    """

    def __init__(self, dry_run: bool = False):
        """
        Initialize the loader.

        Args:
            dry_run: If True, simulate without making changes
        """
        self.dry_run = dry_run

    @abstractmethod
    def create_metaobject_definition(self, definition: MetaobjectDefinitionInput) -> LoadResult:
        pass

    @abstractmethod
    def create_metafield_definition(self, definition: MetafieldDefinitionInput) -> LoadResult:
        pass

    @staticmethod
    def interpret_payload(name: str, payload: Optional[Dict[str, Any]]) -> LoadResult:
        """Turn a mutation payload into a LoadResult based on its userErrors."""
        user_errors = (payload or {}).get("userErrors") or []
        return LoadResult(
            name=name,
            success=not user_errors,
            user_errors=list(user_errors),
        )

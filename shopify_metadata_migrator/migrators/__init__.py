"""Definition migrators."""

from .base import BaseDefinitionMigrator
from .metaobject_migrator import MetaobjectDefinitionMigrator
from .metafield_migrator import MetafieldDefinitionMigrator

__all__ = [
    "BaseDefinitionMigrator",
    "MetaobjectDefinitionMigrator",
    "MetafieldDefinitionMigrator",
]

"""Data models for the metadata migrator."""

from .definition import (
    ValidationInput,
    FieldDefinitionInput,
    MetaobjectDefinitionInput,
    MetafieldDefinitionInput,
)
from .migration import (
    ConfigurationError,
    LogLevel,
    MigrationConfig,
    MigrationStatus,
)
from .summary import (
    CategorySummary,
    ErrorRecord,
    OutcomeRecord,
    OutcomeStatus,
    RunSummary,
)

__all__ = [
    "ValidationInput",
    "FieldDefinitionInput",
    "MetaobjectDefinitionInput",
    "MetafieldDefinitionInput",
    "ConfigurationError",
    "LogLevel",
    "MigrationConfig",
    "MigrationStatus",
    "CategorySummary",
    "ErrorRecord",
    "OutcomeRecord",
    "OutcomeStatus",
    "RunSummary",
]

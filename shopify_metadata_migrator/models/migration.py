"""Migration run configuration models."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


DEFAULT_API_VERSION = "2025-07"
PAGE_SIZE = 250

VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")


class ConfigurationError(ValueError):
    """Raised when the run configuration is incomplete."""


class MigrationStatus(str, Enum):
    """Status of a migration run."""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class LogLevel(str, Enum):
    """Console verbosity selected on the command line."""
    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"
    DEBUG = "debug"

    @property
    def logging_level(self) -> int:
        return {
            LogLevel.QUIET: logging.CRITICAL,
            LogLevel.NORMAL: logging.INFO,
            LogLevel.VERBOSE: VERBOSE,
            LogLevel.DEBUG: logging.DEBUG,
        }[self]

    @classmethod
    def resolve(cls, quiet: bool = False, verbose: bool = False, debug: bool = False) -> "LogLevel":
        """Pick a level from flags (debug > verbose > quiet > normal)."""
        if debug:
            return cls.DEBUG
        if verbose:
            return cls.VERBOSE
        if quiet:
            return cls.QUIET
        return cls.NORMAL


def normalize_store(store: str) -> str:
    """Reduce a store URL or domain to its bare ``<handle>`` form."""
    store = store.strip()
    for prefix in ("https://", "http://"):
        if store.startswith(prefix):
            store = store[len(prefix):]
    store = store.rstrip("/")
    if store.endswith(".myshopify.com"):
        store = store[:-len(".myshopify.com")]
    return store


def parse_owner_types(value: Optional[str]) -> List[str]:
    """Split a comma separated owner type list, keeping order."""
    if not value:
        return []
    return [token.strip() for token in value.split(",") if token.strip()]


@dataclass
class MigrationConfig:
    """Configuration for a migration run."""
    source_store: str
    source_token: str
    target_store: str
    target_token: str

    migrate_metaobjects: bool = False
    migrate_metafields: bool = False
    owner_types: List[str] = field(default_factory=list)

    api_version: str = DEFAULT_API_VERSION
    page_size: int = PAGE_SIZE
    log_level: LogLevel = LogLevel.NORMAL

    dry_run: bool = False
    report_path: Optional[str] = None

    def __post_init__(self):
        self.source_store = normalize_store(self.source_store or "")
        self.target_store = normalize_store(self.target_store or "")

    def validate(self) -> None:
        """Fail fast before any network activity."""
        if not self.migrate_metaobjects and not self.migrate_metafields:
            raise ConfigurationError("Please specify --metafields and/or --metaobjects")

        if self.migrate_metafields and not self.owner_types:
            raise ConfigurationError(
                "--shopifyObjectTypes is required. Use --help for more information."
            )

        missing = [
            name for name, value in (
                ("sourceStore", self.source_store),
                ("sourceToken", self.source_token),
                ("targetStore", self.target_store),
                ("targetToken", self.target_token),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                "Missing required option(s): " + ", ".join(f"--{m}" for m in missing)
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation (tokens omitted)."""
        return {
            "source_store": self.source_store,
            "target_store": self.target_store,
            "migrate_metaobjects": self.migrate_metaobjects,
            "migrate_metafields": self.migrate_metafields,
            "owner_types": self.owner_types,
            "api_version": self.api_version,
            "page_size": self.page_size,
            "log_level": self.log_level.value,
            "dry_run": self.dry_run,
            "report_path": self.report_path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MigrationConfig":
        """Create from dictionary representation."""
        owner_types = data.get("owner_types", [])
        if isinstance(owner_types, str):
            owner_types = parse_owner_types(owner_types)

        return cls(
            source_store=data.get("source_store", ""),
            source_token=data.get("source_token", ""),
            target_store=data.get("target_store", ""),
            target_token=data.get("target_token", ""),
            migrate_metaobjects=data.get("migrate_metaobjects", False),
            migrate_metafields=data.get("migrate_metafields", False),
            owner_types=list(owner_types),
            api_version=data.get("api_version") or DEFAULT_API_VERSION,
            page_size=data.get("page_size", PAGE_SIZE),
            log_level=LogLevel(data.get("log_level", LogLevel.NORMAL.value)),
            dry_run=data.get("dry_run", False),
            report_path=data.get("report_path"),
        )

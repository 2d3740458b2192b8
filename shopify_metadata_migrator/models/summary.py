"""Run summary shared by the definition migrators."""

import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from .migration import MigrationStatus


class OutcomeStatus(str, Enum):
    """Outcome of a single definition."""
    CREATED = "created"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class OutcomeRecord:
    """What happened to one definition on the target."""
    name: str
    status: OutcomeStatus
    user_errors: Optional[List[Dict[str, Any]]] = None
    error: Optional[str] = None
    reason: Optional[str] = None
    dry_run: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        result: Dict[str, Any] = {"name": self.name, "status": self.status.value}
        if self.user_errors is not None:
            result["userErrors"] = self.user_errors
        if self.error is not None:
            result["error"] = self.error
        if self.reason is not None:
            result["reason"] = self.reason
        if self.dry_run:
            result["dry_run"] = True
        return result


@dataclass
class ErrorRecord:
    """An exception swallowed at a catch boundary."""
    context: str
    message: str
    timestamp: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "context": self.context,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class CategorySummary:
    """
    Counters and details for one definition category.

    All mutation goes through the methods below, which hold the lock
    shared with the owning RunSummary.
    """
    label: str
    processed: int = 0
    created: int = 0
    failed: int = 0
    skipped: int = 0
    details: List[OutcomeRecord] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record_processed(self) -> None:
        with self._lock:
            self.processed += 1

    def record_created(self, name: str, dry_run: bool = False) -> None:
        with self._lock:
            self.created += 1
            self.details.append(OutcomeRecord(name=name, status=OutcomeStatus.CREATED, dry_run=dry_run))

    def record_failed(
        self,
        name: str,
        user_errors: Optional[List[Dict[str, Any]]] = None,
        error: Optional[str] = None
    ) -> None:
        with self._lock:
            self.failed += 1
            self.details.append(OutcomeRecord(
                name=name,
                status=OutcomeStatus.FAILED,
                user_errors=user_errors,
                error=error,
            ))

    def record_skipped(self, name: str, reason: str) -> None:
        with self._lock:
            self.skipped += 1
            self.details.append(OutcomeRecord(name=name, status=OutcomeStatus.SKIPPED, reason=reason))

    def details_with_status(self, status: OutcomeStatus) -> List[OutcomeRecord]:
        with self._lock:
            return [d for d in self.details if d.status == status]

    @property
    def is_balanced(self) -> bool:
        """Every processed definition ended up created, failed or skipped."""
        return self.processed == self.created + self.failed + self.skipped

    def summary_line(self) -> str:
        return (
            f"{self.label}: processed={self.processed}, "
            f"created={self.created}, failed={self.failed}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        with self._lock:
            return {
                "processed": self.processed,
                "created": self.created,
                "failed": self.failed,
                "skipped": self.skipped,
                "details": [d.to_dict() for d in self.details],
            }


class RunSummary:
    """
    Per-run accumulator written by the migrators and rendered once at the end.

    The migrators may run on separate threads, so the category buckets and
    the error log share one lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.metaobjects = CategorySummary(label="Metaobjects", _lock=self._lock)
        self.metafields = CategorySummary(label="Metafields", _lock=self._lock)
        self.errors: List[ErrorRecord] = []
        self.status = MigrationStatus.PENDING
        self.started_at: Optional[datetime] = None
        self.completed_at: Optional[datetime] = None

    def start(self) -> None:
        self.status = MigrationStatus.RUNNING
        self.started_at = datetime.utcnow()

    def finish(self, failed: bool = False) -> None:
        self.status = MigrationStatus.FAILED if failed else MigrationStatus.COMPLETED
        self.completed_at = datetime.utcnow()

    @property
    def duration_seconds(self) -> Optional[float]:
        """Get duration in seconds."""
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return None

    def record_error(self, context: str, exc: BaseException) -> ErrorRecord:
        """Append a caught exception to the error log."""
        record = ErrorRecord(context=context, message=str(exc) or exc.__class__.__name__)
        with self._lock:
            self.errors.append(record)
        return record

    def render(self, include_errors: bool = True) -> str:
        """Final console summary."""
        lines = [
            "--- Migration Summary ---",
            self.metaobjects.summary_line(),
            self.metafields.summary_line(),
        ]

        with self._lock:
            errors = list(self.errors)

        if errors and include_errors:
            lines.append("Errors encountered:")
            for e in errors:
                lines.append(f"- {e.context}: {e.message}")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        with self._lock:
            errors = [e.to_dict() for e in self.errors]
        return {
            "status": self.status.value,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "duration_seconds": self.duration_seconds,
            "metaobjects": self.metaobjects.to_dict(),
            "metafields": self.metafields.to_dict(),
            "errors": errors,
        }

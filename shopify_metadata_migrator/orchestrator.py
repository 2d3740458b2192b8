"""Migration orchestrator - runs the selected definition migrators together."""

import json
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, List, Optional

from .models.migration import MigrationConfig
from .models.summary import RunSummary
from .services.graphql_client import ShopifyGraphQLClient
from .extractors.shopify_extractor import ShopifyDefinitionExtractor
from .loaders.shopify_loader import ShopifyDefinitionLoader
from .migrators.base import BaseDefinitionMigrator
from .migrators.metaobject_migrator import MetaobjectDefinitionMigrator
from .migrators.metafield_migrator import MetafieldDefinitionMigrator

logger = logging.getLogger(__name__)

UNHANDLED_ERROR_CONTEXT = "Unhandled error during migration"


class MigrationOrchestrator:
    """
    Coordinates a migration run.

    Handles:
    - Building a source extractor and target loader per migrator
    - Running the metaobject and metafield migrators concurrently
    - Joining both and recording anything that escaped them
    - Writing the optional JSON run report
    """

    def __init__(
        self,
        config: MigrationConfig,
        summary: Optional[RunSummary] = None,
        client_factory: Optional[Callable[..., ShopifyGraphQLClient]] = None
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Migration configuration
            summary: Accumulator to write into (a fresh one by default)
            client_factory: Builds a GraphQL client from (store, token, api_version=...)
        """
        self.config = config
        self.summary = summary or RunSummary()
        self._client_factory = client_factory or ShopifyGraphQLClient
        self._clients: List[ShopifyGraphQLClient] = []

    def _create_client(self, store: str, token: str) -> ShopifyGraphQLClient:
        client = self._client_factory(store, token, api_version=self.config.api_version)
        self._clients.append(client)
        return client

    def _create_extractor(self) -> ShopifyDefinitionExtractor:
        """Source side. Each migrator gets its own client and session."""
        client = self._create_client(self.config.source_store, self.config.source_token)
        return ShopifyDefinitionExtractor(client, page_size=self.config.page_size)

    def _create_loader(self) -> ShopifyDefinitionLoader:
        client = self._create_client(self.config.target_store, self.config.target_token)
        return ShopifyDefinitionLoader(client, dry_run=self.config.dry_run)

    def build_migrators(self) -> List[BaseDefinitionMigrator]:
        migrators: List[BaseDefinitionMigrator] = []

        if self.config.migrate_metaobjects:
            migrators.append(MetaobjectDefinitionMigrator(
                self._create_extractor(),
                self._create_loader(),
                self.summary,
            ))

        if self.config.migrate_metafields:
            migrators.append(MetafieldDefinitionMigrator(
                self._create_extractor(),
                self._create_loader(),
                self.summary,
                self.config.owner_types,
            ))

        return migrators

    def run_migration(self) -> RunSummary:
        """
        Run the complete migration.

        Returns:
            RunSummary with counts, details and errors. Its status is
            ``failed`` if anything escaped a migrator.
        """
        self.config.validate()
        self.summary.start()
        failed = False

        try:
            migrators = self.build_migrators()

            with ThreadPoolExecutor(
                max_workers=len(migrators),
                thread_name_prefix="migrator",
            ) as executor:
                futures = {executor.submit(m.run): m for m in migrators}
                for future in as_completed(futures):
                    try:
                        future.result()
                    except Exception as e:
                        failed = True
                        self._record_unhandled(e)

        except Exception as e:
            failed = True
            self._record_unhandled(e)

        finally:
            self._close_clients()
            self.summary.finish(failed=failed)
            if self.config.report_path:
                self._save_report(self.config.report_path)

        return self.summary

    def _record_unhandled(self, exc: Exception) -> None:
        record = self.summary.record_error(UNHANDLED_ERROR_CONTEXT, exc)
        logger.error(f"{record.context}: {record.message}")

    def _close_clients(self) -> None:
        for client in self._clients:
            try:
                client.close()
            except Exception as e:
                logger.warning(f"Failed to close GraphQL client for {getattr(client, 'store', '?')}: {e}")
        self._clients = []

    def _save_report(self, path: str) -> None:
        """Save the migration report."""
        report = {
            "config": self.config.to_dict(),
            "summary": self.summary.to_dict(),
        }
        try:
            filepath = Path(path)
            filepath.parent.mkdir(parents=True, exist_ok=True)
            with open(filepath, "w") as f:
                json.dump(report, f, indent=2, default=str)
            logger.info(f"Saved migration report to {filepath}")
        except OSError as e:
            logger.error(f"Failed to save migration report to {path}: {e}")

"""Shopify Admin GraphQL transport."""

import json
import logging
from typing import Any, Dict, Optional

import requests

from ..models.migration import DEFAULT_API_VERSION, normalize_store

logger = logging.getLogger(__name__)


class GraphQLError(Exception):
    """The response envelope carried a non-empty ``errors`` list."""

    def __init__(self, errors: Any, message: str = "GraphQL query failed"):
        super().__init__(message)
        self.errors = errors


def build_api_endpoint(store: str, api_version: str = DEFAULT_API_VERSION) -> str:
    """Admin GraphQL endpoint for a store handle."""
    return f"https://{normalize_store(store)}.myshopify.com/admin/api/{api_version}/graphql.json"


class ShopifyGraphQLClient:
    """
    Single request/response cycle against one store's Admin GraphQL endpoint.

    No retries and no timeout beyond the ``requests`` defaults.
    """

    def __init__(
        self,
        store: str,
        access_token: str,
        api_version: str = DEFAULT_API_VERSION,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Args:
            store: Store handle or ``*.myshopify.com`` domain
            access_token: Admin API access token
            api_version: Admin API version, e.g. ``2025-07``
            session: Custom requests session
        """
        if not store:
            raise ValueError("Shopify store cannot be empty.")
        if not access_token:
            raise ValueError("Shopify access token cannot be empty.")

        self.store = normalize_store(store)
        self.api_version = api_version
        self.endpoint = build_api_endpoint(self.store, api_version)
        self._access_token = access_token
        self._session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a requests session. Auth headers are sent per request."""
        return requests.Session()

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self._access_token,
        }

    def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        POST ``{query, variables}`` and return the ``data`` member.

        Raises:
            GraphQLError: the envelope contains ``errors``
            requests.RequestException: network failure or non-2xx status
            ValueError: the body is not JSON
        """
        variables = variables or {}
        # Never log the access token
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "GraphQL Request: %s",
                json.dumps({"endpoint": self.endpoint, "query": query, "variables": variables}, indent=2),
            )

        response = self._session.post(
            self.endpoint,
            headers=self.headers,
            json={"query": query, "variables": variables},
        )
        result = response.json()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("GraphQL Response: %s", json.dumps(result, indent=2, default=str))

        if not isinstance(result, dict):
            raise ValueError(f"Unexpected GraphQL response body: {result!r}")

        errors = result.get("errors")
        if errors:
            logger.error("GraphQL Errors: %s", json.dumps(errors, indent=2))
            raise GraphQLError(errors)

        response.raise_for_status()
        return result.get("data") or {}

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "ShopifyGraphQLClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

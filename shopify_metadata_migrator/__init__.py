"""
Shopify Metadata Migrator

Copies metadata schema definitions between two Shopify stores through the
Admin GraphQL API.

Supports:
- Metaobject definitions (definitions with metaobject reference fields are skipped)
- Metafield definitions for any list of owner types
- Concurrent metaobject and metafield passes with a shared run summary
- Dry runs and JSON run reports
"""

__version__ = "1.0.0"

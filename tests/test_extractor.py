"""Tests for the source-side definition extractor."""

from dataclasses import fields

import pytest

from shopify_metadata_migrator.extractors.shopify_extractor import ShopifyDefinitionExtractor
from shopify_metadata_migrator.models.definition import (
    MetafieldDefinitionInput,
    MetaobjectDefinitionInput,
)
from shopify_metadata_migrator.services.graphql_client import GraphQLError
from shopify_metadata_migrator.services.queries import (
    METAFIELD_DEFINITIONS_QUERY,
    METAOBJECT_DEFINITIONS_QUERY,
)

from factories import FakeGraphQLClient, connection, metafield_node, source_client


class TestMetaobjectExtraction:

    def test_fetches_first_page_of_250(self, plain_metaobject_node):
        client = source_client(metaobjects=[plain_metaobject_node])

        result = ShopifyDefinitionExtractor(client).extract_metaobject_definitions()

        assert client.calls_for(METAOBJECT_DEFINITIONS_QUERY) == [{"first": 250}]
        assert result.total_extracted == 1
        assert isinstance(result.records[0], MetaobjectDefinitionInput)
        assert result.has_more is False
        assert [f.name for f in fields(result)] == ["entity", "records", "has_more"]

    def test_truncation_is_flagged_and_warned(self, plain_metaobject_node, caplog):
        client = FakeGraphQLClient().on(
            METAOBJECT_DEFINITIONS_QUERY,
            connection("metaobjectDefinitions", [plain_metaobject_node], has_next_page=True),
        )

        with caplog.at_level("WARNING", logger="shopify_metadata_migrator"):
            result = ShopifyDefinitionExtractor(client).extract_metaobject_definitions()

        assert result.has_more is True
        assert result.total_extracted == 1
        assert "only the first 250" in caplog.text

    def test_no_second_page_is_requested(self, plain_metaobject_node):
        client = FakeGraphQLClient().on(
            METAOBJECT_DEFINITIONS_QUERY,
            connection("metaobjectDefinitions", [plain_metaobject_node], has_next_page=True),
        )

        ShopifyDefinitionExtractor(client).extract_metaobject_definitions()

        assert len(client.calls) == 1

    def test_graphql_error_propagates(self):
        client = FakeGraphQLClient().on(METAOBJECT_DEFINITIONS_QUERY, GraphQLError([{"message": "denied"}]))

        with pytest.raises(GraphQLError):
            ShopifyDefinitionExtractor(client).extract_metaobject_definitions()


class TestMetafieldExtraction:

    def test_owner_type_passed_as_variable(self):
        client = source_client(metafields_by_owner={
            "COLLECTION": [metafield_node("custom", "banner", owner_type="COLLECTION")],
        })

        result = ShopifyDefinitionExtractor(client).extract_metafield_definitions("COLLECTION")

        assert client.calls_for(METAFIELD_DEFINITIONS_QUERY) == [{"first": 250, "ownerType": "COLLECTION"}]
        assert result.entity == "metafieldDefinitions"
        assert isinstance(result.records[0], MetafieldDefinitionInput)
        assert result.records[0].ownerType == "COLLECTION"

    def test_empty_connection(self):
        client = source_client()

        result = ShopifyDefinitionExtractor(client).extract_metafield_definitions("PRODUCT")

        assert result.records == []
        assert result.has_more is False

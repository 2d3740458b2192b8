"""Tests for metafield definition migration."""

import requests

from shopify_metadata_migrator.extractors.shopify_extractor import ShopifyDefinitionExtractor
from shopify_metadata_migrator.loaders.shopify_loader import ShopifyDefinitionLoader
from shopify_metadata_migrator.migrators.metafield_migrator import MetafieldDefinitionMigrator
from shopify_metadata_migrator.services.graphql_client import GraphQLError
from shopify_metadata_migrator.services.queries import (
    CREATE_METAFIELD_DEFINITION_MUTATION,
    METAFIELD_DEFINITIONS_QUERY,
)

from factories import FakeGraphQLClient, create_payload, metafield_node, source_client, target_client


def _migrate(source, target, summary, owner_types):
    migrator = MetafieldDefinitionMigrator(
        ShopifyDefinitionExtractor(source),
        ShopifyDefinitionLoader(target),
        summary,
        owner_types,
    )
    return migrator.run()


class TestOwnerTypes:

    def test_each_owner_type_fetched_in_order(self, summary):
        source = source_client(metafields_by_owner={
            "PRODUCT": [metafield_node("custom", "fabric")],
            "COLLECTION": [metafield_node("custom", "banner", owner_type="COLLECTION")],
        })
        target = target_client()

        bucket = _migrate(source, target, summary, ["PRODUCT", "COLLECTION"])

        fetched = [v["ownerType"] for v in source.calls_for(METAFIELD_DEFINITIONS_QUERY)]
        created = [v["definition"]["key"] for v in target.calls_for(CREATE_METAFIELD_DEFINITION_MUTATION)]
        assert fetched == ["PRODUCT", "COLLECTION"]
        assert created == ["fabric", "banner"]
        assert (bucket.processed, bucket.created, bucket.failed) == (2, 2, 0)

    def test_fetch_failure_on_one_owner_type_does_not_stop_the_next(self, summary):
        source = source_client(metafields_by_owner={
            "PRODUCT": GraphQLError([{"message": "Throttled"}]),
            "COLLECTION": [metafield_node("custom", "banner", owner_type="COLLECTION")],
        })
        target = target_client()

        bucket = _migrate(source, target, summary, ["PRODUCT", "COLLECTION"])

        assert [v["ownerType"] for v in source.calls_for(METAFIELD_DEFINITIONS_QUERY)] == ["PRODUCT", "COLLECTION"]
        assert len(target.calls_for(CREATE_METAFIELD_DEFINITION_MUTATION)) == 1
        assert (bucket.processed, bucket.created, bucket.failed) == (1, 1, 0)
        assert [e.context for e in summary.errors] == [
            "GraphQL request failed while fetching source metafield definitions for ownerType PRODUCT",
        ]

    def test_no_owner_types_does_nothing(self, summary):
        source = source_client()

        bucket = _migrate(source, target_client(), summary, [])

        assert source.calls == []
        assert bucket.processed == 0


class TestCreates:

    def test_id_stripped_and_type_flattened(self, summary):
        source = source_client(metafields_by_owner={
            "PRODUCT": [metafield_node("custom", "care_guide", type_name="rich_text_field")],
        })
        target = target_client()

        _migrate(source, target, summary, ["PRODUCT"])

        sent = target.calls_for(CREATE_METAFIELD_DEFINITION_MUTATION)[0]["definition"]
        assert "id" not in sent
        assert sent["type"] == "rich_text_field"

    def test_duplicate_definition_fails_with_user_errors(self, summary):
        user_errors = [{"field": ["definition", "key"], "message": "Key is in use for Product metafields on the 'custom' namespace.", "code": "TAKEN"}]
        source = source_client(metafields_by_owner={"PRODUCT": [metafield_node("custom", "fabric")]})
        target = target_client(metafield_response=create_payload("metafieldDefinitionCreate", user_errors))

        bucket = _migrate(source, target, summary, ["PRODUCT"])

        assert (bucket.processed, bucket.created, bucket.failed) == (1, 0, 1)
        assert bucket.details[0].user_errors == user_errors

    def test_create_exception_does_not_stop_siblings_or_owner_types(self, summary):
        source = source_client(metafields_by_owner={
            "PRODUCT": [metafield_node("custom", "fabric"), metafield_node("custom", "origin")],
            "COLLECTION": [metafield_node("custom", "banner", owner_type="COLLECTION")],
        })

        def create(variables):
            if variables["definition"]["key"] == "fabric":
                return requests.Timeout("read timed out")
            return create_payload("metafieldDefinitionCreate")

        target = FakeGraphQLClient(store="target-store").on(CREATE_METAFIELD_DEFINITION_MUTATION, create)

        bucket = _migrate(source, target, summary, ["PRODUCT", "COLLECTION"])

        assert (bucket.processed, bucket.created, bucket.failed) == (3, 2, 1)
        assert bucket.is_balanced
        assert summary.errors[0].context == \
            "GraphQL request failed while creating metafield definition for Fabric"

    def test_reference_typed_metafield_is_still_submitted(self, summary, caplog):
        source = source_client(metafields_by_owner={
            "PRODUCT": [metafield_node("custom", "designer", type_name="metaobject_reference")],
        })
        target = target_client()

        with caplog.at_level("WARNING", logger="shopify_metadata_migrator"):
            bucket = _migrate(source, target, summary, ["PRODUCT"])

        assert len(target.calls_for(CREATE_METAFIELD_DEFINITION_MUTATION)) == 1
        assert bucket.created == 1
        assert "custom.designer is a metaobject reference" in caplog.text

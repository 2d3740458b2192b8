import pytest

from shopify_metadata_migrator.models.summary import RunSummary

from factories import field_node, metaobject_node


@pytest.fixture
def summary():
    return RunSummary()


@pytest.fixture
def plain_metaobject_node():
    """Metaobject definition with two plain-typed fields."""
    return metaobject_node(
        "Author",
        "author",
        [
            field_node("full_name", "single_line_text_field", required=True,
                       validations=[{"name": "max", "value": "120"}]),
            field_node("bio", "multi_line_text_field"),
        ],
        node_id="gid://shopify/MetaobjectDefinition/11",
        description="Book authors",
    )


@pytest.fixture
def referencing_metaobject_node():
    """Metaobject definition with one metaobject_reference field."""
    return metaobject_node(
        "Book",
        "book",
        [
            field_node("title"),
            field_node(
                "author",
                "metaobject_reference",
                validations=[{"name": "metaobject_definition_id",
                              "value": "gid://shopify/MetaobjectDefinition/11"}],
            ),
        ],
        node_id="gid://shopify/MetaobjectDefinition/12",
    )

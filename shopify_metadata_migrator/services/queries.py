"""GraphQL documents for the Shopify Admin API."""

METAOBJECT_DEFINITIONS_QUERY = """
query MetaobjectDefinitions($first: Int!) {
  metaobjectDefinitions(first: $first) {
    pageInfo {
      hasNextPage
    }
    edges {
      node {
        id
        name
        description
        type
        fieldDefinitions {
          description
          key
          name
          required
          type {
            name
          }
          validations {
            name
            value
          }
        }
      }
    }
  }
}
"""

CREATE_METAOBJECT_DEFINITION_MUTATION = """
mutation CreateMetaobjectDefinition($definition: MetaobjectDefinitionCreateInput!) {
  metaobjectDefinitionCreate(definition: $definition) {
    metaobjectDefinition {
      name
      description
      type
      fieldDefinitions {
        description
        key
        name
        required
        type {
          name
        }
        validations {
          name
          value
        }
      }
    }
    userErrors {
      field
      message
      code
    }
  }
}
"""

METAFIELD_DEFINITIONS_QUERY = """
query MetafieldDefinitions($first: Int!, $ownerType: MetafieldOwnerType!) {
  metafieldDefinitions(first: $first, ownerType: $ownerType) {
    pageInfo {
      hasNextPage
    }
    edges {
      node {
        id
        namespace
        key
        ownerType
        description
        name
        type {
          name
          category
        }
      }
    }
  }
}
"""

CREATE_METAFIELD_DEFINITION_MUTATION = """
mutation CreateMetafieldDefinition($definition: MetafieldDefinitionInput!) {
  metafieldDefinitionCreate(definition: $definition) {
    createdDefinition {
      id
      name
    }
    userErrors {
      field
      message
      code
    }
  }
}
"""

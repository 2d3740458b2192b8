"""Detection of metaobject definitions that reference other metaobjects.

A ``metaobject_reference`` field carries a ``metaobject_definition_id``
validation pointing at a definition on the source store. That id means
nothing on the target, and the referenced definition may not exist there
yet, so such definitions are left out of the migration entirely.
"""

from typing import List

from ..models.definition import METAOBJECT_REFERENCE_TYPE, MetaobjectDefinitionInput

SKIP_REASON = "contains a metaobject_reference field"


def is_reference_type(field_type: str) -> bool:
    return field_type == METAOBJECT_REFERENCE_TYPE


def has_metaobject_reference(definition: MetaobjectDefinitionInput) -> bool:
    """True when any field of the definition is a metaobject reference."""
    return any(is_reference_type(t) for t in definition.field_types)


def reference_field_keys(definition: MetaobjectDefinitionInput) -> List[str]:
    """Keys of the offending fields, for logging."""
    return [f.key for f in definition.fieldDefinitions if is_reference_type(f.type)]


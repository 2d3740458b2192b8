"""Definition models submitted to the target store.

Source nodes come back from the Admin API with a server-assigned ``id`` and
a nested ``type`` object. The input models below declare only the fields the
create mutations accept, so building one from a node strips the ``id`` and
flattens the ``type`` wrapper without touching the fetched data.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


METAOBJECT_REFERENCE_TYPE = "metaobject_reference"


def flatten_type(value: Any) -> str:
    """Return the bare type name from a ``{name: ...}`` wrapper."""
    if isinstance(value, dict):
        return value["name"]
    return value


class ValidationInput(BaseModel):
    name: str
    value: Optional[str] = None

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "ValidationInput":
        return cls(name=node["name"], value=node.get("value"))


class FieldDefinitionInput(BaseModel):
    """A single field of a metaobject definition."""
    key: str
    name: str
    description: Optional[str] = None
    required: bool = False
    type: str
    validations: List[ValidationInput] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "FieldDefinitionInput":
        return cls(
            key=node["key"],
            name=node["name"],
            description=node.get("description"),
            required=bool(node.get("required", False)),
            type=flatten_type(node["type"]),
            validations=[
                ValidationInput.from_node(v) for v in node.get("validations") or []
            ],
        )

    def describe(self) -> str:
        """Short ``key:type`` form used in verbose logging."""
        label = f"{self.key or self.name}:{self.type}"
        if self.required:
            label += " (required)"
        return label


class MetaobjectDefinitionInput(BaseModel):
    """Payload for ``metaobjectDefinitionCreate``."""
    name: str
    description: Optional[str] = None
    type: str
    fieldDefinitions: List[FieldDefinitionInput] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "MetaobjectDefinitionInput":
        return cls(
            name=node["name"],
            description=node.get("description"),
            type=node["type"],
            fieldDefinitions=[
                FieldDefinitionInput.from_node(f)
                for f in node.get("fieldDefinitions") or []
            ],
        )

    @property
    def field_types(self) -> List[str]:
        return [f.type for f in self.fieldDefinitions]


class MetafieldDefinitionInput(BaseModel):
    """Payload for ``metafieldDefinitionCreate``."""
    namespace: str
    key: str
    ownerType: str
    name: str
    description: Optional[str] = None
    type: str

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "MetafieldDefinitionInput":
        return cls(
            namespace=node["namespace"],
            key=node["key"],
            ownerType=node["ownerType"],
            name=node["name"],
            description=node.get("description"),
            type=flatten_type(node["type"]),
        )

    @property
    def qualified_key(self) -> str:
        return f"{self.namespace}.{self.key}"

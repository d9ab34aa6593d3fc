"""
Pydantic schemas for the Harvest concept catalog.

Decoding is lenient the way the Harvest API clients have always been:
unknown keys are ignored, missing keys take zero values and a JSON null
leaves a field at its zero value ("" for strings).
"""
from typing import List, Optional, get_args
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from harvestdoc.core.errors import DecodeError


class CatalogModel(BaseModel):
    """Immutable base for catalog entities."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, v, info):
        """JSON null leaves a non-optional field at its zero value."""
        if v is None:
            field = cls.model_fields[info.field_name]
            if type(None) not in get_args(field.annotation):
                return field.get_default(call_default_factory=True)
        return v


class Category(CatalogModel):
    """Classification label of a concept; parent is informational only."""

    id: int = 0
    name: str = ""
    parent: Optional["Category"] = None
    order: float = 0.0


class ConceptField(CatalogModel):
    """A named, described attribute of exactly one concept."""

    id: int = Field(0, alias="pk")
    name: str = ""
    description: str = ""
    alt_name: str = ""
    alt_plural_name: str = ""


class Concept(CatalogModel):
    """Top-level catalog entry grouping fields under a category."""

    id: int = 0
    name: str = ""
    plural_name: str = ""
    description: str = ""

    category: Optional[Category] = None
    fields: List[ConceptField] = Field(default_factory=list)

    published: bool = False
    queryable: bool = False
    sortable: bool = False
    viewable: bool = False

    order: float = 0.0


_concept_list = TypeAdapter(Optional[List[Concept]])


def decode_concepts(payload) -> List[Concept]:
    """
    Decode a JSON document into an ordered list of concepts.

    Args:
        payload: JSON text or bytes holding an array of concept objects

    Returns:
        Concepts in document order (a JSON null yields an empty list)

    Raises:
        DecodeError: If the payload is not valid JSON or not an array of concepts
    """
    try:
        concepts = _concept_list.validate_json(payload)
    except ValidationError as e:
        raise DecodeError(f"json: {e}") from e
    return concepts or []

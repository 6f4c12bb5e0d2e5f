"""Schema resolution entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class DocumentKind(str, Enum):
    """Supported schema document variants."""

    PLAIN_SCHEMA = "plain_schema"
    SWAGGER = "swagger"
    OPENAPI = "openapi"


@dataclass(frozen=True)
class DocumentLayout:
    """Where a specification document keeps response schemas and shared definitions."""

    schema_keys: tuple[str, ...]
    registry_key: str


SWAGGER_LAYOUT = DocumentLayout(schema_keys=("schema",), registry_key="definitions")
OPENAPI_LAYOUT = DocumentLayout(
    schema_keys=("content", "application/json", "schema"),
    registry_key="components",
)


@dataclass(frozen=True)
class SchemaDocument:
    """Structured representation of a schema or specification document."""

    kind: DocumentKind
    root: Any

    @property
    def is_specification(self) -> bool:
        """Return True for Swagger and OpenAPI documents."""
        return self.kind != DocumentKind.PLAIN_SCHEMA

    @property
    def layout(self) -> DocumentLayout:
        """Return the response layout of a specification document."""
        if self.kind == DocumentKind.SWAGGER:
            return SWAGGER_LAYOUT
        if self.kind == DocumentKind.OPENAPI:
            return OPENAPI_LAYOUT
        raise ValueError("Plain JSON schemas have no specification layout.")


def classify_document(root: Any) -> SchemaDocument:
    """Wrap a raw document, detecting its variant from the version marker."""
    if isinstance(root, Mapping):
        if root.get("swagger"):
            return SchemaDocument(kind=DocumentKind.SWAGGER, root=root)
        if root.get("openapi"):
            return SchemaDocument(kind=DocumentKind.OPENAPI, root=root)
    return SchemaDocument(kind=DocumentKind.PLAIN_SCHEMA, root=root)

from __future__ import annotations

import logging

from graphql import parse
from graphql.error import GraphQLError
from graphql.language import (
    DocumentNode,
    FieldDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeNode,
)

from .errors import DuplicateEntityError, SchemaSyntaxError
from .relationships import merge_relationships, scan_relationships_from_text
from .types import Entity, Field, Relationship, RelationshipType

# ============================================================================
# GraphQL SDL entity extractor
#
# Turns SDL text into a list of Entity values.
#
# Supported syntax:
#   type Blog @model {
#     id: ID!
#     name: String!
#     posts: [Post] @hasMany
#   }
#   type Post @model {
#     id: ID!
#     blog: Blog @belongsTo
#   }
#   type ProductFeature @model
#
# Only object types carrying @model become entities. Fields carrying
# @hasMany or @belongsTo become relationships; every other field is kept as a
# plain attribute.
# ============================================================================

logger = logging.getLogger(__name__)

MODEL_DIRECTIVE = "model"
HAS_MANY_DIRECTIVE = "hasMany"
BELONGS_TO_DIRECTIVE = "belongsTo"

# Name fragments for the junction-table heuristic
JUNCTION_ANCHOR = "Product"
JUNCTION_PARTNERS = ("Industry", "ClientNeed", "Feature", "Catalog")


def parse_graphql_schema(text: str) -> list[Entity]:
    """Parse GraphQL SDL text into entities, in document order.

    Raises SchemaSyntaxError if the text is not valid SDL, and
    DuplicateEntityError if two @model types share a name.
    Blank text (or text holding only comments) yields an empty list.
    """
    if _is_blank(text):
        return []

    try:
        document: DocumentNode = parse(text)
    except GraphQLError as err:
        raise SchemaSyntaxError(f"Failed to parse GraphQL schema: {err.message}") from err
    except RecursionError as err:
        raise SchemaSyntaxError(
            "Failed to parse GraphQL schema: type or value nesting is too deep"
        ) from err

    # First pass: collect @model object types, keeping document order
    model_types: dict[str, ObjectTypeDefinitionNode] = {}
    for definition in document.definitions:
        if not isinstance(definition, ObjectTypeDefinitionNode):
            continue
        if not _has_directive(definition, MODEL_DIRECTIVE):
            continue
        type_name = definition.name.value
        if type_name in model_types:
            raise DuplicateEntityError(type_name)
        model_types[type_name] = definition

    logger.debug("Found %d @model type(s)", len(model_types))

    # Second pass: fields and relationships
    return [_parse_entity(name, type_def, text) for name, type_def in model_types.items()]


def is_junction_table(entity_name: str) -> bool:
    """Naming-convention check for many-to-many junction entities.

    True when the name contains "Product" together with one of
    "Industry", "ClientNeed", "Feature" or "Catalog" (e.g. ProductIndustry,
    CatalogProduct). This looks at the name only, not at the entity's shape,
    so it does not carry over to schemas with other naming conventions.
    """
    return JUNCTION_ANCHOR in entity_name and any(
        partner in entity_name for partner in JUNCTION_PARTNERS
    )


def _parse_entity(name: str, type_def: ObjectTypeDefinitionNode, schema_text: str) -> Entity:
    fields: list[Field] = []
    ast_relationships: list[Relationship] = []

    for field_def in type_def.fields or ():
        field_name = field_def.name.value
        rel_type = _relationship_directive(field_def)

        if rel_type is not None:
            target, _is_list, _required = _unwrap_type(field_def.type)
            if target is not None:
                ast_relationships.append(
                    Relationship(type=rel_type, target_entity=target, field_name=field_name)
                )
            continue

        type_name, is_list, required = _unwrap_type(field_def.type)
        if type_name is None:
            fields.append(Field(name=field_name, type="Unknown", required=False, is_list=False))
        else:
            fields.append(Field(name=field_name, type=type_name, required=required, is_list=is_list))

    text_relationships = scan_relationships_from_text(name, schema_text)
    relationships = merge_relationships(ast_relationships, text_relationships)
    if len(relationships) > len(ast_relationships):
        logger.debug(
            "%s: %d relationship(s) found only by text scan",
            name,
            len(relationships) - len(ast_relationships),
        )

    return Entity(
        name=name,
        fields=tuple(fields),
        relationships=tuple(relationships),
        is_junction_table=is_junction_table(name),
    )


def _relationship_directive(field_def: FieldDefinitionNode) -> RelationshipType | None:
    """Relationship kind declared on a field. @hasMany wins if both are present."""
    if _has_directive(field_def, HAS_MANY_DIRECTIVE):
        return "hasMany"
    if _has_directive(field_def, BELONGS_TO_DIRECTIVE):
        return "belongsTo"
    return None


def _unwrap_type(type_node: TypeNode | None) -> tuple[str | None, bool, bool]:
    """Strip NonNull/List wrappers down to the named type.

    Returns (type name, is_list, required). Type name is None if no named
    type is reached.
    """
    is_list = False
    required = False
    current = type_node

    while current is not None:
        if isinstance(current, NonNullTypeNode):
            required = True
            current = current.type
        elif isinstance(current, ListTypeNode):
            is_list = True
            current = current.type
        elif isinstance(current, NamedTypeNode):
            return current.name.value, is_list, required
        else:
            break

    return None, False, False


def _has_directive(node: ObjectTypeDefinitionNode | FieldDefinitionNode, name: str) -> bool:
    return any(d.name.value == name for d in node.directives or ())


def _is_blank(text: str) -> bool:
    """True when text has nothing but whitespace and comment lines."""
    return all(
        not line.strip() or line.strip().startswith("#")
        for line in text.split("\n")
    )

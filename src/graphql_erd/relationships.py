from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from .types import Entity, Relationship

# ============================================================================
# Relationship detection from raw schema text, merging and pair dedup
#
# The AST pass in parser.py is the primary source of relationships. This
# module re-scans the raw text of each `@model` type block line by line as a
# second, independent producer. Both outputs are fed through
# merge_relationships(), which keeps one copy of each
# (type, target_entity, field_name) triple. unique_links() then reduces the
# per-entity relationships to one link per pair of entities for the layouts.
#
# Supported line shapes inside a type block:
#   posts: [Post] @hasMany
#   posts: [Post!]! @hasMany(indexName: "byBlog")
#   blog: Blog @belongsTo
#   blog: Blog! @belongsTo(fields: ["blogID"])
# ============================================================================

logger = logging.getLogger(__name__)

_HAS_MANY_RE = re.compile(r"(\w+)\s*:\s*\[?\s*(\w+)\s*!?\s*\]?\s*!?\s*@hasMany\b")
_BELONGS_TO_RE = re.compile(r"(\w+)\s*:\s*(\w+)\s*!?\s*@belongsTo\b")

# Any line opening a new top-level definition ends the current type block.
# The keyword must be followed by a name, so fields called `type` or `input`
# do not match.
_TOP_LEVEL_RE = re.compile(
    r"^(?:extend\s+)?"
    r"(?:(?:type|interface|input|enum|union|scalar|directive)\s+[\w@]|schema\s*[{@])"
)


def scan_relationships_from_text(entity_name: str, schema_text: str) -> list[Relationship]:
    """Find relationship directives in the text block of one `@model` type.

    The block starts at the line declaring `type <entity_name>` with `@model`
    and ends before the next top-level definition. Lines are matched with
    regular expressions, so this works on text the AST pass may read
    differently, at the cost of producing duplicates of what it already found.
    """
    relationships: list[Relationship] = []
    start_re = re.compile(rf"\btype\s+{re.escape(entity_name)}\b")

    in_block = False
    for stripped in _code_lines(schema_text):
        if not stripped:
            continue

        if not in_block:
            if start_re.search(stripped) and "@model" in stripped:
                in_block = True
                # Single-line declarations carry their fields on this line
                _match_line(stripped, relationships)
            continue

        if _TOP_LEVEL_RE.match(stripped):
            break
        _match_line(stripped, relationships)

    return relationships


def _code_lines(text: str) -> Iterator[str]:
    """Yield each line stripped of comments and description strings.

    `#` comments are cut, triple-quoted block strings (possibly spanning
    lines) are dropped, and quoted strings are replaced by an empty string
    literal so text inside them is never matched.
    """
    in_block_string = False
    for line in text.split("\n"):
        out: list[str] = []
        i = 0
        while i < len(line):
            if in_block_string:
                end = line.find('"""', i)
                if end == -1:
                    break
                in_block_string = False
                i = end + 3
            elif line.startswith('"""', i):
                in_block_string = True
                i += 3
            elif line[i] == "#":
                break
            elif line[i] == '"':
                i = _string_end(line, i + 1)
                out.append('""')
            else:
                out.append(line[i])
                i += 1
        yield "".join(out).strip()


def _string_end(line: str, i: int) -> int:
    """Index just past the closing quote of a string starting before `i`."""
    while i < len(line):
        if line[i] == "\\":
            i += 2
        elif line[i] == '"':
            return i + 1
        else:
            i += 1
    return len(line)


def _match_line(line: str, out: list[Relationship]) -> None:
    """Append the relationship declared on a line, if any."""
    if "@hasMany" in line:
        match = _HAS_MANY_RE.search(line)
        if match:
            out.append(
                Relationship(type="hasMany", target_entity=match.group(2), field_name=match.group(1))
            )
    elif "@belongsTo" in line:
        match = _BELONGS_TO_RE.search(line)
        if match:
            out.append(
                Relationship(type="belongsTo", target_entity=match.group(2), field_name=match.group(1))
            )


def merge_relationships(*sources: Iterable[Relationship]) -> list[Relationship]:
    """Concatenate relationship sources, dropping exact duplicates.

    Two relationships are duplicates when type, target and field name all
    match. First occurrence order is kept.
    """
    merged: list[Relationship] = []
    seen: set[tuple[str, str, str]] = set()
    dropped = 0

    for source in sources:
        for rel in source:
            key = (rel.type, rel.target_entity, rel.field_name)
            if key in seen:
                dropped += 1
                continue
            seen.add(key)
            merged.append(rel)

    if dropped:
        logger.debug("Merged %d duplicate relationship(s)", dropped)
    return merged


def unique_links(entities: list[Entity]) -> Iterator[tuple[Entity, Relationship, Entity]]:
    """Yield (owner, relationship, target) once per unordered pair of entities.

    Entities and their relationships are visited in order; the first
    relationship seen between two entities decides the link, in whichever
    direction it was declared. Relationships naming an entity that is not in
    `entities` are skipped.
    """
    by_name = {entity.name: entity for entity in entities}
    linked: set[frozenset[str]] = set()

    for entity in entities:
        for rel in entity.relationships:
            target = by_name.get(rel.target_entity)
            if target is None:
                logger.debug(
                    "%s.%s: target %s is not a @model type, skipped",
                    entity.name,
                    rel.field_name,
                    rel.target_entity,
                )
                continue

            pair = frozenset((entity.name, target.name))
            if pair in linked:
                continue
            linked.add(pair)
            yield entity, rel, target

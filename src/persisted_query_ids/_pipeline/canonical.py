import hashlib
from typing import Iterable

import graphql

from ..types import Definition, FragmentIndex
from .fragments import find_used_fragments


def create_hash(text: str) -> str:
    """SHA-256 of the UTF-8 encoded text as lowercase hex."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def print_definitions(definitions: Iterable[graphql.Node]) -> str:
    return "\n".join(graphql.print_ast(definition) for definition in definitions)


def canonical_query(definition: Definition, known_fragments: FragmentIndex) -> str:
    """The exact text a client sends for this definition: used fragments first, the definition last."""
    used_fragments = find_used_fragments(definition, known_fragments)
    return print_definitions([*used_fragments.values(), definition])

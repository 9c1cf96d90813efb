"""Guarantee a `__typename` selection on every nested selection set."""
from typing import Optional, Sequence, TypeVar

import graphql

from ..nodes import TYPENAME_FIELD, is_introspection_field, replace

HasSelectionSet = TypeVar(
    "HasSelectionSet",
    graphql.OperationDefinitionNode,
    graphql.FragmentDefinitionNode,
    graphql.FieldNode,
    graphql.InlineFragmentNode,
)


def add_typename_to_document(document: graphql.DocumentNode) -> graphql.DocumentNode:
    """Return a copy of the document where nested selection sets request `__typename`.

    The root selection set of an operation is left as is. Unchanged nodes are shared with the input,
    so applying this function twice gives the same document as applying it once.
    """
    definitions = tuple(add_typename_to_definition(definition) for definition in document.definitions)
    if _same(definitions, document.definitions):
        return document
    return replace(document, definitions=definitions)


def add_typename_to_definition(definition: graphql.DefinitionNode) -> graphql.DefinitionNode:
    if isinstance(definition, graphql.OperationDefinitionNode):
        return _visit_owner(definition, is_root=True)
    if isinstance(definition, graphql.FragmentDefinitionNode):
        return _visit_owner(definition, is_root=False)
    # Type system definitions have no selections
    return definition


def add_typename(selection_set: graphql.SelectionSetNode) -> graphql.SelectionSetNode:
    """Append the shared `__typename` field unless the set is empty or already has an introspection field."""
    selections = selection_set.selections
    if not selections or any(is_introspection_field(selection) for selection in selections):
        return selection_set
    return replace(selection_set, selections=(*selections, TYPENAME_FIELD))


def _visit_owner(node: HasSelectionSet, *, is_root: bool) -> HasSelectionSet:
    selection_set = _visit_selection_set(node.selection_set, is_root=is_root)
    if selection_set is node.selection_set:
        return node
    return replace(node, selection_set=selection_set)


def _visit_selection_set(
    selection_set: Optional[graphql.SelectionSetNode], *, is_root: bool
) -> Optional[graphql.SelectionSetNode]:
    if selection_set is None:
        # Leaf field
        return None
    selections = tuple(_visit_selection(selection) for selection in selection_set.selections or ())
    if not _same(selections, selection_set.selections):
        selection_set = replace(selection_set, selections=selections)
    if is_root:
        return selection_set
    return add_typename(selection_set)


def _visit_selection(selection: graphql.SelectionNode) -> graphql.SelectionNode:
    if isinstance(selection, (graphql.FieldNode, graphql.InlineFragmentNode)):
        return _visit_owner(selection, is_root=False)
    # Fragment spreads are handled through their own definitions
    return selection


def _same(new: Sequence[graphql.Node], old: Optional[Sequence[graphql.Node]]) -> bool:
    old = old or ()
    return len(new) == len(old) and all(a is b for a, b in zip(new, old))

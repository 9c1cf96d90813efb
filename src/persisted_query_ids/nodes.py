import typing

import graphql

TYPENAME = "__typename"
INTROSPECTION_PREFIX = "__"

# Shared by every normalized selection set, never mutated
TYPENAME_FIELD = graphql.FieldNode(
    name=graphql.NameNode(value=TYPENAME),
    arguments=(),
    directives=(),
)

N = typing.TypeVar("N", bound=graphql.Node)


def replace(node: N, **changes: typing.Any) -> N:
    """Build a new node of the same kind with the given attributes replaced."""
    values = {key: getattr(node, key) for key in node.keys}
    values.update(changes)
    return node.__class__(**values)


def is_introspection_field(selection: graphql.SelectionNode) -> bool:
    # `__typename` itself also matches the prefix
    return isinstance(selection, graphql.FieldNode) and selection.name.value.startswith(INTROSPECTION_PREFIX)

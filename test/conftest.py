import graphql
import pytest
from hypothesis import HealthCheck, settings
from hypothesis import strategies as st

settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow], deadline=None)
settings.load_profile("default")


DOCUMENT = """
query GetBook($id: ID!) {
  book(id: $id) {
    title
    ...BookAuthor
  }
}

fragment BookAuthor on Book {
  author {
    ...AuthorName
  }
}

fragment AuthorName on Author {
  name
}
"""


@pytest.fixture(scope="session")
def document():
    return graphql.parse(DOCUMENT)


@pytest.fixture(scope="session")
def parse():
    def inner(*sources):
        return [graphql.parse(source) for source in sources]

    return inner


# Strategies for arbitrary selection trees.
# `__typename` & `__schema` show up now and then to exercise the introspection check

FIELD_NAMES = st.sampled_from(["id", "name", "title", "author", "books", "node", "__typename", "__schema"])
TYPE_NAMES = st.sampled_from(["Book", "Author", "Node"])


def field(name, selections=None):
    selection_set = None if selections is None else graphql.SelectionSetNode(selections=selections)
    return graphql.FieldNode(name=graphql.NameNode(value=name), arguments=[], directives=[], selection_set=selection_set)


def inline_fragment(type_name, selections):
    return graphql.InlineFragmentNode(
        type_condition=graphql.NamedTypeNode(name=graphql.NameNode(value=type_name)),
        directives=[],
        selection_set=graphql.SelectionSetNode(selections=selections),
    )


def make_query(name, selections):
    return graphql.DocumentNode(
        definitions=[
            graphql.OperationDefinitionNode(
                operation=graphql.OperationType.QUERY,
                name=graphql.NameNode(value=name),
                variable_definitions=[],
                directives=[],
                selection_set=graphql.SelectionSetNode(selections=selections),
            )
        ]
    )


leaf_fields = st.builds(field, FIELD_NAMES)


def extend(children):
    return st.lists(
        st.one_of(
            leaf_fields,
            st.builds(field, FIELD_NAMES, children),
            st.builds(inline_fragment, TYPE_NAMES, children),
        ),
        min_size=1,
        max_size=4,
    )


selections = st.recursive(st.lists(leaf_fields, min_size=1, max_size=4), extend, max_leaves=12)
queries = st.builds(make_query, st.just("Query"), selections)


def fragment_spread(name):
    return graphql.FragmentSpreadNode(name=graphql.NameNode(value=name), directives=[])


def fragment_definition(name, type_name, selections):
    return graphql.FragmentDefinitionNode(
        name=graphql.NameNode(value=name),
        type_condition=graphql.NamedTypeNode(name=graphql.NameNode(value=type_name)),
        directives=[],
        selection_set=graphql.SelectionSetNode(selections=selections),
    )


@st.composite
def with_spreads(draw, names):
    """Selections with spreads of the given fragments mixed in at arbitrary positions."""
    nodes = list(draw(selections))
    if names:
        for name in draw(st.lists(st.sampled_from(names), max_size=3)):
            nodes.insert(draw(st.integers(min_value=0, max_value=len(nodes))), fragment_spread(name))
    return nodes


@st.composite
def queries_with_fragments(draw):
    # `F<i>` may only spread `F<j>` with j > i, so there are no cycles
    count = draw(st.integers(min_value=1, max_value=4))
    names = [f"F{idx}" for idx in range(count)]
    fragments = [
        fragment_definition(name, draw(TYPE_NAMES), draw(with_spreads(names[idx + 1 :])))
        for idx, name in enumerate(names)
    ]
    operation = make_query("Query", draw(with_spreads(names))).definitions[0]
    definitions = [operation, *draw(st.permutations(fragments))]
    return graphql.DocumentNode(definitions=definitions)


@pytest.fixture(scope="session")
def query_documents():
    return queries


@pytest.fixture(scope="session")
def documents_with_fragments():
    return queries_with_fragments()

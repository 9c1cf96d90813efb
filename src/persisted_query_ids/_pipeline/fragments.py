import logging
from typing import Dict, Iterator, List, Optional

import graphql

from ..errors import FragmentCycleError, UnknownFragmentError
from ..types import Definition, FragmentIndex, FragmentSources

logger = logging.getLogger(__name__)


def find_fragments(docs: FragmentSources) -> FragmentIndex:
    """Index all fragment definitions by name.

    A later definition with the same name replaces an earlier one.

    :param docs: Documents and / or standalone fragment definitions.
    """
    fragments: FragmentIndex = {}
    for doc in docs:
        definitions = [doc] if isinstance(doc, graphql.FragmentDefinitionNode) else doc.definitions
        for definition in definitions:
            if isinstance(definition, graphql.FragmentDefinitionNode):
                name = definition.name.value
                if name in fragments:
                    logger.debug("Fragment %s is defined more than once, using the last definition", name)
                fragments[name] = definition
    logger.debug("Indexed %d fragments", len(fragments))
    return fragments


def find_used_fragments(
    definition: Definition,
    known_fragments: FragmentIndex,
    _used_fragments: Optional[Dict[str, graphql.FragmentDefinitionNode]] = None,
    _path: Optional[List[str]] = None,
) -> Dict[str, graphql.FragmentDefinitionNode]:
    """Collect fragments that the definition spreads, directly or through other fragments.

    The result is ordered by discovery during a depth-first walk: a fragment comes right before
    the fragments that only it pulls in.

    :param definition: An operation or a fragment definition.
    :param known_fragments: Index built by `find_fragments`.
    """
    used_fragments = {} if _used_fragments is None else _used_fragments
    if _path is None:
        _path = [definition.name.value] if isinstance(definition, graphql.FragmentDefinitionNode) else []
    for spread in iter_fragment_spreads(definition.selection_set):
        name = spread.name.value
        if name in _path:
            raise FragmentCycleError(tuple(_path[_path.index(name) :]) + (name,))
        if name in used_fragments:
            # Its own dependencies are already collected
            continue
        fragment = known_fragments.get(name)
        if fragment is None:
            raise UnknownFragmentError(name)
        used_fragments[name] = fragment
        _path.append(name)
        find_used_fragments(fragment, known_fragments, used_fragments, _path)
        _path.pop()
    return used_fragments


def iter_fragment_spreads(selection_set: Optional[graphql.SelectionSetNode]) -> Iterator[graphql.FragmentSpreadNode]:
    """Yield fragment spreads in document order, descending into fields and inline fragments."""
    if selection_set is None:
        return
    for selection in selection_set.selections or ():
        if isinstance(selection, graphql.FragmentSpreadNode):
            yield selection
        elif isinstance(selection, (graphql.FieldNode, graphql.InlineFragmentNode)):
            yield from iter_fragment_spreads(selection.selection_set)

"""Build persisted query id mappings from GraphQL documents."""
import json
import logging
from typing import Any, Iterable, Iterator, List, Mapping, Union

import graphql

from ..errors import MissingOperationNameError
from ..types import QueryIds
from .canonical import canonical_query, create_hash
from .config import Config
from .fragments import find_fragments
from .mode import OutputMode
from .typename import add_typename_to_document

logger = logging.getLogger(__name__)

JSON_INDENT = 3


def generate_query_ids(documents: Iterable[graphql.DocumentNode], mode: Union[OutputMode, str]) -> QueryIds:
    """Compute the persisted query mapping for all operations in the documents.

    :param documents: Parsed GraphQL documents. They are not modified.
    :param mode: ``client`` maps operation names to digests, ``server`` maps digests to query texts.
    """
    mode = OutputMode.from_value(mode)
    docs = [add_typename_to_document(document) for document in documents]
    known_fragments = find_fragments(docs)
    out: QueryIds = {}
    for operation in iter_operations(docs):
        if operation.name is None:
            raise MissingOperationNameError()
        name = operation.name.value
        query = canonical_query(operation, known_fragments)
        digest = create_hash(query)
        logger.debug("Operation %s has id %s", name, digest)
        key, value = (name, digest) if mode is OutputMode.CLIENT else (digest, query)
        if key in out:
            logger.debug("Replacing an earlier entry for %s", key)
        out[key] = value
    return out


def iter_operations(docs: Iterable[graphql.DocumentNode]) -> Iterator[graphql.OperationDefinitionNode]:
    for doc in docs:
        for definition in doc.definitions:
            if isinstance(definition, graphql.OperationDefinitionNode):
                yield definition


def plugin(documents: Iterable[Any], config: Union[Config, Mapping[str, Any]]) -> str:
    """Entry point for a code generation host.

    :param documents: `graphql.DocumentNode` instances or document files exposing one as ``content``.
    :param config: Plugin configuration, its ``output`` must be ``client`` or ``server``.
    :return: The mapping as JSON.
    """
    if not isinstance(config, Config):
        config = Config.from_mapping(config)
    out = generate_query_ids(unwrap_documents(documents), config.output)
    return dump(out)


def unwrap_documents(documents: Iterable[Any]) -> List[graphql.DocumentNode]:
    return [document if isinstance(document, graphql.DocumentNode) else document.content for document in documents]


def dump(out: QueryIds) -> str:
    return json.dumps(out, indent=JSON_INDENT, ensure_ascii=False)

from typing import Dict, Iterable, Union

import graphql

# Top-level definitions that take part in dependency resolution
Definition = Union[graphql.OperationDefinitionNode, graphql.FragmentDefinitionNode]
FragmentIndex = Dict[str, graphql.FragmentDefinitionNode]
FragmentSources = Iterable[Union[graphql.DocumentNode, graphql.FragmentDefinitionNode]]
QueryIds = Dict[str, str]

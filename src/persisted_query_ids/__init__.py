# pylint: disable=unused-import
from ._pipeline.canonical import canonical_query, create_hash, print_definitions
from ._pipeline.config import Config, load_config
from ._pipeline.fragments import find_fragments, find_used_fragments
from ._pipeline.generate import generate_query_ids, plugin
from ._pipeline.mode import OutputMode
from ._pipeline.typename import add_typename_to_document
from .errors import (
    FragmentCycleError,
    InvalidModeError,
    MissingOperationNameError,
    PersistedQueryError,
    UnknownFragmentError,
)

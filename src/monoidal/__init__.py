import logging

from .combinators import (
    LawReport,
    LawViolation,
    assert_laws,
    check_laws,
    dual,
    mapping,
    optional,
    product,
    tuple_of,
)
from .fold import fold, fold_chunked, fold_map, fold_right, fold_tree
from .instances import ALL, ANY, FIRST, LAST, LIST, MAX, MIN, PRODUCT, STRING, SUM, TUPLE, UNION
from .kernel import (
    InvalidArgumentError,
    LawViolationError,
    Monoid,
    MonoidError,
    MonoidNotFoundError,
    Trace,
    TraceEvent,
)
from .parallel import FoldConfig, concurrent_fold, concurrent_fold_map
from .registry import MonoidRegistry, default_registry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
    "Monoid",
    # Reduction
    "fold",
    "fold_map",
    "fold_right",
    "fold_tree",
    "fold_chunked",
    "concurrent_fold",
    "concurrent_fold_map",
    "FoldConfig",
    # Combinators
    "product",
    "tuple_of",
    "mapping",
    "dual",
    "optional",
    # Laws
    "check_laws",
    "assert_laws",
    "LawReport",
    "LawViolation",
    # Instances
    "SUM",
    "PRODUCT",
    "STRING",
    "LIST",
    "TUPLE",
    "ALL",
    "ANY",
    "MAX",
    "MIN",
    "UNION",
    "FIRST",
    "LAST",
    # Registry
    "MonoidRegistry",
    "default_registry",
    # Errors
    "MonoidError",
    "InvalidArgumentError",
    "MonoidNotFoundError",
    "LawViolationError",
    # Tracing
    "Trace",
    "TraceEvent",
]

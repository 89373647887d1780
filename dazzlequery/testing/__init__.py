"""Testing helpers for DazzleQuery consumers."""

from .fixtures import (
    build_tree,
    build_document,
    sample_document,
    make_cycle,
    RecordingPredicate,
    by_name,
)

__all__ = [
    "build_tree",
    "build_document",
    "sample_document",
    "make_cycle",
    "RecordingPredicate",
    "by_name",
]

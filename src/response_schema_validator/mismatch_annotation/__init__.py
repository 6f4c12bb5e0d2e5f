"""Validation and mismatch annotation exports."""

from .annotation_outcomes import AnnotationResult, SchemaIssue
from .annotator import annotate_mismatches
from .data_paths import MISSING, DataPath
from .validation_engine import CompiledValidator, SchemaCompilationError, ValidationEngine

__all__ = [
    "MISSING",
    "AnnotationResult",
    "CompiledValidator",
    "DataPath",
    "SchemaCompilationError",
    "SchemaIssue",
    "ValidationEngine",
    "annotate_mismatches",
]

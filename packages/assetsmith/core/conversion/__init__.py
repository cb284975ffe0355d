"""Batch conversion of one source image into the store asset catalog.

Request validation, selection resolution, concurrent per-asset transforms,
outcome collection, and archive packaging.
"""

from assetsmith.core.conversion.models import (
    ConversionOutcome,
    ConversionRequest,
    ConversionResult,
    SourceImage,
    failure_outcome,
    success_outcome,
)
from assetsmith.core.conversion.orchestrator import (
    Transformer,
    convert,
    convert_async,
    convert_request,
    convert_request_async,
    validate_source,
)

__all__ = [
    # Models
    "ConversionOutcome",
    "ConversionRequest",
    "ConversionResult",
    "SourceImage",
    "failure_outcome",
    "success_outcome",
    # Orchestration
    "Transformer",
    "convert",
    "convert_async",
    "convert_request",
    "convert_request_async",
    "validate_source",
]

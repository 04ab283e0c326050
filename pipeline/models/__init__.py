"""
Models package for Pipeline models

NOTE: transient request/response models, nothing here is persisted
"""

from .core import (
    # Enums
    Purpose,
    Tone,

    # Request / result models
    EmailRequest,
    EmailMetadata,
    EmailResult,

    # Core data models
    PipelineData,
    StepResult,
)

__all__ = [
    # Enums
    "Purpose",
    "Tone",

    # Request / result models
    "EmailRequest",
    "EmailMetadata",
    "EmailResult",

    # Core data models
    "PipelineData",
    "StepResult",
]

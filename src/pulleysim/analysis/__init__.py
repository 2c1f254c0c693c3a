"""
Pulleysim analysis - narrative commentary from an external text service.

Example:
    >>> from pulleysim.analysis import analyze_system
    >>> text = analyze_system(config, result)  # falls back to a fixed message on failure
"""

from .narrative import (
    NarrativeService,
    GeminiNarrativeService,
    NarrativeSettings,
    ServiceError,
    build_prompt,
    analyze_system,
    ANALYSIS_ERROR_MESSAGE,
    ANALYSIS_UNAVAILABLE_MESSAGE,
)

__all__ = [
    "NarrativeService",
    "GeminiNarrativeService",
    "NarrativeSettings",
    "ServiceError",
    "build_prompt",
    "analyze_system",
    "ANALYSIS_ERROR_MESSAGE",
    "ANALYSIS_UNAVAILABLE_MESSAGE",
]

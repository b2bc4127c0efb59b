"""Data models for boot version resolution."""

from dataclasses import dataclass
from enum import Enum


class ResolutionStep(Enum):
    """Which rule of the resolver produced the final version."""
    FALLBACK = "fallback"
    SANITIZED_CANDIDATE = "sanitized_candidate"
    DEFAULT_PICK = "default_pick"
    EXACT = "exact"
    RAW_EXACT = "raw_exact"
    PREFIX = "prefix"
    VERIFIED_RAW = "verified_raw"


@dataclass(frozen=True)
class BootVersionResolution:
    """Resolution outcome: the version to send plus how it was chosen."""
    candidate: str
    version: str
    step: ResolutionStep
    metadata_valid: bool

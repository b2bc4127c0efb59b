"""Initializr metadata client and schema."""

from .fetcher import fetch_metadata, metadata_url, save_debug_payload
from .models import (
    DependencyGroup,
    MetadataCategory,
    MetadataDocument,
    MetadataOption,
    load_metadata,
    parse_metadata,
)

__all__ = [
    "fetch_metadata",
    "metadata_url",
    "save_debug_payload",
    "DependencyGroup",
    "MetadataCategory",
    "MetadataDocument",
    "MetadataOption",
    "load_metadata",
    "parse_metadata",
]

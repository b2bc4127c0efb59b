"""Boot version sanitization, ordering and resolution."""

from .models import BootVersionResolution, ResolutionStep
from .parser import sanitize
from .resolver import BootVersionResolver, resolve_boot_version

__all__ = [
    "BootVersionResolution",
    "ResolutionStep",
    "sanitize",
    "BootVersionResolver",
    "resolve_boot_version",
]

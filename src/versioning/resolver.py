"""Spring Boot version resolver.

Turns a user supplied or metadata advertised version into one the
Initializr API accepts. Resolution never raises: every branch ends in a
usable version string.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from initializr.models import MetadataCategory, load_metadata
from .models import BootVersionResolution, ResolutionStep
from .ordering import highest, highest_stable
from .parser import matches_prefix, sanitize, version_prefix
from .verify import probe_boot_version

logger = logging.getLogger(__name__)

Prober = Callable[[str], bool]


class BootVersionResolver:
    """Resolve boot version candidates against a metadata document.

    Args:
        verify: Enable the live probe against the generation endpoint for
            candidates that match nothing in the metadata.
        api_url: Service base URL used by the default prober.
        prober: Replacement probe taking a version and returning success.
        fallback: Version used when neither metadata nor candidate help.
    """

    def __init__(
        self,
        verify: bool = False,
        api_url: str = Constants.SPRING_API,
        prober: Optional[Prober] = None,
        fallback: str = Constants.FALLBACK_BOOT_VERSION,
        timeout: Optional[float] = None,
    ):
        self.verify = verify
        self.api_url = api_url
        self.fallback = fallback
        self.timeout = timeout
        self._prober = prober

    def resolve(self, metadata: Any, candidate: Optional[str]) -> str:
        """Return the API-acceptable version for ``candidate``."""
        return self.resolve_detailed(metadata, candidate).version

    def resolve_detailed(self, metadata: Any, candidate: Optional[str]) -> BootVersionResolution:
        """Resolve ``candidate`` and report which rule decided the result.

        Args:
            metadata: Raw metadata text/bytes/mapping, a MetadataDocument, or None.
            candidate: Version typed by the user or taken from metadata.
        """
        candidate = (candidate or "").strip()
        document = load_metadata(metadata)
        category = document.boot_version if document is not None else None

        if category is None:
            cleaned = sanitize(candidate)
            if cleaned:
                return self._result(candidate, cleaned, ResolutionStep.SANITIZED_CANDIDATE, False)
            return self._result(candidate, self.fallback, ResolutionStep.FALLBACK, False)

        if not candidate:
            return self._default_result(candidate, category)

        available = category.ids()
        sanitized = sanitize(candidate)

        if sanitized and sanitized in available:
            return self._result(candidate, sanitized, ResolutionStep.EXACT, True)

        if candidate in available:
            return self._result(candidate, sanitized, ResolutionStep.RAW_EXACT, True)

        matched = self._pick_prefix(sanitized, available)
        if matched is not None:
            return self._result(candidate, sanitize(matched), ResolutionStep.PREFIX, True)

        if self.verify and sanitized:
            verified = self._verify(candidate, sanitized)
            if verified is not None:
                return verified

        logger.warning("Version '%s' not found, using the default version", candidate)
        return self._default_result(candidate, category)

    def default_pick(self, category: Optional[MetadataCategory]) -> Optional[str]:
        """Declared default if present, otherwise the highest non-snapshot id."""
        if category is None:
            return None
        if category.default:
            return category.default
        return highest_stable(category.ids(), Constants.SNAPSHOT_MARKER)

    def _default_result(self, candidate: str, category: MetadataCategory) -> BootVersionResolution:
        picked = sanitize(self.default_pick(category))
        if not picked:
            return self._result(candidate, self.fallback, ResolutionStep.FALLBACK, True)
        return self._result(candidate, picked, ResolutionStep.DEFAULT_PICK, True)

    @staticmethod
    def _pick_prefix(sanitized: str, available: List[str]) -> Optional[str]:
        prefix = version_prefix(sanitized)
        if not prefix:
            return None
        return highest(v for v in available if matches_prefix(v, prefix))

    def _probe(self, version: str) -> bool:
        if self._prober is not None:
            return self._prober(version)
        return probe_boot_version(version, api_url=self.api_url, timeout=self.timeout)

    def _verify(self, candidate: str, sanitized: str) -> Optional[BootVersionResolution]:
        """Return the raw candidate only when the API rejects the sanitized form but accepts the raw one."""
        if self._probe(sanitized):
            return None
        if sanitized != candidate and self._probe(candidate):
            logger.warning("API requires version format: %s", candidate)
            return self._result(candidate, candidate, ResolutionStep.VERIFIED_RAW, True)
        return None

    @staticmethod
    def _result(candidate: str, version: str, step: ResolutionStep, valid: bool) -> BootVersionResolution:
        if is_debug_enabled(logger):
            logger.debug(
                "Boot version resolved",
                extra=extra_context(
                    event="decision",
                    component="resolver",
                    action="resolve_boot_version",
                    outcome=step.value,
                    candidate=candidate,
                    resolved=version,
                    metadata_valid=valid
                )
            )
        return BootVersionResolution(candidate=candidate, version=version, step=step, metadata_valid=valid)


def resolve_boot_version(
    metadata: Any,
    candidate: Optional[str],
    *,
    verify: bool = False,
    api_url: str = Constants.SPRING_API,
    prober: Optional[Prober] = None,
    timeout: Optional[float] = None,
) -> str:
    """Resolve a boot version candidate; the single entry point for all flows."""
    resolver = BootVersionResolver(verify=verify, api_url=api_url, prober=prober, timeout=timeout)
    return resolver.resolve(metadata, candidate)

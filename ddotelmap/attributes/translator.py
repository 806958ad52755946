"""Attribute translator that keeps track of resources missing a source."""

from __future__ import annotations

import threading
from collections import Counter
from collections.abc import Mapping
from typing import Any

from ddotelmap.attributes.hostname import source_from_attrs
from ddotelmap.source import Source

__all__ = ["MISSING_SOURCE_METRIC_NAME", "Translator"]

MISSING_SOURCE_METRIC_NAME = "datadog.otlp_translator.resources.missing_source"


def _set_key(attribute_set: Mapping[str, Any] | None) -> frozenset:
    return frozenset((attribute_set or {}).items())


class Translator:
    """Translator of attributes.

    Counts, per attribute set, the resources for which no source was found.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._missing_sources: Counter[frozenset] = Counter()

    def resource_to_source(
        self, resource: Mapping[str, Any], attribute_set: Mapping[str, Any] | None = None
    ) -> Source | None:
        """The source of a resource's attributes; a miss is counted."""
        src = source_from_attrs(resource)
        if src is None:
            with self._lock:
                self._missing_sources[_set_key(attribute_set)] += 1
        return src

    def attributes_to_source(self, attrs: Mapping[str, Any]) -> Source | None:
        """The source of a set of attributes, without counting misses."""
        return source_from_attrs(attrs)

    def missing_source_count(self, attribute_set: Mapping[str, Any] | None = None) -> int:
        """Number of resources without a source recorded for an attribute set."""
        with self._lock:
            return self._missing_sources[_set_key(attribute_set)]
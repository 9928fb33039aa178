"""Providers for log shipping and relationship-tracking endpoints.

Both resolve a ``host``/``port`` pair. The ``port`` property reads an
unresolved port as ``0`` so ``can_provide`` can compare it numerically, while
``values()`` keeps it ``None`` to match its ``NONE`` provenance.
"""

from __future__ import annotations

from typing import Any, ClassVar

from ..application.converters import to_bool, to_int, to_json_map
from ..application.fields import FieldConfigProvider, FieldSpec, has_text


class ElkLoggerConfigProvider(FieldConfigProvider):
    """Resolve the Logstash endpoint and the custom fields attached to every event.

    ``custom_fields`` is a JSON object, e.g. ``{"service": "orders"}``.
    """

    NAME: ClassVar[str] = "elk-logger"
    FIELDS = (
        FieldSpec("host", "lcp.elk.host", "LCP_ELK_HOST", "elk.host"),
        FieldSpec("port", "lcp.elk.port", "LCP_ELK_PORT", "elk.port", convert=to_int),
        FieldSpec("custom_fields", "lcp.elk.customFields", "LCP_ELK_CUSTOM_FIELDS", "elk.customFields", convert=to_json_map),
    )

    @property
    def host(self) -> str | None:
        return self.value("host")

    @property
    def port(self) -> int:
        return self.value("port") or 0

    @property
    def custom_fields(self) -> dict[str, Any] | None:
        return self.value("custom_fields")

    def can_provide(self) -> bool:
        return has_text(self.host) and self.port > 0


class ElucidationConfigProvider(FieldConfigProvider):
    """Resolve the Elucidation server endpoint and whether recording is enabled."""

    NAME: ClassVar[str] = "elucidation"
    FIELDS = (
        FieldSpec("host", "lcp.elucidation.host", "LCP_ELUCIDATION_HOST", "elucidation.host"),
        FieldSpec("port", "lcp.elucidation.port", "LCP_ELUCIDATION_PORT", "elucidation.port", convert=to_int),
        FieldSpec(
            "enabled",
            "lcp.elucidation.enabled",
            "LCP_ELUCIDATION_ENABLED",
            "elucidation.enabled",
            default=False,
            convert=to_bool,
        ),
    )

    @property
    def host(self) -> str | None:
        return self.value("host")

    @property
    def port(self) -> int:
        return self.value("port") or 0

    @property
    def enabled(self) -> bool:
        return self.value("enabled")

    def can_provide(self) -> bool:
        return has_text(self.host) and self.port > 0

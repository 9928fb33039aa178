"""Hibernate ORM properties provider."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, ClassVar, Final, Mapping

from ..application.converters import to_json_map
from ..application.fields import FieldConfigProvider, FieldSpec

DEFAULT_HIBERNATE_PROPERTIES: Final[Mapping[str, Any]] = MappingProxyType(
    {
        "hibernate.show_sql": False,
        "hibernate.format_sql": True,
        "hibernate.use_sql_comments": True,
    }
)


class HibernateConfigProvider(FieldConfigProvider):
    """Resolve Hibernate properties from a JSON object.

    Resolved entries are laid over :data:`DEFAULT_HIBERNATE_PROPERTIES`, so a
    source only has to name the settings it changes. Provenance reports the
    source that supplied the overrides.

    Examples
    --------
    >>> from lib_config_provider.adapters.environment.default import DefaultEnvironment
    >>> from lib_config_provider.adapters.external.default import ExternalConfigProvider
    >>> environment = DefaultEnvironment(environ={}, properties={"lcp.hibernate.properties": '{"hibernate.show_sql": true}'})
    >>> external = ExternalConfigProvider(explicit_path="/nonexistent", environment=environment)
    >>> provider = HibernateConfigProvider(external_config=external, environment=environment)
    >>> provider.hibernate_properties["hibernate.show_sql"], provider.hibernate_properties["hibernate.format_sql"]
    (True, True)
    >>> str(provider.resolved_by()["hibernate_properties"])
    'SYSTEM_PROPERTY'
    """

    NAME: ClassVar[str] = "hibernate"
    FIELDS = (
        FieldSpec(
            "hibernate_properties",
            "lcp.hibernate.properties",
            "LCP_HIBERNATE_PROPERTIES",
            "hibernate.properties",
            default=DEFAULT_HIBERNATE_PROPERTIES,
            convert=to_json_map,
        ),
    )

    def _complete_values(self, values: dict[str, Any]) -> dict[str, Any]:
        values["hibernate_properties"] = {**DEFAULT_HIBERNATE_PROPERTIES, **(values["hibernate_properties"] or {})}
        return values

    @property
    def hibernate_properties(self) -> dict[str, Any]:
        return self.value("hibernate_properties")

    def can_provide(self) -> bool:
        return bool(self.hibernate_properties)

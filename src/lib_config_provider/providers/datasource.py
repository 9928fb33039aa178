"""Relational data source provider.

Purpose
-------
Resolve the connection settings of a pooled JDBC-style data source and expose
them as one immutable :class:`DataSource` value.

Contents
--------
* :class:`DataSourceDefaults` – caller-supplied fallbacks replacing the
  compiled-in ones (pool sizes 100/10/10, no connection details).
* :class:`DataSource` – the resolved shape.
* :class:`DataSourceConfigProvider` – the provider.

System Role
-----------
``orm_properties`` is a JSON object merged over
:attr:`DataSourceDefaults.orm_properties`; the password is a secret field and
never appears in logs or in the CLI output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Mapping

from ..adapters.external.default import ExternalConfigProvider
from ..application.converters import to_int, to_json_map
from ..application.fields import FieldConfigProvider, FieldSpec, has_text
from ..application.ports import RuntimeEnvironment
from ..domain.strategy import FieldResolverStrategy


@dataclass(frozen=True)
class DataSourceDefaults:
    """Fallback values used when no source supplies a field."""

    driver_class: str | None = None
    url: str | None = None
    user: str | None = None
    password: str | None = field(default=None, repr=False)
    max_size: int = 100
    min_size: int = 10
    initial_size: int = 10
    orm_properties: Mapping[str, Any] = field(default_factory=dict)

    def field_defaults(self) -> dict[str, Any]:
        """Return per-field fallbacks, omitting the ones left unset."""

        candidates = {
            "driver_class": self.driver_class,
            "url": self.url,
            "user": self.user,
            "password": self.password,
            "max_size": self.max_size,
            "min_size": self.min_size,
            "initial_size": self.initial_size,
        }
        return {name: value for name, value in candidates.items() if value is not None}


@dataclass(frozen=True)
class DataSource:
    driver_class: str | None
    url: str | None
    user: str | None
    password: str | None = field(repr=False)
    max_size: int
    min_size: int
    initial_size: int
    orm_properties: Mapping[str, Any]


class DataSourceConfigProvider(FieldConfigProvider):
    """Resolve data source settings.

    Examples
    --------
    >>> from lib_config_provider.adapters.environment.default import DefaultEnvironment
    >>> environment = DefaultEnvironment(environ={"LCP_DATASOURCE_URL": "jdbc:postgresql://db/orders"}, properties={})
    >>> external = ExternalConfigProvider(explicit_path="/nonexistent", environment=environment)
    >>> provider = DataSourceConfigProvider(external_config=external, environment=environment)
    >>> provider.can_provide(), provider.data_source.max_size
    (True, 100)
    """

    NAME: ClassVar[str] = "datasource"
    FIELDS = (
        FieldSpec("driver_class", "lcp.datasource.driverClass", "LCP_DATASOURCE_DRIVER_CLASS", "datasource.driverClass"),
        FieldSpec("url", "lcp.datasource.url", "LCP_DATASOURCE_URL", "datasource.url"),
        FieldSpec("user", "lcp.datasource.user", "LCP_DATASOURCE_USER", "datasource.user"),
        FieldSpec("password", "lcp.datasource.password", "LCP_DATASOURCE_PASSWORD", "datasource.password", secret=True),
        FieldSpec(
            "max_size", "lcp.datasource.maxSize", "LCP_DATASOURCE_MAX_SIZE", "datasource.maxSize", default=100, convert=to_int
        ),
        FieldSpec(
            "min_size", "lcp.datasource.minSize", "LCP_DATASOURCE_MIN_SIZE", "datasource.minSize", default=10, convert=to_int
        ),
        FieldSpec(
            "initial_size",
            "lcp.datasource.initialSize",
            "LCP_DATASOURCE_INITIAL_SIZE",
            "datasource.initialSize",
            default=10,
            convert=to_int,
        ),
        FieldSpec(
            "orm_properties",
            "lcp.datasource.ormProperties",
            "LCP_DATASOURCE_ORM_PROPERTIES",
            "datasource.ormProperties",
            default=MappingProxyType({}),
            convert=to_json_map,
        ),
    )

    def __init__(
        self,
        *,
        external_config: ExternalConfigProvider | None = None,
        environment: RuntimeEnvironment | None = None,
        strategies: Mapping[str, FieldResolverStrategy[Any] | None] | None = None,
        defaults: DataSourceDefaults | None = None,
    ) -> None:
        self._defaults = defaults or DataSourceDefaults()
        super().__init__(
            external_config=external_config,
            environment=environment,
            strategies=strategies,
            defaults=self._defaults.field_defaults(),
        )
        self._data_source = DataSource(**self.values())

    def _complete_values(self, values: dict[str, Any]) -> dict[str, Any]:
        values["orm_properties"] = {**self._defaults.orm_properties, **(values["orm_properties"] or {})}
        return values

    @property
    def data_source(self) -> DataSource:
        return self._data_source

    def can_provide(self) -> bool:
        return has_text(self._data_source.url)

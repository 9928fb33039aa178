"""Concrete configuration providers and their CLI registry."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..application.fields import FieldConfigProvider
from .connections import ActiveMQConfigProvider, MongoConfigProvider, SharedStorageConfigProvider, ZooKeeperConfigProvider
from .datasource import DataSource, DataSourceConfigProvider, DataSourceDefaults
from .hibernate import DEFAULT_HIBERNATE_PROPERTIES, HibernateConfigProvider
from .identity import NetworkIdentityConfigProvider, ServiceIdentityConfigProvider
from .logging_endpoints import ElkLoggerConfigProvider, ElucidationConfigProvider
from .tls import TlsConfigProvider, TlsConfiguration, TlsDefaults

PROVIDERS: Mapping[str, type[FieldConfigProvider]] = MappingProxyType(
    {
        provider.NAME: provider
        for provider in (
            ServiceIdentityConfigProvider,
            NetworkIdentityConfigProvider,
            ZooKeeperConfigProvider,
            ActiveMQConfigProvider,
            MongoConfigProvider,
            SharedStorageConfigProvider,
            ElkLoggerConfigProvider,
            ElucidationConfigProvider,
            HibernateConfigProvider,
            DataSourceConfigProvider,
            TlsConfigProvider,
        )
    }
)

__all__ = [
    "PROVIDERS",
    "ActiveMQConfigProvider",
    "DEFAULT_HIBERNATE_PROPERTIES",
    "DataSource",
    "DataSourceConfigProvider",
    "DataSourceDefaults",
    "ElkLoggerConfigProvider",
    "ElucidationConfigProvider",
    "HibernateConfigProvider",
    "MongoConfigProvider",
    "NetworkIdentityConfigProvider",
    "ServiceIdentityConfigProvider",
    "SharedStorageConfigProvider",
    "TlsConfigProvider",
    "TlsConfiguration",
    "TlsDefaults",
    "ZooKeeperConfigProvider",
]

"""Single-value connection providers.

Each provider here resolves one connection string or path and can provide
whenever that value is non-blank.
"""

from __future__ import annotations

from typing import ClassVar

from ..application.fields import FieldConfigProvider, FieldSpec, has_text


class ZooKeeperConfigProvider(FieldConfigProvider):
    NAME: ClassVar[str] = "zookeeper"
    FIELDS = (FieldSpec("connect_string", "lcp.zookeeper.connection", "LCP_ZOOKEEPER_CONNECTION", "zookeeper.connection"),)

    @property
    def connect_string(self) -> str | None:
        return self.value("connect_string")

    def can_provide(self) -> bool:
        return has_text(self.connect_string)


class ActiveMQConfigProvider(FieldConfigProvider):
    NAME: ClassVar[str] = "activemq"
    FIELDS = (FieldSpec("servers", "lcp.amq.connection", "LCP_AMQ_CONNECTION", "amq.connection"),)

    @property
    def servers(self) -> str | None:
        return self.value("servers")

    def can_provide(self) -> bool:
        return has_text(self.servers)


class MongoConfigProvider(FieldConfigProvider):
    NAME: ClassVar[str] = "mongo"
    FIELDS = (FieldSpec("url", "lcp.mongo.connection", "LCP_MONGO_CONNECTION", "mongo.connection"),)

    @property
    def url(self) -> str | None:
        return self.value("url")

    def can_provide(self) -> bool:
        return has_text(self.url)


class SharedStorageConfigProvider(FieldConfigProvider):
    """Resolve the mount point of storage shared between service instances."""

    NAME: ClassVar[str] = "shared-storage"
    FIELDS = (
        FieldSpec("shared_storage_path", "lcp.shared.storage.path", "LCP_SHARED_STORAGE_PATH", "shared.storage.path"),
    )

    @property
    def shared_storage_path(self) -> str | None:
        return self.value("shared_storage_path")

    def can_provide(self) -> bool:
        return has_text(self.shared_storage_path)

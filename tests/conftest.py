from __future__ import annotations

from typing import Iterator

import pytest

from lib_config_provider.adapters.environment import default as environment_module


@pytest.fixture()
def restore_system_properties() -> Iterator[None]:
    """Restore the process-wide property table after a test that writes to it."""

    snapshot = dict(environment_module._SYSTEM_PROPERTIES)
    yield
    environment_module._SYSTEM_PROPERTIES.clear()
    environment_module._SYSTEM_PROPERTIES.update(snapshot)

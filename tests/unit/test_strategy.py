from __future__ import annotations

import pytest

from lib_config_provider.domain.strategy import (
    EMPTY_STRATEGY,
    FieldResolverStrategy,
    env_variable_strategy,
    explicit_value_strategy,
    external_property_strategy,
    supplier_strategy,
    system_property_strategy,
)


def test_empty_strategy_uses_every_default() -> None:
    assert EMPTY_STRATEGY.system_property_key_or_default("lcp.mongo.connection") == "lcp.mongo.connection"
    assert EMPTY_STRATEGY.env_variable_or_default("LCP_MONGO_CONNECTION") == "LCP_MONGO_CONNECTION"
    assert EMPTY_STRATEGY.external_property_or_default("mongo.connection") == "mongo.connection"
    assert EMPTY_STRATEGY.explicit_value is None
    assert EMPTY_STRATEGY.value_supplier is None


def test_key_overrides_are_independent() -> None:
    strategy = FieldResolverStrategy(system_property_key="custom.prop", external_property="custom.external")

    assert strategy.system_property_key_or_default("lcp.network") == "custom.prop"
    assert strategy.env_variable_or_default("LCP_NETWORK") == "LCP_NETWORK"
    assert strategy.external_property_or_default("network") == "custom.external"


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_blank_overrides_fall_back_to_defaults(blank) -> None:
    strategy = FieldResolverStrategy(system_property_key=blank, env_variable=blank, external_property=blank)

    assert strategy.system_property_key_or_default("lcp.network") == "lcp.network"
    assert strategy.env_variable_or_default("LCP_NETWORK") == "LCP_NETWORK"
    assert strategy.external_property_or_default("network") == "network"


def test_factories_set_a_single_field() -> None:
    assert explicit_value_strategy(42).explicit_value == 42
    assert system_property_strategy("a.b").system_property_key == "a.b"
    assert env_variable_strategy("A_B").env_variable == "A_B"
    assert external_property_strategy("a.b").external_property == "a.b"
    supplied = supplier_strategy(lambda: "lazy")
    assert supplied.value_supplier is not None and supplied.value_supplier() == "lazy"
    assert supplied.explicit_value is None


def test_strategies_are_immutable() -> None:
    strategy = explicit_value_strategy("pinned")
    with pytest.raises(AttributeError):
        strategy.explicit_value = "changed"  # type: ignore[misc]

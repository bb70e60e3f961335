"""Pytest fixtures for cargo fleet tests."""

import pytest

from cargofleet.domain import (
    ContainerSequence,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
    Vessel,
)


@pytest.fixture
def sequence() -> ContainerSequence:
    """Create a fresh id sequence isolated from the global one."""
    return ContainerSequence()


@pytest.fixture
def refrigerated_container(sequence) -> RefrigeratedContainer:
    """Create a sample refrigerated container for testing."""
    return RefrigeratedContainer(
        container_mass=2000,
        max_payload=10000,
        height=250,
        depth=300,
        product_type="Bananas",
        temperature=13.3,
        sequence=sequence,
    )


@pytest.fixture
def liquid_container(sequence) -> LiquidContainer:
    """Create a non-hazardous liquid container for testing."""
    return LiquidContainer(
        container_mass=1500,
        max_payload=12000,
        height=200,
        depth=250,
        is_hazardous=False,
        sequence=sequence,
    )


@pytest.fixture
def hazardous_liquid_container(sequence) -> LiquidContainer:
    """Create a hazardous liquid container for testing."""
    return LiquidContainer(
        container_mass=1500,
        max_payload=12000,
        height=200,
        depth=250,
        is_hazardous=True,
        sequence=sequence,
    )


@pytest.fixture
def gas_container(sequence) -> GasContainer:
    """Create a sample gas container for testing."""
    return GasContainer(
        container_mass=1800,
        max_payload=9000,
        height=220,
        depth=270,
        pressure=5,
        sequence=sequence,
    )


@pytest.fixture
def ship() -> Vessel:
    """Create a 5-container, 35 ton ship."""
    return Vessel(max_speed=30, max_container_count=5, max_weight=35)


@pytest.fixture
def other_ship() -> Vessel:
    """Create a 3-container, 80 ton ship."""
    return Vessel(max_speed=25, max_container_count=3, max_weight=80)


@pytest.fixture
def make_refrigerated(sequence):
    """Factory for refrigerated containers with a given tare and cargo mass."""

    def _make(container_mass: float, cargo_mass: float = 0) -> RefrigeratedContainer:
        container = RefrigeratedContainer(
            container_mass=container_mass,
            max_payload=max(cargo_mass, 1),
            height=250,
            depth=300,
            product_type="Fish",
            temperature=-18,
            sequence=sequence,
        )
        container.load_cargo(cargo_mass)
        return container

    return _make

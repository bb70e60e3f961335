#!/usr/bin/env python3
"""
Cargo Fleet Demo.

Demonstrates the core capabilities:
1. Loading cargo into liquid, gas and refrigerated containers
2. Loading containers onto a ship
3. Transferring a container between ships
4. Limit violations (overfill, hazard, capacity, weight)
"""

import logging

from cargofleet.config import configure_logging
from cargofleet.domain import (
    CargoError,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
    Vessel,
    notify_hazard,
)

logger = logging.getLogger("demo")


def print_section(title: str):
    """Print a section header."""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def main():
    configure_logging()

    print()
    print("*" * 60)
    print("*  Cargo Fleet: Container Ship Loading  *")
    print("*" * 60)

    ship1 = Vessel(max_speed=30, max_container_count=5, max_weight=35)
    ship2 = Vessel(max_speed=25, max_container_count=3, max_weight=80)

    ref_container = RefrigeratedContainer(
        container_mass=2000,
        max_payload=10000,
        height=250,
        depth=300,
        product_type="Bananas",
        temperature=13.3,
    )
    liquid_container = LiquidContainer(
        container_mass=1500, max_payload=12000, height=200, depth=250, is_hazardous=False
    )
    gas_container = GasContainer(
        container_mass=1800, max_payload=9000, height=220, depth=270, pressure=5
    )

    # 1. Load cargo and ships
    print_section("1. Initial Ship State")

    try:
        ref_container.load_cargo(9000)
        liquid_container.load_cargo(10000)
        gas_container.load_cargo(8500)

        ship1.add_container(ref_container)
        ship1.add_container(liquid_container)
        ship1.add_container(gas_container)
        print(ship1.render_info())

        # 2. Transfer
        print_section("2. Transferring Container")

        ship1.transfer_container(ship2, ref_container.id)
        print("Ship 1 after transfer:")
        print(ship1.render_info())
        print()
        print("Ship 2 after receiving container:")
        print(ship2.render_info())
    except CargoError as e:
        print(f"Error: {e}")

    # 3. Limit violations
    print_section("3. Limit Violations")

    hazardous = LiquidContainer(
        container_mass=1200, max_payload=12000, height=200, depth=250, is_hazardous=True
    )
    try:
        hazardous.load_cargo(7000)
    except CargoError as e:
        print(f"Error: {e}")

    try:
        gas_container.load_cargo(9500)
    except CargoError as e:
        notify_hazard(gas_container, f"Rejected gas load on {gas_container.id}")
        print(f"Error: {e}")

    heavy = RefrigeratedContainer(
        container_mass=5000,
        max_payload=50000,
        height=300,
        depth=400,
        product_type="Meat",
        temperature=-15,
    )
    heavy.load_cargo(45000)
    try:
        ship1.add_container(heavy)
    except CargoError as e:
        print(f"Error: {e}")

    gas_container.unload_cargo()
    print(f"Residual gas after unloading: {gas_container.cargo_mass:.0f} kg")

    logger.info("Ship 1 gross weight: %.0f kg", ship1.total_weight_kg)

    print()
    print("=" * 60)
    print("  Demo Complete!")
    print("=" * 60)
    print()


if __name__ == "__main__":
    main()

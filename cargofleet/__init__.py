"""
Cargo Fleet.

Cargo containers and the vessels that carry them, with loading capacity,
hazard and weight limit rules.
"""

from .domain import (
    CargoError,
    OverfillError,
    CapacityExceededError,
    WeightExceededError,
    DuplicateContainerError,
    Container,
    ContainerType,
    LiquidContainer,
    GasContainer,
    RefrigeratedContainer,
    Vessel,
)

__version__ = "0.1.0"

__all__ = [
    "CargoError",
    "OverfillError",
    "CapacityExceededError",
    "WeightExceededError",
    "DuplicateContainerError",
    "Container",
    "ContainerType",
    "LiquidContainer",
    "GasContainer",
    "RefrigeratedContainer",
    "Vessel",
]

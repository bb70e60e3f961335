"""
Domain models for the cargo fleet system.

Core business entities: cargo containers and the vessels that carry them.
All models use Pydantic for validation and serialization.
"""

from .errors import (
    CargoError,
    OverfillError,
    CapacityExceededError,
    WeightExceededError,
    DuplicateContainerError,
)
from .sequence import ContainerSequence, DEFAULT_SEQUENCE
from .hazard import (
    HazardNotifier,
    LoggingHazardNotifier,
    supports_hazard_notification,
    notify_hazard,
)
from .container import (
    Container,
    ContainerType,
    LiquidContainer,
    GasContainer,
    RefrigeratedContainer,
    AnyContainer,
    HAZARDOUS_LIQUID_FILL_RATIO,
    LIQUID_FILL_RATIO,
    GAS_RESIDUAL_RATIO,
)
from .vessel import Vessel, KG_PER_TON

__all__ = [
    # Errors
    "CargoError",
    "OverfillError",
    "CapacityExceededError",
    "WeightExceededError",
    "DuplicateContainerError",
    # Sequence
    "ContainerSequence",
    "DEFAULT_SEQUENCE",
    # Hazard
    "HazardNotifier",
    "LoggingHazardNotifier",
    "supports_hazard_notification",
    "notify_hazard",
    # Container
    "Container",
    "ContainerType",
    "LiquidContainer",
    "GasContainer",
    "RefrigeratedContainer",
    "AnyContainer",
    "HAZARDOUS_LIQUID_FILL_RATIO",
    "LIQUID_FILL_RATIO",
    "GAS_RESIDUAL_RATIO",
    # Vessel
    "Vessel",
    "KG_PER_TON",
]

"""
Cargo container domain models.

Containers are the units loaded onto vessels. Each variant applies its own
loading and unloading policy on top of the shared base contract.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, model_validator

from .errors import OverfillError
from .hazard import LoggingHazardNotifier
from .sequence import DEFAULT_SEQUENCE


class ContainerType(str, Enum):
    """Container type codes used in container ids."""

    LIQUID = "L"
    GAS = "G"
    REFRIGERATED = "C"  # Cooled


# Fraction of max payload a liquid container may be filled to
HAZARDOUS_LIQUID_FILL_RATIO = 0.5
LIQUID_FILL_RATIO = 0.9

# Fraction of gas left in the container after unloading
GAS_RESIDUAL_RATIO = 0.05


def format_quantity(value: float) -> str:
    """Format a number the way reports show it: no trailing .0 on whole values."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class Container(BaseModel):
    """
    Cargo container entity.

    Abstract base: instantiate one of the concrete variants. Ids have the
    form PREFIX-TYPE-SEQUENCE (e.g., KON-L-3) and are drawn from a sequence
    shared across all variants. Pass ``sequence=`` to draw from a different
    ContainerSequence.
    """

    id: Annotated[str, Field(frozen=True, description="Container serial number")]
    container_type: ContainerType = Field(frozen=True)
    cargo_mass: float = Field(default=0.0, ge=0)  # kg
    container_mass: float = Field(ge=0, frozen=True)  # tare, kg
    max_payload: float = Field(ge=0, frozen=True)  # kg
    height: int = Field(ge=0, frozen=True)  # cm
    depth: int = Field(ge=0, frozen=True)  # cm

    model_config = {"frozen": False, "validate_assignment": True}

    @model_validator(mode="before")
    @classmethod
    def assign_id(cls, data: Any) -> Any:
        """Allocate a serial number unless the data already carries an id."""
        if cls is Container:
            raise TypeError("Container is abstract; construct a concrete container type")
        if not isinstance(data, dict):
            return data

        data = dict(data)
        sequence = data.pop("sequence", None) or DEFAULT_SEQUENCE
        if not data.get("id"):
            type_code = cls.model_fields["container_type"].default.value
            data["id"] = sequence.next_id(type_code)
        return data

    @model_validator(mode="after")
    def check_cargo_within_ceiling(self) -> "Container":
        """Keep cargo mass within the payload ceiling on construction and assignment."""
        if self.cargo_mass > self.payload_ceiling:
            raise ValueError(
                f"Cargo mass {self.cargo_mass} kg exceeds the "
                f"{self.payload_ceiling} kg ceiling of {self.id}"
            )
        return self

    @property
    def payload_ceiling(self) -> float:
        """Largest cargo mass this container accepts."""
        return self.max_payload

    @property
    def gross_mass(self) -> float:
        """Tare plus cargo mass in kg."""
        return self.container_mass + self.cargo_mass

    def load_cargo(self, mass: float) -> None:
        """
        Load cargo, replacing the current cargo mass.

        Raises:
            OverfillError: If mass exceeds the max payload
        """
        if mass > self.max_payload:
            raise OverfillError(self.id, mass, self.max_payload)
        self._assign_cargo(mass)

    def unload_cargo(self) -> None:
        """Empty the container."""
        self.cargo_mass = 0.0

    def describe(self) -> str:
        """Human-readable summary."""
        return (
            f"Container {self.id}, "
            f"Cargo Mass: {format_quantity(self.cargo_mass)} kg, "
            f"Max Payload: {format_quantity(self.max_payload)} kg"
        )

    def _assign_cargo(self, mass: float) -> None:
        if mass < 0:
            raise ValueError("Cargo mass cannot be negative")
        self.cargo_mass = mass

    def __str__(self) -> str:
        return self.describe()


class LiquidContainer(Container, LoggingHazardNotifier):
    """
    Liquid cargo container.

    Hazardous liquids may only fill half the payload, others 90%.
    Overload attempts raise a hazard notification before failing.
    """

    container_type: Literal[ContainerType.LIQUID] = Field(
        default=ContainerType.LIQUID, frozen=True
    )
    is_hazardous: bool = Field(default=False, frozen=True)

    @property
    def payload_ceiling(self) -> float:
        ratio = HAZARDOUS_LIQUID_FILL_RATIO if self.is_hazardous else LIQUID_FILL_RATIO
        return self.max_payload * ratio

    def load_cargo(self, mass: float) -> None:
        """
        Load liquid cargo within the fill ratio.

        Raises:
            OverfillError: If mass exceeds the fill ratio ceiling. A hazard
                notification is emitted first.
        """
        ceiling = self.payload_ceiling
        if mass > ceiling:
            self.notify_hazard(f"Hazardous operation: attempt to overload {self.id}")
            raise OverfillError(
                self.id, mass, ceiling, message="hazardous material limit exceeded"
            )
        self._assign_cargo(mass)


class GasContainer(Container, LoggingHazardNotifier):
    """
    Pressurized gas container.

    Unloading leaves residual gas behind.
    """

    container_type: Literal[ContainerType.GAS] = Field(
        default=ContainerType.GAS, frozen=True
    )
    pressure: float = Field(frozen=True)

    def unload_cargo(self) -> None:
        self.cargo_mass = self.cargo_mass * GAS_RESIDUAL_RATIO


class RefrigeratedContainer(Container):
    """Temperature controlled container for perishable products."""

    container_type: Literal[ContainerType.REFRIGERATED] = Field(
        default=ContainerType.REFRIGERATED, frozen=True
    )
    product_type: str = Field(frozen=True)
    temperature: float = Field(frozen=True)  # Celsius

    def describe(self) -> str:
        return (
            f"{super().describe()}, Product: {self.product_type}, "
            f"Temperature: {format_quantity(self.temperature)}°C"
        )


AnyContainer = Annotated[
    Union[LiquidContainer, GasContainer, RefrigeratedContainer],
    Field(discriminator="container_type"),
]

"""
Cargo domain exceptions.

Raised by container loading and vessel loading operations when a
capacity, weight or hazard limit would be violated.
"""


class CargoError(Exception):
    """Base exception for cargo and vessel operations."""

    def __init__(self, message: str, container_id: str | None = None):
        super().__init__(message)
        self.message = message
        self.container_id = container_id

    def __str__(self) -> str:
        if self.container_id:
            return f"{self.message} [container={self.container_id}]"
        return self.message


class OverfillError(CargoError):
    """Raised when cargo mass exceeds a container's applicable ceiling."""

    def __init__(
        self,
        container_id: str,
        mass: float,
        limit: float,
        message: str = "exceeding the load capacity",
    ):
        super().__init__(message, container_id=container_id)
        self.mass = mass
        self.limit = limit

    def __str__(self) -> str:
        return (
            f"OverfillError: {self.message} "
            f"({self.container_id}: {self.mass} kg > {self.limit} kg)"
        )


class CapacityExceededError(CargoError):
    """Raised when a vessel already holds its maximum number of containers."""

    def __init__(self, container_id: str, max_container_count: int):
        super().__init__("Ship capacity exceeded", container_id=container_id)
        self.max_container_count = max_container_count

    def __str__(self) -> str:
        return (
            f"{self.message}: cannot load {self.container_id}, "
            f"limit is {self.max_container_count} containers"
        )


class WeightExceededError(CargoError):
    """Raised when admitting a container would exceed the vessel weight limit."""

    def __init__(self, container_id: str, attempted_kg: float, limit_kg: float):
        super().__init__("Ship weight limit exceeded", container_id=container_id)
        self.attempted_kg = attempted_kg
        self.limit_kg = limit_kg

    def __str__(self) -> str:
        return (
            f"{self.message}: loading {self.container_id} brings total to "
            f"{self.attempted_kg} kg (limit {self.limit_kg} kg)"
        )


class DuplicateContainerError(CargoError):
    """Raised when a container with the same id is already on board."""

    def __init__(self, container_id: str):
        super().__init__("Container already on board", container_id=container_id)

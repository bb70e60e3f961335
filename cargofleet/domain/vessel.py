"""
Vessel domain model.

A vessel carries an ordered list of containers subject to a container
count limit and a gross weight limit.
"""

import logging

from pydantic import BaseModel, Field, computed_field, model_validator

from .container import AnyContainer, Container, format_quantity
from .errors import (
    CapacityExceededError,
    CargoError,
    DuplicateContainerError,
    WeightExceededError,
)

logger = logging.getLogger(__name__)

KG_PER_TON = 1000


class Vessel(BaseModel):
    """
    Container ship aggregate.

    Owns its containers: they are only added, removed, replaced or
    transferred through the methods below, which check the count and
    weight limits before admitting a container.

    Usage:
        ship = Vessel(max_speed=30, max_container_count=5, max_weight=35)
        ship.add_container(container)
        ship.transfer_container(other_ship, container.id)
    """

    max_speed: float = Field(ge=0, frozen=True)  # knots
    max_container_count: int = Field(ge=0, frozen=True)
    max_weight: float = Field(ge=0, frozen=True)  # tons
    containers: list[AnyContainer] = Field(default_factory=list)

    model_config = {"frozen": False}

    @model_validator(mode="after")
    def check_initial_load(self) -> "Vessel":
        """Apply the loading limits to containers given at construction."""
        initial = list(self.containers)
        self.containers.clear()
        for container in initial:
            self.add_container(container)
        return self

    @computed_field
    @property
    def max_weight_kg(self) -> float:
        """Weight limit in kg."""
        return self.max_weight * KG_PER_TON

    @computed_field
    @property
    def total_weight_kg(self) -> float:
        """Gross weight of all containers on board in kg."""
        return sum(c.container_mass + c.cargo_mass for c in self.containers)

    @property
    def remaining_slots(self) -> int:
        """Number of containers that can still be loaded."""
        return self.max_container_count - len(self.containers)

    @property
    def container_ids(self) -> list[str]:
        """Container ids in loading order."""
        return [c.id for c in self.containers]

    def get_container(self, container_id: str) -> Container | None:
        """Find a container on board by id."""
        for container in self.containers:
            if container.id == container_id:
                return container
        return None

    def has_container(self, container_id: str) -> bool:
        """Check if a container is on board."""
        return self.get_container(container_id) is not None

    def add_container(self, container: Container) -> None:
        """
        Load a container onto the vessel.

        The vessel does not track containers held by other vessels: keeping a
        container on at most one vessel is up to the caller. Use
        transfer_container or transfer_container_atomic to move one.

        Args:
            container: Container to load, with its cargo already loaded

        Raises:
            DuplicateContainerError: If the container is already on board
            CapacityExceededError: If the vessel holds max_container_count containers
            WeightExceededError: If the gross weight would exceed max_weight
        """
        if self.has_container(container.id):
            raise DuplicateContainerError(container.id)

        if len(self.containers) >= self.max_container_count:
            raise CapacityExceededError(container.id, self.max_container_count)

        total_weight = self.total_weight_kg + container.container_mass + container.cargo_mass
        if total_weight > self.max_weight_kg:
            raise WeightExceededError(container.id, total_weight, self.max_weight_kg)

        self.containers.append(container)
        logger.debug(
            "Loaded %s (%d/%d containers, %.1f/%.1f kg)",
            container.id,
            len(self.containers),
            self.max_container_count,
            total_weight,
            self.max_weight_kg,
        )

    def remove_container(self, container_id: str) -> Container | None:
        """
        Unload a container from the vessel.

        Does nothing if no container has this id. The container keeps its
        cargo after removal.

        Returns:
            The removed container, or None if it was not on board
        """
        removed = [c for c in self.containers if c.id == container_id]
        if not removed:
            return None

        self.containers[:] = [c for c in self.containers if c.id != container_id]
        logger.debug("Removed %s", container_id)
        return removed[0]

    def replace_container(self, container_id: str, new_container: Container) -> None:
        """
        Replace a container with another one.

        Not transactional: if loading the new container fails, the removed
        container is not put back. Use replace_container_atomic to restore it.

        Raises:
            CargoError: If the new container cannot be loaded
        """
        self.remove_container(container_id)
        self.add_container(new_container)

    def replace_container_atomic(self, container_id: str, new_container: Container) -> None:
        """
        Replace a container, restoring the original if the new one is rejected.

        Raises:
            CargoError: If the new container cannot be loaded; the vessel is
                left unchanged
        """
        position = self._position_of(container_id)
        removed = self.remove_container(container_id)
        try:
            self.add_container(new_container)
        except CargoError:
            if removed is not None:
                self.containers.insert(position, removed)
            raise

    def transfer_container(self, target: "Vessel", container_id: str) -> None:
        """
        Move a container onto another vessel.

        Does nothing if no container has this id. Not transactional: if the
        target rejects the container it is on neither vessel afterwards. Use
        transfer_container_atomic to keep it on this vessel instead.

        Raises:
            CargoError: If the target vessel cannot load the container
        """
        container = self.get_container(container_id)
        if container is None:
            return

        self.remove_container(container_id)
        target.add_container(container)
        logger.info("Transferred %s", container_id)

    def transfer_container_atomic(self, target: "Vessel", container_id: str) -> None:
        """
        Move a container onto another vessel, keeping it here if rejected.

        The container is only ever on one of the two vessels, provided the
        caller has not loaded it onto the target by other means.

        Raises:
            CargoError: If the target vessel cannot load the container; this
                vessel is left unchanged
        """
        position = self._position_of(container_id)
        container = self.remove_container(container_id)
        if container is None:
            return

        try:
            target.add_container(container)
        except CargoError:
            self.containers.insert(position, container)
            raise
        logger.info("Transferred %s", container_id)

    def render_info(self) -> str:
        """Report of vessel limits and containers on board."""
        lines = [
            f"Ship Speed: {format_quantity(self.max_speed)} knots, "
            f"Max Containers: {self.max_container_count}, "
            f"Max Weight: {format_quantity(self.max_weight)} tons",
            "Containers on board:",
        ]
        lines.extend(c.describe() for c in self.containers)
        return "\n".join(lines)

    def _position_of(self, container_id: str) -> int:
        for index, container in enumerate(self.containers):
            if container.id == container_id:
                return index
        return len(self.containers)

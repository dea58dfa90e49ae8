"""Cell - a stationary grid slot that stores and regenerates resource."""

from __future__ import annotations

from .errors import ConfigError, NotEnoughResourcesError

# Applied to the cell an agent dies in
DEATH_RESOURCE_BOOST = 5
DEATH_REGEN_BONUS = 1


class Cell:
    """
    A single slot in the world grid.

    Cells have:
    - A stable row-major id
    - A resource store bounded by a fixed capacity
    - A regeneration rate bounded by a fixed ceiling

    Every mutation clamps into ``[0, max_resource]`` and ``[0, max_regen_rate]``.
    """

    __slots__ = ("_id", "_cur_resource", "_max_resource", "_regen_rate", "_max_regen_rate")

    def __init__(
        self,
        id: int,
        cur_resource: int,
        max_resource: int,
        regen_rate: int,
        max_regen_rate: int,
    ):
        """
        Initialize a cell.

        Args:
            id: Row-major index of the cell in its world
            cur_resource: Initial stored resource
            max_resource: Resource capacity
            regen_rate: Initial regeneration per tick
            max_regen_rate: Ceiling for the regeneration rate

        Raises:
            ConfigError: If any value is negative or a current value exceeds its bound
        """
        if min(cur_resource, max_resource, regen_rate, max_regen_rate) < 0:
            raise ConfigError(f"cell {id}: resource values must be non-negative")
        if cur_resource > max_resource:
            raise ConfigError(
                f"cell {id}: cur_resource {cur_resource} exceeds max_resource {max_resource}"
            )
        if regen_rate > max_regen_rate:
            raise ConfigError(
                f"cell {id}: regen_rate {regen_rate} exceeds max_regen_rate {max_regen_rate}"
            )

        self._id = id
        self._cur_resource = cur_resource
        self._max_resource = max_resource
        self._regen_rate = regen_rate
        self._max_regen_rate = max_regen_rate

    def __repr__(self) -> str:
        return (
            f"Cell(id={self._id}, cur_resource={self._cur_resource}/{self._max_resource}, "
            f"regen_rate={self._regen_rate}/{self._max_regen_rate})"
        )

    @property
    def id(self) -> int:
        return self._id

    @property
    def cur_resource(self) -> int:
        return self._cur_resource

    @property
    def max_resource(self) -> int:
        return self._max_resource

    @property
    def regen_rate(self) -> int:
        return self._regen_rate

    @property
    def max_regen_rate(self) -> int:
        return self._max_regen_rate

    @property
    def fullness(self) -> float:
        """Get the stored resource as a ratio of capacity (0-1)."""
        return self._cur_resource / self._max_resource if self._max_resource > 0 else 0.0

    def regenerate(self) -> None:
        """Grow the stored resource by the regen rate, saturating at capacity."""
        self.add_resource(self._regen_rate)

    def update(self) -> None:
        """Advance the cell by one tick."""
        self.regenerate()

    def add_resource(self, amount: int) -> None:
        """
        Add resource, saturating at ``max_resource``.

        Raises:
            ValueError: If ``amount`` is negative
        """
        if amount < 0:
            raise ValueError(f"cannot add a negative amount ({amount})")
        self._cur_resource = min(self._cur_resource + amount, self._max_resource)

    def increase_rate(self, amount: int) -> None:
        """
        Raise the regen rate, saturating at ``max_regen_rate``.

        Raises:
            ValueError: If ``amount`` is negative
        """
        if amount < 0:
            raise ValueError(f"cannot lower the regen rate ({amount})")
        self._regen_rate = min(self._regen_rate + amount, self._max_regen_rate)

    def resource_consumption(self, amount: int) -> int:
        """
        Deduct an exact amount of resource.

        All-or-nothing: on failure the cell is left untouched.

        Args:
            amount: Amount to deduct

        Returns:
            The amount deducted

        Raises:
            NotEnoughResourcesError: If ``amount`` exceeds the stored resource
            ValueError: If ``amount`` is negative
        """
        if amount < 0:
            raise ValueError(f"cannot consume a negative amount ({amount})")
        if amount > self._cur_resource:
            raise NotEnoughResourcesError(available=self._cur_resource, requested=amount)
        self._cur_resource -= amount
        return amount

    def take_up_to(self, want: int) -> int:
        """Deduct at most ``want`` resource and return the amount actually taken."""
        if want < 0:
            raise ValueError(f"cannot take a negative amount ({want})")
        take = min(want, self._cur_resource)
        self._cur_resource -= take
        return take

    def apply_death_feedback(self) -> None:
        """Recycle a dead agent into this cell: boost resource and regen rate."""
        self.add_resource(DEATH_RESOURCE_BOOST)
        self.increase_rate(DEATH_REGEN_BONUS)

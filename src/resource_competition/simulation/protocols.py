"""Shared step interface for cells, agents and the world."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Updatable(Protocol):
    """
    Anything that advances by one simulation step.

    The meaning of a step depends on the implementor:
    - a cell regenerates its resource
    - an agent metabolizes its allocation
    - the world runs one full tick over every cell and agent
    """

    def update(self) -> None:
        """Advance by one step."""
        ...

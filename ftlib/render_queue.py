"""Draw calls that place image instances, and ordering them by depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

__all__ = ["Instance", "DrawCall", "sort_render_queue", "remove_image_calls"]


@dataclass
class Instance:
    """One placement of an image on screen."""

    x: int
    y: int
    z: int = 0
    enabled: bool = True


@dataclass(eq=False)
class DrawCall:
    """A request to draw instance ``instance_id`` of ``image``.

    ``image`` is any object with an ``instances`` sequence of :class:`Instance`.
    """

    image: Any
    instance_id: int

    def z(self) -> int:
        """Depth of the instance this call draws."""
        return self.image.instances[self.instance_id].z


def sort_render_queue(queue: List[DrawCall]) -> List[DrawCall]:
    """Sort ``queue`` in place by ascending depth and return it.

    Calls of equal depth end up in the reverse of their previous order.
    """
    queue[:] = sorted(reversed(queue), key=DrawCall.z)
    return queue


def remove_image_calls(queue: List[DrawCall], image: Any) -> List[DrawCall]:
    """Remove every call drawing ``image`` (by identity) and return the removed calls."""
    removed = [call for call in queue if call.image is image]
    queue[:] = [call for call in queue if call.image is not image]
    return removed
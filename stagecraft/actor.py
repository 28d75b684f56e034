"""Actors: positioned objects in a level that own renderers and collisions."""

from enum import Enum
from typing import Any, List, Union

from .components import Collision
from .renderer import ImageRenderer
from .tick import TickObject
from .transform import Transform
from .vectors import Float4

Order = Union[int, Enum]


def _order_value(order: Order) -> int:
    return int(order.value) if isinstance(order, Enum) else int(order)


class Actor(TickObject):
    """An object with a location in a level; spawned and ticked by the level."""

    def __init__(self, name: str = "") -> None:
        super().__init__()
        self.name = name
        self.world: Any = None
        self.transform = Transform()
        self.renderers: List[ImageRenderer] = []
        self.collisions: List[Collision] = []

    def actor_location(self) -> Float4:
        return self.transform.position.copy()

    def set_actor_location(self, value: Float4) -> None:
        self.transform.set_position(value)

    def add_actor_location(self, value: Float4) -> None:
        self.transform.add_position(value)

    def create_image_renderer(self, order: Order = 0) -> ImageRenderer:
        """Create a renderer owned by this actor and registered with its level."""
        renderer = ImageRenderer()
        renderer.owner = self
        renderer.set_order(_order_value(order))
        renderer.begin_play()
        self.renderers.append(renderer)
        return renderer

    def create_collision(self, order: Order = 0) -> Collision:
        """Create a collision owned by this actor and registered with its level."""
        collision = Collision()
        collision.owner = self
        collision.set_order(_order_value(order))
        collision.begin_play()
        self.collisions.append(collision)
        return collision

    def _children(self) -> List[Any]:
        return [*self.renderers, *self.collisions]

    def set_active(self, active: bool, active_time: float = 0.0) -> None:
        super().set_active(active, active_time)
        for child in self._children():
            child.set_active(active, active_time)

    def destroy(self, destroy_time: float = 0.0) -> None:
        """Destroy this actor and every component it owns."""
        super().destroy(destroy_time)
        for child in self._children():
            child.destroy(destroy_time)

    def destroy_update(self, delta_time: float) -> None:
        super().destroy_update(delta_time)
        for child in self._children():
            child.destroy_update(delta_time)

    def active_update(self, delta_time: float) -> None:
        super().active_update(delta_time)
        for child in self._children():
            child.active_update(delta_time)

    def check_release_child(self) -> None:
        """Drop components that have been destroyed."""
        self.renderers = [r for r in self.renderers if not r.is_destroy()]
        self.collisions = [c for c in self.collisions if not c.is_destroy()]

    def all_renderers_active_off(self) -> None:
        for renderer in self.renderers:
            renderer.active_off()

    def all_renderers_active_on(self) -> None:
        for renderer in self.renderers:
            renderer.active_on()

    def child_tick(self, delta_time: float) -> None:
        for renderer in list(self.renderers):
            renderer.tick(delta_time)
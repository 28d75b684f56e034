"""Levels: collections of actors ticked, scaled in time and released together."""

from enum import Enum
from typing import Dict, List, Optional, Type, TypeVar, Union

from .actor import Actor
from .components import Collision
from .renderer import ImageRenderer
from .vectors import Float4

Order = Union[int, Enum]
ActorT = TypeVar("ActorT", bound=Actor)


def _order_value(order: Order) -> int:
    return int(order.value) if isinstance(order, Enum) else int(order)


class Level:
    """A scene holding actors grouped by order, with a camera and time scales."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.all_actor: Dict[int, List[Actor]] = {}
        self.time_scale: Dict[int, float] = {}
        self.renderers: Dict[int, List[ImageRenderer]] = {}
        self.collisions: Dict[int, List[Collision]] = {}
        self.camera_pos = Float4.ZERO.copy()
        self.started = False
        self.ended = False
        self.play_time = 0.0
        self.prev_level: Optional["Level"] = None
        self.next_level: Optional["Level"] = None

    def begin_play(self) -> None:
        """Called once when the level is created; marks the level as started."""
        self.started = True

    def tick(self, delta_time: float) -> None:
        """Called once per frame before the actors tick; accumulates play time."""
        self.play_time += delta_time

    def level_start(self, prev_level: "Level | None") -> None:
        """Called when this level becomes the current one; remembers the previous level."""
        self.prev_level = prev_level

    def level_end(self, next_level: "Level | None") -> None:
        """Called when this level stops being the current one; remembers the next level."""
        self.next_level = next_level

    def end(self) -> None:
        """Called when the level is destroyed; marks the level as ended."""
        self.ended = True

    def spawn_actor(self, actor_type: Type[ActorT], order: Order = 0) -> ActorT:
        """Create an actor of `actor_type`, place it in this level and start it."""
        actor = actor_type()
        actor.world = self
        actor.begin_play()
        self.all_actor.setdefault(_order_value(order), []).append(actor)
        return actor

    def set_camera_pos(self, value: Float4) -> None:
        self.camera_pos = value.copy()

    def add_camera_pos(self, value: Float4) -> None:
        self.camera_pos = self.camera_pos + value

    def set_all_time_scale(self, scale: float) -> None:
        for order in self.time_scale:
            self.time_scale[order] = scale

    def set_other_time_scale(self, order: Order, scale: float) -> None:
        """Set the scale of every known order group except `order`."""
        keep = _order_value(order)
        for key in self.time_scale:
            if key != keep:
                self.time_scale[key] = scale

    def set_time_scale(self, order: Order, scale: float) -> None:
        self.time_scale[_order_value(order)] = scale

    def level_tick(self, delta_time: float) -> None:
        """Update timers of every actor and tick the active ones with scaled time."""
        for order, actors in sorted(self.all_actor.items()):
            scale = self.time_scale.setdefault(order, 1.0)
            order_time = delta_time * scale
            for actor in list(actors):
                actor.active_update(delta_time)
                actor.destroy_update(delta_time)
                if not actor.is_active():
                    continue
                actor.tick(order_time)
                actor.child_tick(order_time)

    def visible_renderers(self) -> List[ImageRenderer]:
        """Active renderers in drawing order."""
        return [
            renderer
            for _, group in sorted(self.renderers.items())
            for renderer in group
            if renderer.is_active()
        ]

    def level_release(self, delta_time: float) -> None:
        """Remove destroyed collisions, renderers and actors."""
        for order, group in self.collisions.items():
            self.collisions[order] = [c for c in group if not c.is_destroy()]
        for order, group in self.renderers.items():
            self.renderers[order] = [r for r in group if not r.is_destroy()]
        for order, actors in self.all_actor.items():
            kept = []
            for actor in actors:
                if actor.is_destroy():
                    continue
                actor.check_release_child()
                kept.append(actor)
            self.all_actor[order] = kept
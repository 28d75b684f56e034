"""Components attached to actors: plain, positioned, and colliding."""

from typing import Any, List, Optional

from .errors import EngineError
from .tick import TickObject
from .transform import CollisionType, Transform
from .vectors import Float4


class ActorComponent(TickObject):
    """A feature that belongs to an actor."""

    def __init__(self) -> None:
        super().__init__()
        self.owner: Any = None

    def _world(self) -> Any:
        if self.owner is None:
            raise EngineError("component has no owning actor")
        world = getattr(self.owner, "world", None)
        if world is None:
            raise EngineError("component's actor is not in a level")
        return world


class SceneComponent(ActorComponent):
    """A component with its own transform relative to its actor."""

    def __init__(self) -> None:
        super().__init__()
        self.transform = Transform()

    def set_position(self, value: Float4) -> None:
        self.transform.set_position(value)

    def add_position(self, value: Float4) -> None:
        self.transform.add_position(value)

    def set_scale(self, value: Float4) -> None:
        self.transform.set_scale(value)

    def add_scale(self, value: Float4) -> None:
        self.transform.add_scale(value)

    def set_transform(self, value: Transform) -> None:
        self.transform = value.copy()

    @property
    def position(self) -> Float4:
        return self.transform.position.copy()

    def actor_base_transform(self) -> Transform:
        """This component's transform offset by the owning actor's location."""
        if self.owner is None:
            raise EngineError("component has no owning actor")
        result = self.transform.copy()
        result.add_position(self.owner.actor_location())
        return result


class Collision(SceneComponent):
    """A collision shape registered with its level under an order group."""

    def __init__(self) -> None:
        super().__init__()
        self.col_type = CollisionType.RECT

    def set_order(self, order: int) -> None:
        """Move this collision to another order group of its level."""
        groups = self._world().collisions
        current = groups.setdefault(self.order, [])
        if self in current:
            current.remove(self)
        super().set_order(order)
        groups.setdefault(self.order, []).append(self)

    def collision_check(self, order: int, next_pos: Optional[Float4] = None) -> List["Collision"]:
        """Active collisions of group `order` that this shape, moved by `next_pos`, touches."""
        if not self.is_active():
            return []
        others = self._world().collisions.get(order, [])
        this_transform = self.actor_base_transform()
        if next_pos is not None:
            this_transform.add_position(next_pos)
        return [
            other
            for other in list(others)
            if other is not self
            and other.is_active()
            and this_transform.collision(self.col_type, other.col_type, other.actor_base_transform())
        ]
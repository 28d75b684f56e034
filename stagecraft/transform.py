"""Position/scale transforms and 2D collision tests."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Tuple

from .errors import EngineError
from .vectors import Float4


def _lround(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class CollisionType(Enum):
    POINT = 0
    CIRCLE = 1
    RECT = 2


@dataclass
class Transform:
    """A centre position and a full-size scale."""

    position: Float4 = field(default_factory=Float4)
    scale: Float4 = field(default_factory=Float4)

    def set_position(self, value: Float4) -> None:
        self.position = value.copy()

    def add_position(self, value: Float4) -> None:
        self.position = self.position + value

    def set_scale(self, value: Float4) -> None:
        self.scale = value.copy()

    def add_scale(self, value: Float4) -> None:
        self.scale = self.scale + value

    def left(self) -> float:
        return self.position.x - self.scale.hx()

    def top(self) -> float:
        return self.position.y - self.scale.hy()

    def right(self) -> float:
        return self.position.x + self.scale.hx()

    def bottom(self) -> float:
        return self.position.y + self.scale.hy()

    def ileft(self) -> int:
        return _lround(self.left())

    def itop(self) -> int:
        return _lround(self.top())

    def iright(self) -> int:
        return _lround(self.right())

    def ibottom(self) -> int:
        return _lround(self.bottom())

    def left_top(self) -> Float4:
        return Float4(self.left(), self.top())

    def right_top(self) -> Float4:
        return Float4(self.right(), self.top())

    def left_bottom(self) -> Float4:
        return Float4(self.left(), self.bottom())

    def right_bottom(self) -> Float4:
        return Float4(self.right(), self.bottom())

    def set_radius(self, radius: float) -> None:
        self.scale = Float4.ZERO.copy()
        self.scale.x = radius * 2.0

    @property
    def radius(self) -> float:
        return self.scale.hx()

    def copy(self) -> "Transform":
        return Transform(self.position.copy(), self.scale.copy())

    def collision(self, this_type: CollisionType, other_type: CollisionType, other: "Transform") -> bool:
        """Test this shape against another with the registered collision function."""
        try:
            function = _COLLISION_FUNCTIONS[(this_type, other_type)]
        except KeyError:
            raise EngineError(
                f"no collision function for {this_type.name} against {other_type.name}"
            ) from None
        return function(self, other)


def circle_to_circle(left: Transform, right: Transform) -> bool:
    distance = (left.position - right.position).size_2d()
    return distance <= left.scale.hx() + right.scale.hx()


def circle_to_rect(left: Transform, right: Transform) -> bool:
    radius = left.radius

    wide = right.copy()
    wide.scale.x += radius * 2.0
    if point_to_rect(left, wide):
        return True

    tall = right.copy()
    tall.scale.y += radius * 2.0
    if point_to_rect(left, tall):
        return True

    for corner in (right.left_top(), right.right_top(), right.left_bottom(), right.right_bottom()):
        corner_circle = Transform()
        corner_circle.set_position(corner)
        corner_circle.set_radius(radius)
        if point_to_circle(left, corner_circle):
            return True

    return False


def rect_to_circle(left: Transform, right: Transform) -> bool:
    return circle_to_rect(right, left)


def rect_to_rect(left: Transform, right: Transform) -> bool:
    if left.bottom() < right.top():
        return False
    if left.right() < right.left():
        return False
    if right.bottom() < left.top():
        return False
    if right.right() < left.left():
        return False
    return True


def circle_to_point(left: Transform, right: Transform) -> bool:
    distance = (left.position - right.position).size_2d()
    return distance <= left.scale.hx()


def point_to_circle(left: Transform, right: Transform) -> bool:
    return circle_to_point(right, left)


def point_to_rect(left: Transform, right: Transform) -> bool:
    return rect_to_point(right, left)


def rect_to_point(left: Transform, right: Transform) -> bool:
    point = right.position
    if left.bottom() < point.y:
        return False
    if left.right() < point.x:
        return False
    if point.y < left.top():
        return False
    if point.x < left.left():
        return False
    return True


_COLLISION_FUNCTIONS: Dict[Tuple[CollisionType, CollisionType], Callable[[Transform, Transform], bool]] = {
    (CollisionType.CIRCLE, CollisionType.CIRCLE): circle_to_circle,
    (CollisionType.RECT, CollisionType.RECT): rect_to_rect,
    (CollisionType.RECT, CollisionType.CIRCLE): rect_to_circle,
    (CollisionType.CIRCLE, CollisionType.RECT): circle_to_rect,
}
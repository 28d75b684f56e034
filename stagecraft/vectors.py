"""Two-dimensional vector math and 8-bit colours."""

import math
from dataclasses import dataclass, replace
from typing import ClassVar, Tuple, Union

PI = math.pi
PI2 = PI * 2.0
D_TO_R = PI / 180.0
R_TO_D = 180.0 / PI


def _lround(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class Float4:
    """A four-component vector; x and y carry the 2D position."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    ZERO: ClassVar["Float4"]
    LEFT: ClassVar["Float4"]
    RIGHT: ClassVar["Float4"]
    UP: ClassVar["Float4"]
    DOWN: ClassVar["Float4"]

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)
        self.w = float(self.w)

    # Colour-channel aliases.
    @property
    def r(self) -> float:
        return self.x

    @r.setter
    def r(self, value: float) -> None:
        self.x = float(value)

    @property
    def g(self) -> float:
        return self.y

    @g.setter
    def g(self, value: float) -> None:
        self.y = float(value)

    @property
    def b(self) -> float:
        return self.z

    @b.setter
    def b(self, value: float) -> None:
        self.z = float(value)

    @property
    def a(self) -> float:
        return self.w

    @a.setter
    def a(self, value: float) -> None:
        self.w = float(value)

    @staticmethod
    def vector_rotation_z_to_deg(origin: "Float4", angle: float) -> "Float4":
        return Float4.vector_rotation_z_to_rad(origin, angle * D_TO_R)

    @staticmethod
    def vector_rotation_z_to_rad(origin: "Float4", angle: float) -> "Float4":
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Float4(
            origin.x * cos_a - origin.y * sin_a,
            origin.x * sin_a + origin.y * cos_a,
        )

    @staticmethod
    def deg_to_dir(angle: float) -> "Float4":
        return Float4.rad_to_dir(angle * D_TO_R)

    @staticmethod
    def rad_to_dir(angle: float) -> "Float4":
        """Unit direction vector for the given angle."""
        return Float4(math.cos(angle), math.sin(angle))

    @staticmethod
    def lerp_clamp(p1: "Float4", p2: "Float4", d1: float) -> "Float4":
        d1 = min(max(d1, 0.0), 1.0)
        return Float4.lerp(p1, p2, d1)

    @staticmethod
    def lerp(p1: "Float4", p2: "Float4", d1: float) -> "Float4":
        return (p1 * (1.0 - d1)) + (p2 * d1)

    def size_2d(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def rotation_z_to_deg(self, angle: float) -> None:
        self.rotation_z_to_rad(angle * D_TO_R)

    def rotation_z_to_rad(self, angle: float) -> None:
        rotated = Float4.vector_rotation_z_to_rad(self, angle)
        self.x, self.y, self.z, self.w = rotated.x, rotated.y, rotated.z, rotated.w

    def normalize_2d(self) -> None:
        """Scale this vector to length one in the xy plane."""
        size = self.size_2d()
        if size > 0.0 and not math.isnan(size):
            self.x /= size
            self.y /= size
            self.z = 0.0
            self.w = 0.0

    def normalize_2d_return(self) -> "Float4":
        result = self.copy()
        result.normalize_2d()
        return result

    def half_2d(self) -> "Float4":
        return Float4(self.hx(), self.hy())

    def is_zero_vector_2d(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def ix(self) -> int:
        return _lround(self.x)

    def iy(self) -> int:
        return _lround(self.y)

    def hx(self) -> float:
        return self.x * 0.5

    def hy(self) -> float:
        return self.y * 0.5

    def ihx(self) -> int:
        return _lround(self.hx())

    def ihy(self) -> int:
        return _lround(self.hy())

    def to_point(self) -> Tuple[int, int]:
        """Integer screen point (x, y)."""
        return (self.ix(), self.iy())

    def copy(self) -> "Float4":
        return replace(self)

    def __add__(self, other: "Float4") -> "Float4":
        return Float4(self.x + other.x, self.y + other.y, self.z + other.z, self.w)

    def __sub__(self, other: "Float4") -> "Float4":
        return Float4(self.x - other.x, self.y - other.y, self.z - other.z, self.w)

    def __mul__(self, other: Union["Float4", float]) -> "Float4":
        if isinstance(other, Float4):
            return Float4(self.x * other.x, self.y * other.y, self.z * other.z, self.w)
        if isinstance(other, (int, float)):
            return Float4(self.x * other, self.y * other, self.z * other, self.w)
        return NotImplemented

    def __neg__(self) -> "Float4":
        return Float4(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"[X : {self.x:f} Y : {self.y:f} Z : {self.z:f} W : {self.w:f}]"


Float4.ZERO = Float4(0.0, 0.0, 0.0, 0.0)
Float4.LEFT = Float4(-1.0, 0.0, 0.0, 0.0)
Float4.RIGHT = Float4(1.0, 0.0, 0.0, 0.0)
Float4.UP = Float4(0.0, -1.0, 0.0, 0.0)
Float4.DOWN = Float4(0.0, 1.0, 0.0, 0.0)

FVector = Float4
FColor = Float4


@dataclass(frozen=True)
class Color8Bit:
    """An RGBA colour with one byte per channel."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    BLACK: ClassVar["Color8Bit"]
    RED: ClassVar["Color8Bit"]
    GREEN: ClassVar["Color8Bit"]
    BLUE: ClassVar["Color8Bit"]
    YELLOW: ClassVar["Color8Bit"]
    WHITE: ClassVar["Color8Bit"]
    MAGENTA: ClassVar["Color8Bit"]
    ORANGE: ClassVar["Color8Bit"]
    BLACK_A: ClassVar["Color8Bit"]
    RED_A: ClassVar["Color8Bit"]
    GREEN_A: ClassVar["Color8Bit"]
    BLUE_A: ClassVar["Color8Bit"]
    YELLOW_A: ClassVar["Color8Bit"]
    WHITE_A: ClassVar["Color8Bit"]
    MAGENTA_A: ClassVar["Color8Bit"]
    ORANGE_A: ClassVar["Color8Bit"]
    CYAN_A: ClassVar["Color8Bit"]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an integer in 0..255, got {value!r}")

    @property
    def color(self) -> int:
        """The colour packed into one unsigned 32-bit value, red in the low byte."""
        return self.r | (self.g << 8) | (self.b << 16) | (self.a << 24)

    @staticmethod
    def from_color(value: int) -> "Color8Bit":
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"packed colour out of range: {value!r}")
        return Color8Bit(
            value & 0xFF,
            (value >> 8) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 24) & 0xFF,
        )

    def zero_alpha_color(self) -> "Color8Bit":
        return replace(self, a=0)


Color8Bit.BLACK = Color8Bit(0, 0, 0, 255)
Color8Bit.RED = Color8Bit(255, 0, 0, 255)
Color8Bit.GREEN = Color8Bit(0, 255, 0, 255)
Color8Bit.BLUE = Color8Bit(0, 0, 255, 255)
Color8Bit.YELLOW = Color8Bit(255, 255, 0, 255)
Color8Bit.WHITE = Color8Bit(255, 255, 255, 255)
Color8Bit.MAGENTA = Color8Bit(255, 0, 255, 255)
Color8Bit.ORANGE = Color8Bit(255, 170, 46, 255)

Color8Bit.BLACK_A = Color8Bit(0, 0, 0, 0)
Color8Bit.RED_A = Color8Bit(255, 0, 0, 0)
Color8Bit.GREEN_A = Color8Bit(0, 255, 0, 0)
Color8Bit.BLUE_A = Color8Bit(0, 0, 255, 0)
Color8Bit.YELLOW_A = Color8Bit(255, 255, 0, 0)
Color8Bit.WHITE_A = Color8Bit(255, 255, 255, 0)
Color8Bit.MAGENTA_A = Color8Bit(255, 0, 255, 0)
Color8Bit.ORANGE_A = Color8Bit(255, 170, 46, 0)
Color8Bit.CYAN_A = Color8Bit(0, 255, 255, 0)
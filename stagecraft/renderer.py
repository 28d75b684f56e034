"""Image renderer component with frame animations."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .components import SceneComponent
from .errors import EngineError
from .strings import to_upper
from .transform import Transform
from .vectors import Color8Bit

IMAGES: Dict[str, Any] = {}
"""Shared image lookup keyed by uppercase image name."""


class ImageSortType(Enum):
    CENTER = 0
    LEFT = 1
    RIGHT = 2


@dataclass
class AnimationInfo:
    """One named animation: frame indexes into an image and per-frame times."""

    name: str = ""
    image: Any = None
    cur_frame: int = 0
    cur_time: float = 0.0
    loop: bool = False
    is_end: bool = False
    times: List[float] = field(default_factory=list)
    indexes: List[int] = field(default_factory=list)

    def update(self, delta_time: float) -> int:
        """Advance by `delta_time` and return the image index to show."""
        if not self.loop and self.is_end:
            return self.indexes[self.cur_frame]

        self.is_end = False
        self.cur_time -= delta_time
        count = len(self.indexes)

        if self.cur_time <= 0.0:
            self.cur_time = self.times[self.cur_frame]
            self.cur_frame += 1
            if count == 1:
                self.is_end = True
            if not self.loop and count <= self.cur_frame:
                self.is_end = True

        if count <= self.cur_frame:
            if count > 1:
                self.is_end = True
            if self.loop:
                self.cur_frame = 0
            else:
                self.cur_frame -= 1

        return self.indexes[self.cur_frame]


class ImageRenderer(SceneComponent):
    """Draws an image, an animation frame or a text line for its actor."""

    def __init__(self) -> None:
        super().__init__()
        self.images: Mapping[str, Any] = IMAGES
        self.info_index = 0
        self.image: Any = None
        self.image_cutting_transform = Transform()
        self.trans_color = Color8Bit()
        self.camera_effect = True
        self.camera_ratio = 1.0
        self.animation_infos: Dict[str, AnimationInfo] = {}
        self.cur_animation: Optional[AnimationInfo] = None
        self.angle = 0.0
        self.text = ""
        self.font = "궁서"
        self.text_size = 10.0
        self.text_color = Color8Bit.BLACK_A
        self.text_color2 = Color8Bit.BLACK_A
        self.text_effect = 0
        self.auto_image_scale_value = False
        self.auto_image_scale_ratio = 1.0
        self.sort_type = ImageSortType.CENTER

    def _find_image(self, name: str) -> Any:
        image = self.images.get(to_upper(name))
        if image is None:
            raise EngineError(f"image {name!r} does not exist")
        return image

    def set_order(self, order: int) -> None:
        """Move this renderer to another order group of its level."""
        groups = self._world().renderers
        current = groups.setdefault(self.order, [])
        if self in current:
            current.remove(self)
        super().set_order(order)
        groups.setdefault(self.order, []).append(self)

    def set_image(self, name: str, info_index: int = 0) -> None:
        self.image = self._find_image(name)
        self.info_index = info_index

    def set_text_color(self, color: Color8Bit, color2: Color8Bit = Color8Bit.WHITE) -> None:
        self.text_color = color
        self.text_color2 = color2

    def create_animation(
        self,
        animation_name: str,
        image_name: str,
        start: int,
        end: int,
        inter: float,
        loop: bool = True,
    ) -> None:
        """Animate the image's frames `start`..`end` inclusive, `inter` seconds each."""
        self.create_animation_indexes(animation_name, image_name, list(range(start, end + 1)), inter, loop)

    def create_animation_indexes(
        self,
        animation_name: str,
        image_name: str,
        indexes: Sequence[int],
        inters: Union[float, Sequence[float]],
        loop: bool = True,
    ) -> None:
        """Animate the given frame indexes with one interval or one per frame."""
        indexes = list(indexes)
        if isinstance(inters, (int, float)):
            times = [float(inters)] * (len(indexes) + 1)
        else:
            times = [float(t) for t in inters]
        image = self._find_image(image_name)
        upper = to_upper(animation_name)
        if upper in self.animation_infos:
            raise EngineError(f"animation {upper!r} already exists")
        self.animation_infos[upper] = AnimationInfo(
            name=upper, image=image, cur_frame=0, cur_time=0.0, loop=loop, times=times, indexes=indexes
        )

    def change_animation(
        self,
        animation_name: str,
        force: bool = False,
        start_index: int = 0,
        time: float = -1.0,
    ) -> None:
        """Switch animation; the running one is kept unless `force` is set."""
        upper = to_upper(animation_name)
        info = self.animation_infos.get(upper)
        if info is None:
            raise EngineError(f"animation {upper!r} does not exist")
        if not force and self.cur_animation is not None and self.cur_animation.name == upper:
            return
        self.cur_animation = info
        info.cur_frame = start_index
        info.cur_time = info.times[start_index]
        if time > 0.0:
            info.cur_time = time
        info.is_end = False

    def animation_reset(self) -> None:
        self.cur_animation = None

    def is_animation(self, name: str) -> bool:
        return to_upper(name) in self.animation_infos

    def set_alpha(self, alpha: float) -> None:
        """Set the blend alpha from a 0..1 value."""
        alpha = min(max(alpha, 0.0), 1.0)
        self.trans_color = replace(self.trans_color, a=int(alpha * 255.0))

    def auto_image_scale(self, ratio: float = 1.0) -> None:
        """Draw at the image's own size times `ratio`."""
        self.auto_image_scale_value = True
        self.auto_image_scale_ratio = ratio

    def render_transform(self) -> Transform:
        """Screen transform: actor-based, shifted by the camera unless disabled."""
        result = self.actor_base_transform()
        if self.camera_effect:
            camera = self._world().camera_pos * self.camera_ratio
            result.add_position(-camera)
        return result

    def _current(self) -> AnimationInfo:
        if self.cur_animation is None:
            raise EngineError("renderer has no current animation")
        return self.cur_animation

    def is_cur_animation_end(self) -> bool:
        return self._current().is_end

    def cur_animation_frame(self) -> int:
        return self._current().cur_frame

    def cur_animation_image_frame(self) -> int:
        current = self._current()
        return current.indexes[current.cur_frame]

    def cur_animation_time(self) -> float:
        return self._current().cur_time

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        if self.cur_animation is not None:
            self.image = self.cur_animation.image
            self.info_index = self.cur_animation.update(delta_time)
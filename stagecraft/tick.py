"""Base object that is ticked every frame and can be deactivated or destroyed on a timer."""


class TickObject:
    """Per-frame object with delayed activation and delayed destruction."""

    def __init__(self) -> None:
        super().__init__()
        self._order = 0
        self._is_destroy_update = False
        self._destroy_time = 0.0
        self._is_destroy_value = False
        self._is_active_update = False
        self._active_time = 0.0
        self._is_active_value = True
        self._has_begun = False
        self._has_ended = False
        self._life_time = 0.0

    @property
    def order(self) -> int:
        return self._order

    @property
    def has_begun(self) -> bool:
        """True once begin_play has run."""
        return self._has_begun

    @property
    def has_ended(self) -> bool:
        """True once end has run."""
        return self._has_ended

    @property
    def life_time(self) -> float:
        """Total time passed to tick so far."""
        return self._life_time

    def set_order(self, order: int) -> None:
        self._order = order

    def active_on(self) -> None:
        self._is_active_value = True

    def active_off(self) -> None:
        self._is_active_value = False

    def set_active(self, active: bool, active_time: float = 0.0) -> None:
        """Turn on now, turn on after `active_time` seconds, or turn off."""
        self._active_time = active_time
        if active and active_time == 0.0:
            self._is_active_value = True
            return
        if active and active_time != 0.0:
            self._is_active_update = True
        self._is_active_value = False

    def is_active(self) -> bool:
        """Active when switched on and not destroyed."""
        return self._is_active_value and not self._is_destroy_value

    def destroy(self, destroy_time: float = 0.0) -> None:
        """Destroy now, or after `destroy_time` seconds of updates."""
        self._is_destroy_update = True
        self._destroy_time = destroy_time
        if destroy_time <= 0.0:
            self._is_destroy_value = True

    def is_destroy(self) -> bool:
        return self._is_destroy_value

    def active_update(self, delta_time: float) -> None:
        self._active_time -= delta_time
        if self._is_active_update and self._active_time <= 0.0:
            self._is_active_update = False
            self._is_active_value = True

    def destroy_update(self, delta_time: float) -> None:
        if not self._is_destroy_update:
            return
        self._destroy_time -= delta_time
        if self._destroy_time <= 0.0:
            self.destroy(0.0)

    def begin_play(self) -> None:
        """Called once after the object is set up; marks it as begun."""
        self._has_begun = True

    def tick(self, delta_time: float) -> None:
        """Called once per frame while active; accumulates the object's life time."""
        self._life_time += delta_time

    def end(self) -> None:
        """Called when the object's lifetime ends; marks it as ended."""
        self._has_ended = True
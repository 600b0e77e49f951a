import logging
from collections import namedtuple
from dataclasses import dataclass, field
from .config import Config
from .filters import DebounceFilter
from .geometry import GeometryEngine

logger = logging.getLogger(__name__)

Action = namedtuple("Action", ["sprite", "dx", "dy"])

IDLE = Action("idle", 0.0, 0.0)

def map_gesture(fingers, move_speed=Config.MOVE_SPEED, jump_height=Config.JUMP_HEIGHT,
                fast_walk_factor=Config.FAST_WALK_FACTOR):
    """Map a debounced finger count to (sprite, dx, dy). Unknown counts idle."""
    if fingers == 1:
        return Action("walk", -move_speed, 0.0)
    if fingers == 2:
        return Action("run", move_speed, 0.0)
    if fingers == 3:
        return Action("jump", 0.0, -jump_height)
    if fingers == 4:
        return Action("walk", -move_speed * fast_walk_factor, 0.0)
    return IDLE


@dataclass
class GestureState:
    """Mutable game state, owned by the presentation loop."""
    x: float
    y: float
    sprite: str = "idle"
    debounce: DebounceFilter = field(default_factory=lambda: DebounceFilter(Config.DEBOUNCE_TIME))
    frames: int = 0

    @property
    def finger_count(self):
        return self.debounce.last_value

    @property
    def last_change_time(self):
        return self.debounce.last_change_time

    @classmethod
    def create(cls, start=Config.PLAYER_START, dwell=Config.DEBOUNCE_TIME, started_at=0.0):
        x, y = start
        return cls(x=float(x), y=float(y), debounce=DebounceFilter(dwell, started_at=started_at))


class GestureEngine:
    """
    Turns raw per-frame finger counts into character updates.
    Pipeline per frame: debounce -> map to action -> move -> clamp.
    """
    def __init__(self, width=Config.WIDTH, height=Config.HEIGHT,
                 sprite_width=Config.SPRITE_WIDTH, sprite_height=Config.SPRITE_HEIGHT,
                 move_speed=Config.MOVE_SPEED, jump_height=Config.JUMP_HEIGHT,
                 fast_walk_factor=Config.FAST_WALK_FACTOR):
        self.width = width
        self.height = height
        self.sprite_width = sprite_width
        self.sprite_height = sprite_height
        self.move_speed = move_speed
        self.jump_height = jump_height
        self.fast_walk_factor = fast_walk_factor

    def update(self, state: GestureState, raw_count: int, now=None) -> Action:
        fingers = state.debounce.filter(raw_count, now)
        action = map_gesture(fingers, self.move_speed, self.jump_height, self.fast_walk_factor)

        state.x, state.y = GeometryEngine.clamp_position(
            state.x + action.dx, state.y + action.dy,
            self.width, self.height, self.sprite_width, self.sprite_height
        )

        if action.sprite != state.sprite:
            logger.info(f"Sprite {state.sprite} -> {action.sprite} ({fingers} fingers)")
            state.sprite = action.sprite

        state.frames += 1
        return action

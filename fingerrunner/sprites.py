import os
import cv2
import logging
import numpy as np
from .config import Config

logger = logging.getLogger(__name__)

class SpriteNotFoundError(FileNotFoundError):
    """A sprite image is missing or unreadable."""

    def __init__(self, name, path):
        super().__init__(f"Missing sprite '{name}': {path}")
        self.name = name
        self.path = path


def load_sprites(asset_dir=Config.ASSETS_DIR, names=None,
                 size=(Config.SPRITE_WIDTH, Config.SPRITE_HEIGHT)):
    """Load every sprite by logical name, resized to ``size`` (w, h).

    Raises:
        SpriteNotFoundError: on the first file that is missing or cannot be decoded.
    """
    names = Config.SPRITES if names is None else names
    sprites = {}
    for name, filename in names.items():
        path = os.path.join(asset_dir, filename)
        # imread returns None instead of raising for missing files.
        img = cv2.imread(path, cv2.IMREAD_UNCHANGED) if os.path.isfile(path) else None
        if img is None:
            raise SpriteNotFoundError(name, path)
        if img.ndim == 2:
            img = cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)
        sprites[name] = cv2.resize(img, tuple(size), interpolation=cv2.INTER_AREA)
        logger.debug(f"Loaded sprite {name} from {path}")

    logger.info(f"Loaded {len(sprites)} sprites from {asset_dir}")
    return sprites


# Limb endpoints per pose, in a 100x125 design grid (shoulder/hip relative).
POSES = {
    "idle": {"arms": [(-18, 20), (18, 20)], "legs": [(-12, 40), (12, 40)], "color": (200, 200, 200)},
    "walk": {"arms": [(-20, 12), (16, 22)], "legs": [(-18, 38), (10, 40)], "color": (120, 220, 120)},
    "run":  {"arms": [(-26, 0), (24, 10)], "legs": [(-28, 30), (24, 34)], "color": (80, 160, 255)},
    "jump": {"arms": [(-22, -22), (22, -22)], "legs": [(-16, 26), (16, 26)], "color": (255, 180, 60)},
}

def draw_placeholder_sprite(name, size=(Config.SPRITE_WIDTH, Config.SPRITE_HEIGHT)):
    """Draw a BGRA stick figure for ``name`` on a transparent canvas."""
    pose = POSES.get(name, POSES["idle"])
    w, h = size
    img = np.zeros((h, w, 4), dtype=np.uint8)
    sx, sy = w / 100.0, h / 125.0
    color = pose["color"] + (255,)
    thick = max(1, int(round(4 * min(sx, sy))))

    def pt(x, y):
        return int(round((50 + x) * sx)), int(round(y * sy))

    head_r = int(round(10 * min(sx, sy)))
    cv2.circle(img, pt(0, 20), head_r, color, -1, cv2.LINE_AA)
    neck, hip = (0, 32), (0, 70)
    cv2.line(img, pt(*neck), pt(*hip), color, thick, cv2.LINE_AA)
    for dx, dy in pose["arms"]:
        cv2.line(img, pt(0, 40), pt(dx, 40 + dy), color, thick, cv2.LINE_AA)
    for dx, dy in pose["legs"]:
        cv2.line(img, pt(*hip), pt(dx, 70 + dy), color, thick, cv2.LINE_AA)
    cv2.putText(img, name.upper(), pt(-30, 122), Config.FONT, 0.35 * min(sx, sy), color, 1, cv2.LINE_AA)
    return img

def generate_placeholder_sprites(asset_dir=Config.ASSETS_DIR, names=None, overwrite=False):
    """Write placeholder PNGs for every sprite name. Returns the written paths."""
    names = Config.SPRITES if names is None else names
    os.makedirs(asset_dir, exist_ok=True)
    written = []
    for name, filename in names.items():
        path = os.path.join(asset_dir, filename)
        if os.path.exists(path) and not overwrite:
            logger.info(f"Sprite already exists: {path}")
            continue
        if not cv2.imwrite(path, draw_placeholder_sprite(name)):
            raise OSError(f"Could not write sprite {path}")
        written.append(path)
        logger.info(f"Wrote placeholder sprite {path}")
    return written

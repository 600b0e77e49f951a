import cv2

class Config:
    """Central configuration for Finger Runner.

    Values are tuned for a 640x480 laptop webcam under indoor lighting.
    The skin range and the defect depth threshold depend on camera, lighting
    and distance to the hand; adjust them for your setup.
    """

    # --- Camera Settings ---
    CAMERA_INDEX = 0
    CAM_WIDTH = 640
    CAM_HEIGHT = 480
    FPS = 30
    MIRROR = False                # Flip frames horizontally before processing

    # --- Skin Segmentation (OpenCV HSV: H 0-179, S/V 0-255) ---
    SKIN_LOWER = (0, 20, 70)
    SKIN_UPPER = (20, 255, 255)
    BLUR_KERNEL = (5, 5)          # Gaussian kernel applied to the binary mask

    # --- Finger Counting ---
    # Depth is OpenCV fixed point (pixels * 256), so 10000 is roughly 39 px.
    DEFECT_DEPTH_THRESHOLD = 10000

    # --- Debounce ---
    DEBOUNCE_TIME = 0.5           # Minimum dwell between accepted changes (seconds)

    # --- Game / Playfield ---
    WIDTH = 800
    HEIGHT = 600
    SPRITE_WIDTH = 400
    SPRITE_HEIGHT = 500
    PLAYER_START = (WIDTH / 2, HEIGHT - 150)
    MOVE_SPEED = 1.0              # Horizontal units per processed frame
    JUMP_HEIGHT = 5.0             # Vertical units per processed frame
    FAST_WALK_FACTOR = 1.2        # Four-finger walk multiplier

    # --- Assets ---
    ASSETS_DIR = "assets"
    SPRITES = {
        "idle": "idle.png",
        "walk": "walk.png",
        "run": "run.png",
        "jump": "jump.png",
    }

    # --- UI Theme (BGR format) ---
    WINDOW_WEBCAM = "Finger Runner - Webcam"
    WINDOW_GAME = "Finger Runner - Game"
    UI_BG = (30, 24, 18)          # Playfield background
    UI_GROUND = (40, 70, 40)      # Ground strip
    UI_ACCENT = (0, 255, 0)       # Hand outline
    UI_DEFECT = (0, 0, 255)       # Finger valleys
    UI_WARN = (0, 100, 255)
    UI_TEXT = (240, 240, 240)
    FONT = cv2.FONT_HERSHEY_SIMPLEX

    # --- Presentation Loop ---
    QUEUE_TIMEOUT = 0.03          # Max wait for a new packet before redrawing

    @classmethod
    def validate(cls):
        """Validate all configuration parameters."""
        assert 0 < cls.CAM_WIDTH <= 1920, "Camera width must be between 0 and 1920"
        assert 0 < cls.CAM_HEIGHT <= 1080, "Camera height must be between 0 and 1080"
        assert 0 < cls.FPS <= 120, "FPS must be between 0 and 120"
        assert len(cls.SKIN_LOWER) == 3 and len(cls.SKIN_UPPER) == 3, "Skin bounds need 3 channels"
        assert all(lo <= hi for lo, hi in zip(cls.SKIN_LOWER, cls.SKIN_UPPER)), \
            "Skin lower bound must not exceed upper bound"
        assert 0 <= cls.SKIN_LOWER[0] and cls.SKIN_UPPER[0] <= 179, "Hue must be within 0-179"
        assert all(0 <= v <= 255 for v in cls.SKIN_LOWER[1:] + cls.SKIN_UPPER[1:]), \
            "Saturation/value must be within 0-255"
        assert all(k > 0 and k % 2 == 1 for k in cls.BLUR_KERNEL), "Blur kernel must be odd and positive"
        assert cls.DEFECT_DEPTH_THRESHOLD >= 0, "Defect depth threshold must be non-negative"
        assert cls.DEBOUNCE_TIME > 0, "Debounce time must be positive"
        assert 0 < cls.SPRITE_WIDTH <= cls.WIDTH, "Sprite must fit the playfield width"
        assert 0 < cls.SPRITE_HEIGHT <= cls.HEIGHT, "Sprite must fit the playfield height"
        assert cls.MOVE_SPEED >= 0 and cls.JUMP_HEIGHT >= 0, "Speeds must be non-negative"
        assert set(cls.SPRITES) == {"idle", "walk", "run", "jump"}, "Exactly four sprites are required"
        assert cls.QUEUE_TIMEOUT > 0, "Queue timeout must be positive"

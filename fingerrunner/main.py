import cv2
import time
import logging
from .camera import ThreadedCamera
from .config import Config
from .detector import HandDetector
from .engine import GestureEngine, GestureState
from .sprites import SpriteNotFoundError, load_sprites
from .ui import HUD

logger = logging.getLogger(__name__)

QUIT_KEYS = (ord('q'), 27)

def main():
    """
    Finger Runner - drive a sprite with the number of raised fingers.
    Capture and detection run on the camera thread; this loop owns the
    game state and all drawing.
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Validate configuration
    try:
        Config.validate()
    except AssertionError as e:
        logger.error(f"Configuration validation failed: {e}")
        return 1

    # Sprites are required before anything else starts
    try:
        sprites = load_sprites(Config.ASSETS_DIR)
    except SpriteNotFoundError as e:
        logger.error(f"{e}. Run generate_sprites.py first.")
        return 1

    detector = HandDetector()
    cam = ThreadedCamera(src=Config.CAMERA_INDEX, width=Config.CAM_WIDTH, height=Config.CAM_HEIGHT,
                         fps=Config.FPS, mirror=Config.MIRROR, process=detector.detect)
    engine = GestureEngine()
    state = GestureState.create()

    webcam_view = HUD.render_no_camera(message="Waiting for camera...")
    game_view = HUD.render_playfield(sprites[state.sprite], state.x, state.y, label=state.sprite)
    p_time = 0
    fps = 0

    logger.info("Fingers: 1 walk left, 2 run right, 3 jump, 4 fast walk left")
    logger.info("Press [Q] or [ESC] to quit")

    try:
        cam.start()
        while True:
            packet = cam.read(timeout=Config.QUEUE_TIMEOUT)

            if packet is not None:
                engine.update(state, packet.detection.finger_count, packet.timestamp)

                c_time = time.time()
                fps = 1 / (c_time - p_time) if p_time != 0 else 0
                p_time = c_time

                webcam_view = HUD.render_webcam(packet.frame, packet.detection, state.finger_count, fps)
                game_view = HUD.render_playfield(sprites[state.sprite], state.x, state.y, label=state.sprite)
            elif cam.failed:
                webcam_view = HUD.render_no_camera(message=f"Cannot open camera {Config.CAMERA_INDEX}")

            cv2.imshow(Config.WINDOW_WEBCAM, webcam_view)
            cv2.imshow(Config.WINDOW_GAME, game_view)

            key = cv2.waitKey(1) & 0xFF
            if key in QUIT_KEYS:
                logger.info("Quit command received")
                break

    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
    except Exception as e:
        logger.error(f"Unexpected error in main loop: {e}", exc_info=True)
        return 1
    finally:
        logger.info("Shutting down Finger Runner...")
        cam.release()
        cv2.destroyAllWindows()
        logger.info(f"Processed {state.frames} frames total")

    return 0

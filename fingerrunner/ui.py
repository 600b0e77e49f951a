import cv2
import numpy as np
import logging
from typing import Optional, Tuple
from .config import Config
from .frame_data import HandDetection

logger = logging.getLogger(__name__)

class HUD:
    """Drawing for the webcam overlay and the game playfield."""

    @staticmethod
    def render_webcam(frame: np.ndarray, detection: Optional[HandDetection], fingers: int,
                      fps: float = 0, size: Tuple[int, int] = (Config.WIDTH, Config.HEIGHT)) -> np.ndarray:
        """Render the webcam view with the hand outline and debounced finger count.

        Args:
            frame: Captured frame (BGR), left untouched
            detection: Detection result for this frame, or None
            fingers: Debounced finger count to display
            fps: Current FPS for display
            size: Output (width, height)
        """
        disp = frame.copy()
        try:
            if detection is not None and detection.contour is not None:
                cv2.drawContours(disp, [detection.contour], -1, Config.UI_ACCENT, 2)
                for point in detection.defects:
                    cv2.circle(disp, point, 5, Config.UI_DEFECT, -1)

            disp = cv2.resize(disp, tuple(size))
            cv2.putText(disp, f"Fingers: {fingers}", (20, 30), Config.FONT, 0.8, Config.UI_TEXT, 2, cv2.LINE_AA)
            cv2.putText(disp, f"FPS: {int(fps)}", (20, 60), Config.FONT, 0.5, (160, 160, 160), 1, cv2.LINE_AA)
        except cv2.error as e:
            logger.error(f"Webcam overlay error: {e}")
        return disp

    @staticmethod
    def render_no_camera(size: Tuple[int, int] = (Config.WIDTH, Config.HEIGHT),
                         message: str = "Camera unavailable") -> np.ndarray:
        w, h = size
        disp = np.full((h, w, 3), Config.UI_BG, dtype=np.uint8)
        cv2.putText(disp, message, (20, h // 2), Config.FONT, 0.8, Config.UI_WARN, 2, cv2.LINE_AA)
        return disp

    @staticmethod
    def render_playfield(sprite: Optional[np.ndarray], x: float, y: float,
                         size: Tuple[int, int] = (Config.WIDTH, Config.HEIGHT),
                         label: str = "") -> np.ndarray:
        """Render the playfield with ``sprite`` drawn with its top-left at (x, y)."""
        w, h = size
        canvas = np.full((h, w, 3), Config.UI_BG, dtype=np.uint8)
        cv2.rectangle(canvas, (0, h - 20), (w, h), Config.UI_GROUND, -1)

        if sprite is not None:
            HUD.blit(canvas, sprite, int(round(x)), int(round(y)))

        if label:
            cv2.putText(canvas, label.upper(), (20, 30), Config.FONT, 0.7, Config.UI_TEXT, 2, cv2.LINE_AA)
        return canvas

    @staticmethod
    def blit(canvas: np.ndarray, sprite: np.ndarray, x: int, y: int) -> None:
        """Composite sprite onto canvas in place, alpha blended for BGRA, clipped at the edges."""
        ch, cw = canvas.shape[:2]
        sh, sw = sprite.shape[:2]
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + sw, cw), min(y + sh, ch)
        if x0 >= x1 or y0 >= y1:
            return

        src = sprite[y0 - y:y1 - y, x0 - x:x1 - x]
        dst = canvas[y0:y1, x0:x1]
        if src.shape[2] == 4:
            alpha = src[:, :, 3:4].astype(np.float32) / 255.0
            blended = alpha * src[:, :, :3].astype(np.float32) + (1.0 - alpha) * dst.astype(np.float32)
            dst[:] = blended.astype(np.uint8)
        else:
            dst[:] = src[:, :, :3]

import cv2
import logging
import numpy as np
from typing import List, Optional, Tuple
from .config import Config
from .frame_data import HandDetection

logger = logging.getLogger(__name__)

class HandDetector:
    """
    Skin-colour hand detector.
    Segments skin in HSV, keeps the largest external contour and counts the
    deep convexity defects (valleys between extended fingers).
    """
    def __init__(self, lower=Config.SKIN_LOWER, upper=Config.SKIN_UPPER,
                 blur_kernel=Config.BLUR_KERNEL, depth_threshold=Config.DEFECT_DEPTH_THRESHOLD):
        self.lower = np.array(lower, dtype=np.uint8)
        self.upper = np.array(upper, dtype=np.uint8)
        self.blur_kernel = tuple(blur_kernel)
        self.depth_threshold = depth_threshold

    def skin_mask(self, frame: Optional[np.ndarray]) -> np.ndarray:
        """Binary skin mask (0/255 before blur) of the same height/width as frame."""
        if frame is None or frame.size == 0:
            return np.zeros((0, 0), dtype=np.uint8)

        # BGR -> HSV, then inclusive range threshold.
        hsv = cv2.cvtColor(frame, cv2.COLOR_BGR2HSV)
        mask = cv2.inRange(hsv, self.lower, self.upper)

        # Smooth speckle noise along the region borders.
        return cv2.GaussianBlur(mask, self.blur_kernel, 0)

    @staticmethod
    def find_contours(mask: np.ndarray) -> List[np.ndarray]:
        # Outer boundaries only, collinear points removed.
        if mask is None or mask.size == 0:
            return []
        contours, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
        return list(contours)

    @staticmethod
    def largest_contour(contours) -> Optional[np.ndarray]:
        # max() keeps the first of equal areas, i.e. OpenCV's enumeration order.
        if not contours:
            return None
        return max(contours, key=cv2.contourArea)

    @staticmethod
    def convexity_defects(contour: np.ndarray) -> Optional[np.ndarray]:
        """Rows of (start, end, farthest, depth) or None for degenerate contours."""
        if contour is None or len(contour) < 4:
            return None

        hull = cv2.convexHull(contour, returnPoints=False)
        if hull is None or len(hull) < 3:
            return None

        try:
            return cv2.convexityDefects(contour, hull)
        except cv2.error as e:
            # Self-intersecting or non-monotonic hulls from tiny blobs.
            logger.debug(f"Convexity defects unavailable: {e}")
            return None

    def count_fingers(self, contour: Optional[np.ndarray]) -> Tuple[int, List[Tuple[int, int]]]:
        if contour is None:
            return 0, []

        defects = self.convexity_defects(contour)
        if defects is None:
            return 0, []

        far_points = []
        for s, e, f, depth in defects[:, 0]:
            if depth > self.depth_threshold:
                far_points.append(tuple(int(v) for v in contour[f][0]))
        return len(far_points), far_points

    def detect(self, frame: np.ndarray) -> HandDetection:
        """Run the full per-frame pipeline: mask, contour, defects, count."""
        mask = self.skin_mask(frame)
        contour = self.largest_contour(self.find_contours(mask))
        count, far_points = self.count_fingers(contour)
        return HandDetection(contour=contour, finger_count=count, defects=far_points)

    def count_fingers_in(self, frame: np.ndarray) -> int:
        return self.detect(frame).finger_count

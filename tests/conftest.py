import cv2
import numpy as np
import pytest

SKIN_BGR = (80, 120, 200)      # HSV (10, 153, 200)
FRAME_SHAPE = (480, 640, 3)

PALM = (170, 250, 470, 420)    # x0, y0, x1, y1
FINGER_WIDTH = 40


def draw_hand(fingers, color=SKIN_BGR, shape=FRAME_SHAPE):
    """Palm with ``fingers`` rounded fingers spread across its full width.

    Outer fingers are flush with the palm edges and tips follow an arch, so
    every gap between neighbours is one deep convexity defect.
    """
    frame = np.zeros(shape, dtype=np.uint8)
    x0, y0, x1, y1 = PALM
    cv2.rectangle(frame, (x0, y0), (x1, y1), color, -1)
    if fingers <= 0:
        return frame

    r = FINGER_WIDTH // 2
    first, last = x0 + r, x1 - r
    mid = (first + last) / 2.0
    centers = np.linspace(first, last, fingers) if fingers > 1 else [mid]
    for cx in centers:
        tip = int(round(80 + 70 * ((cx - mid) / (mid - first)) ** 2))
        cx = int(round(cx))
        cv2.rectangle(frame, (cx - r, tip), (cx + r, y0), color, -1)
        cv2.circle(frame, (cx, tip), r, color, -1)
    return frame


@pytest.fixture
def blank_frame():
    return np.zeros(FRAME_SHAPE, dtype=np.uint8)


@pytest.fixture
def disc_frame():
    frame = np.zeros(FRAME_SHAPE, dtype=np.uint8)
    cv2.circle(frame, (320, 240), 120, SKIN_BGR, -1)
    return frame


@pytest.fixture
def hand():
    return draw_hand

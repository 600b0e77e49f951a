from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import numpy as np

@dataclass
class HandDetection:
    # Largest skin contour, None when the mask was empty
    contour: Optional[np.ndarray] = None

    # Raw per-frame estimate (deep defects), not debounced
    finger_count: int = 0

    # Farthest points of the accepted defects, for the overlay
    defects: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def has_hand(self) -> bool:
        return self.contour is not None


@dataclass
class FramePacket:
    # Snapshot of the captured frame (BGR), owned by the receiver
    frame: np.ndarray

    detection: HandDetection = field(default_factory=HandDetection)

    # time.monotonic() at capture
    timestamp: float = 0.0

    # Sequence number assigned by the capture loop
    index: int = 0

import cv2
import queue
import threading
import time
import logging
from .frame_data import FramePacket, HandDetection

logger = logging.getLogger(__name__)

READ_RETRY_DELAY = 0.01        # Pause after a failed read (seconds)
READ_FAILURE_LOG_EVERY = 100   # Log the first failed read, then every Nth

class ThreadedCamera:
    """Background capture loop publishing frame snapshots to a single-slot channel."""

    def __init__(self, src=0, width=640, height=480, fps=30, mirror=False, process=None):
        self.src = src
        self.width = width
        self.height = height
        self.fps = fps
        self.mirror = mirror
        self.process = process

        self.cap = None
        self.failed = False
        self.frame_count = 0
        self.read_failures = 0
        self.packets = queue.Queue(maxsize=1)
        self.stop_event = threading.Event()
        self.thread = None

    def _open_camera(self):
        """Open and configure the device. Returns False when it cannot be opened."""
        self.cap = cv2.VideoCapture(self.src)
        if not self.cap.isOpened():
            logger.error(f"Failed to open camera {self.src}")
            return False

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.fps)
        self.cap.set(cv2.CAP_PROP_BUFFERSIZE, 1)
        return True

    def start(self):
        """Start the capture thread."""
        self.stop_event.clear()
        self.thread = threading.Thread(target=self._update_loop, name="camera", daemon=True)
        self.thread.start()
        return self

    def _update_loop(self):
        """Main capture loop. Runs on the camera thread only."""
        try:
            if not self._open_camera():
                self.failed = True
                return

            logger.info(f"Camera started: {self.width}x{self.height}@{self.fps}fps")
            while not self.stop_event.is_set():
                success, frame = self.cap.read()
                if not success:
                    self.read_failures += 1
                    if self.read_failures % READ_FAILURE_LOG_EVERY == 1:
                        logger.warning(f"Failed to read frame ({self.read_failures} so far), retrying")
                    self.stop_event.wait(READ_RETRY_DELAY)
                    continue
                self._publish(frame)
        except Exception as e:
            self.failed = True
            logger.error(f"Error in camera loop: {e}", exc_info=True)
        finally:
            if self.cap is not None:
                self.cap.release()
            logger.info(f"Capture loop finished after {self.frame_count} frames")

    def _publish(self, frame):
        if self.mirror:
            frame = cv2.flip(frame, 1)

        # The device may reuse its buffer; the receiver gets its own copy.
        snapshot = frame.copy()
        detection = self.process(snapshot) if self.process is not None else HandDetection()
        self.frame_count += 1
        packet = FramePacket(frame=snapshot, detection=detection,
                             timestamp=time.monotonic(), index=self.frame_count)

        # Never block on the consumer: replace a stale packet with the newer one.
        while True:
            try:
                self.packets.put_nowait(packet)
                return
            except queue.Full:
                try:
                    self.packets.get_nowait()
                except queue.Empty:
                    pass

    def read(self, timeout=None):
        """Next packet, or None if nothing arrived within timeout (non-blocking when None)."""
        try:
            if timeout is None:
                return self.packets.get_nowait()
            return self.packets.get(timeout=timeout)
        except queue.Empty:
            return None

    def is_running(self):
        """Check if the capture thread is alive."""
        return self.thread is not None and self.thread.is_alive() and not self.stop_event.is_set()

    def release(self):
        """Stop the capture thread and release the device."""
        self.stop_event.set()
        if self.thread is not None:
            self.thread.join(timeout=2.0)
            if self.thread.is_alive():
                logger.warning("Camera thread did not stop within 2s")
        if self.cap is not None and (self.thread is None or not self.thread.is_alive()):
            self.cap.release()
        logger.info("Camera released")

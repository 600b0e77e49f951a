import logging
import threading
import time
import cv2
import numpy as np
import pytest
from fingerrunner.camera import ThreadedCamera
from fingerrunner.frame_data import HandDetection


class FakeCapture:
    """Stand-in for cv2.VideoCapture that reuses one frame buffer."""

    def __init__(self, opened=True, frames=None, delay=0.0):
        self.opened = opened
        self.remaining = frames
        self.delay = delay
        self.buffer = np.zeros((4, 4, 3), dtype=np.uint8)
        self.released = False
        self.props = {}

    def isOpened(self):
        return self.opened and not self.released

    def set(self, prop, value):
        self.props[prop] = value
        return True

    def read(self):
        if self.delay:
            time.sleep(self.delay)
        if self.remaining is not None:
            if self.remaining == 0:
                return False, None
            self.remaining -= 1
        self.buffer[:] = (self.buffer[0, 0, 0] + 1) % 256
        return True, self.buffer

    def release(self):
        self.released = True


def wait_until(condition, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.005)
    return condition()


@pytest.fixture
def fake_capture(monkeypatch):
    holder = {}

    def install(**kwargs):
        cap = FakeCapture(**kwargs)
        holder["cap"] = cap
        monkeypatch.setattr(cv2, "VideoCapture", lambda src: cap)
        return cap

    return install


def test_open_failure_stops_capture_only(fake_capture, caplog):
    cap = fake_capture(opened=False)
    with caplog.at_level(logging.ERROR):
        cam = ThreadedCamera(src=3).start()
        cam.thread.join(timeout=2.0)

    assert not cam.thread.is_alive()
    assert cam.failed
    assert cam.read(timeout=0.05) is None
    assert cap.released
    assert "Failed to open camera 3" in caplog.text


def test_publishes_latest_snapshot(fake_capture):
    cap = fake_capture(frames=5)
    cam = ThreadedCamera(width=320, height=240, fps=15).start()
    assert wait_until(lambda: cam.read_failures > 0)
    cam.release()

    packet = cam.read(timeout=1.0)
    assert packet is not None
    assert packet.index == 5
    assert packet.frame[0, 0, 0] == 5
    assert packet.frame is not cap.buffer

    cap.buffer[:] = 99
    assert packet.frame[0, 0, 0] == 5
    assert cam.read() is None
    assert cap.released
    assert cap.props[cv2.CAP_PROP_FRAME_WIDTH] == 320
    assert not cam.failed


def test_process_runs_on_each_snapshot(fake_capture):
    fake_capture(frames=3)
    seen = []

    def process(frame):
        seen.append(threading.current_thread().name)
        return HandDetection(finger_count=int(frame[0, 0, 0]))

    cam = ThreadedCamera(process=process).start()
    assert wait_until(lambda: cam.read_failures > 0)
    cam.release()

    packet = cam.read(timeout=1.0)
    assert packet.detection.finger_count == 3
    assert seen == ["camera"] * 3


def test_channel_drops_stale_packets():
    cam = ThreadedCamera()
    frame = np.zeros((2, 2, 3), dtype=np.uint8)
    for _ in range(3):
        cam._publish(frame)

    packet = cam.read()
    assert packet.index == 3
    assert cam.read() is None


def test_mirror_flips_before_publish():
    cam = ThreadedCamera(mirror=True)
    frame = np.zeros((1, 2, 3), dtype=np.uint8)
    frame[0, 0] = 255
    cam._publish(frame)

    packet = cam.read()
    assert packet.frame[0, 1, 0] == 255
    assert packet.frame[0, 0, 0] == 0


def test_release_stops_running_loop(fake_capture):
    cap = fake_capture(delay=0.001)
    cam = ThreadedCamera().start()
    assert cam.read(timeout=2.0) is not None
    assert cam.is_running()

    cam.release()
    assert not cam.thread.is_alive()
    assert not cam.is_running()
    assert cap.released


def test_process_error_releases_device(fake_capture, caplog):
    cap = fake_capture(frames=10)

    def broken(frame):
        raise RuntimeError("bad frame")

    with caplog.at_level(logging.ERROR):
        cam = ThreadedCamera(process=broken).start()
        cam.thread.join(timeout=2.0)

    assert cam.failed
    assert cap.released
    assert "bad frame" in caplog.text


def test_failed_reads_keep_capture_alive(fake_capture, caplog):
    cap = fake_capture(frames=0)
    with caplog.at_level(logging.WARNING):
        cam = ThreadedCamera().start()
        assert wait_until(lambda: cam.read_failures >= 3)

    assert cam.thread.is_alive()
    assert cam.is_running()
    assert not cam.failed
    assert cam.read() is None
    assert caplog.text.count("Failed to read frame") == 1

    cam.release()
    assert not cam.thread.is_alive()
    assert cap.released


def test_capture_resumes_after_failed_reads(fake_capture):
    cap = fake_capture(frames=0)
    cam = ThreadedCamera().start()
    assert wait_until(lambda: cam.read_failures > 0)

    cap.remaining = 2
    packet = cam.read(timeout=2.0)
    assert packet is not None
    assert packet.frame[0, 0, 0] >= 1
    cam.release()

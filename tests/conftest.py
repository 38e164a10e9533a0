"""Shared fixtures for the smart-mouse test suite."""

from __future__ import annotations

import cv2
import numpy as np
import pytest

from smart_mouse.core.config import Config
from smart_mouse.core.exceptions import OCRError
from smart_mouse.vision.models import Frame, Rectangle
from smart_mouse.vision.ocr import OCRWord


class ScriptedOCR:
    """OCR double: fixed word stream plus per-crop texts in call order."""

    def __init__(self, words=(), crop_texts=()):
        self.words = list(words)
        self.crop_texts = list(crop_texts)
        self.crops = []
        self.word_calls = 0

    def recognize_words(self, frame):
        self.word_calls += 1
        for word in self.words:
            yield word

    def recognize_text(self, frame):
        self.crops.append(frame)
        if not self.crop_texts:
            return ""
        text = self.crop_texts.pop(0)
        if isinstance(text, Exception):
            raise text
        return text


class ScriptedContours:
    """Vision primitive double returning fixed bounding boxes."""

    def __init__(self, rects=()):
        self.rects = list(rects)
        self.calls = 0

    def detect_edges_and_contours(self, frame):
        self.calls += 1
        return list(self.rects)


class FakeCapture:
    def __init__(self, frame):
        self.frame = frame
        self.calls = 0

    def capture_frame(self):
        self.calls += 1
        return self.frame


class RecordingPointer:
    def __init__(self):
        self.events = []

    def move_and_click(self, point, button=None):
        self.events.append((point, button))


def word(text, x, y, w, h, conf=95.0):
    return OCRWord(text=text, bounds=Rectangle(x, y, w, h), confidence=conf)


@pytest.fixture
def settings(tmp_path):
    """Config with zero pointer delays and a temp debug directory."""
    return Config(
        move_settle_delay=0,
        button_hold_delay=0,
        double_click_interval=0,
        vision_debug_dir=str(tmp_path / "debug"),
        log_dir=None,
    )


@pytest.fixture
def blank_frame():
    """A uniform white frame: no edges anywhere."""
    return Frame(np.full((300, 400, 3), 255, dtype=np.uint8))


@pytest.fixture
def button_frame():
    """White frame with one button-shaped outline and several non-buttons."""
    img = np.full((400, 600, 3), 255, dtype=np.uint8)
    cv2.rectangle(img, (50, 50), (169, 89), (0, 0, 0), 2)     # 120x40 button
    cv2.rectangle(img, (300, 50), (359, 109), (0, 0, 0), 2)   # 60x60 square
    cv2.rectangle(img, (450, 50), (479, 149), (0, 0, 0), 2)   # 30x100 tall bar
    cv2.rectangle(img, (50, 250), (59, 259), (0, 0, 0), 2)    # 10x10 icon
    cv2.rectangle(img, (10, 330), (589, 389), (0, 0, 0), 2)   # 580x60 banner
    return Frame(img)


@pytest.fixture
def scripted_ocr():
    return ScriptedOCR


@pytest.fixture
def scripted_contours():
    return ScriptedContours


@pytest.fixture
def fake_capture():
    return FakeCapture


@pytest.fixture
def recording_pointer():
    return RecordingPointer()


@pytest.fixture
def make_word():
    return word


@pytest.fixture
def ocr_error():
    return OCRError("crop failed")

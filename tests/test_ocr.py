import numpy as np
import pytest
import pytesseract

from smart_mouse.core.exceptions import OCREngineUnavailableError, OCRError
from smart_mouse.vision import ocr as ocr_module
from smart_mouse.vision.models import CandidateKind, Frame, Rectangle
from smart_mouse.vision.ocr import OCRWord, TesseractEngine
from smart_mouse.vision.text_extractor import TextExtractor

TESSERACT_DATA = {
    "level": [1, 2, 3, 4, 5, 5, 5],
    "text": ["", "", "", "", "Save", " ", "Cancel"],
    "conf": [-1, -1, -1, -1, 96.5, -1, 88],
    "left": [0, 10, 10, 10, 10, 60, 80],
    "top": [0, 5, 5, 5, 5, 5, 5],
    "width": [200, 150, 150, 150, 40, 0, 60],
    "height": [50, 20, 20, 20, 20, 20, 20],
}


@pytest.fixture
def engine(monkeypatch, settings):
    monkeypatch.setattr(ocr_module.pytesseract, "get_tesseract_version", lambda: "5.3.0")
    return TesseractEngine(settings)


@pytest.fixture
def frame():
    return Frame(np.full((50, 200, 3), 255, dtype=np.uint8))


def test_missing_binary_is_fatal(monkeypatch, settings):
    def missing():
        raise pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(ocr_module.pytesseract, "get_tesseract_version", missing)
    with pytest.raises(OCREngineUnavailableError):
        TesseractEngine(settings)


def test_words_are_yielded_at_word_level(monkeypatch, engine, frame):
    monkeypatch.setattr(ocr_module.pytesseract, "image_to_data", lambda *a, **kw: TESSERACT_DATA)

    words = list(engine.recognize_words(frame))

    assert [w.text for w in words] == ["Save", None, "Cancel"]
    assert words[0].bounds == Rectangle(10, 5, 40, 20)
    assert words[0].confidence == pytest.approx(96.5)
    assert words[1].confidence == 0.0


def test_word_failure_raises_ocr_error(monkeypatch, engine, frame):
    def broken(*args, **kwargs):
        raise pytesseract.TesseractError(1, "boom")

    monkeypatch.setattr(ocr_module.pytesseract, "image_to_data", broken)
    with pytest.raises(OCRError):
        list(engine.recognize_words(frame))


def test_region_text_is_stripped(monkeypatch, engine, frame):
    monkeypatch.setattr(ocr_module.pytesseract, "image_to_string", lambda *a, **kw: " Submit\n\x0c")
    assert engine.recognize_text(frame) == "Submit"


def test_empty_region_skips_ocr(monkeypatch, engine):
    def never(*args, **kwargs):
        raise AssertionError("OCR should not run on an empty crop")

    monkeypatch.setattr(ocr_module.pytesseract, "image_to_string", never)
    empty = Frame(np.zeros((0, 0, 3), dtype=np.uint8))
    assert engine.recognize_text(empty) == ""


class TestTextExtractor:
    def test_builds_text_candidates(self, scripted_ocr, make_word, blank_frame):
        ocr = scripted_ocr([make_word("File", 0, 0, 30, 12, 91.0), make_word("Edit", 40, 0, 30, 12, 87.5)])

        candidates = TextExtractor(ocr).extract_words(blank_frame)

        assert [c.text for c in candidates] == ["File", "Edit"]
        assert all(c.kind is CandidateKind.TEXT for c in candidates)
        assert candidates[1].confidence == 87.5
        assert candidates[0].bounds == Rectangle(0, 0, 30, 12)

    def test_skips_null_text_and_zero_area(self, scripted_ocr, make_word, blank_frame):
        ocr = scripted_ocr([
            OCRWord(text=None, bounds=Rectangle(0, 0, 10, 10), confidence=90),
            make_word("ghost", 5, 5, 0, 10),
            make_word("real", 5, 5, 10, 10),
        ])
        candidates = TextExtractor(ocr).extract_words(blank_frame)
        assert [c.text for c in candidates] == ["real"]

    def test_confidence_is_clamped(self, scripted_ocr, make_word, blank_frame):
        ocr = scripted_ocr([make_word("hi", 0, 0, 5, 5, 140.0), make_word("lo", 0, 0, 5, 5, -3.0)])
        confidences = [c.confidence for c in TextExtractor(ocr).extract_words(blank_frame)]
        assert confidences == [100.0, 0.0]

    def test_stream_is_fully_drained(self, make_word, blank_frame):
        drained = []

        class StreamingOCR:
            def recognize_words(self, frame):
                yield make_word("one", 0, 0, 5, 5)
                yield make_word("two", 0, 0, 5, 5)
                drained.append(True)

        candidates = TextExtractor(StreamingOCR()).extract_words(blank_frame)
        assert drained == [True]
        assert len(candidates) == 2

    def test_failed_word_pass_yields_no_candidates(self, make_word, blank_frame):
        class FailingOCR:
            def recognize_words(self, frame):
                yield make_word("partial", 0, 0, 5, 5)
                raise OCRError("tesseract crashed")

        assert TextExtractor(FailingOCR()).extract_words(blank_frame) == []

"""Tests for transgizmo.log."""

import logging

import numpy as np

from transgizmo import log
from transgizmo.config import HandleConfig, Ray, TransformKind
from transgizmo.translation import TranslationHandle


class TestLogFacade:

    def test_message(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="transgizmo"):
            log.debug("hello")
        assert "hello" in caplog.text
        assert caplog.records[-1].levelno == logging.DEBUG

    def test_exception_with_context(self, caplog):
        try:
            raise ValueError("bad value")
        except ValueError as e:
            with caplog.at_level(logging.ERROR, logger="transgizmo"):
                log.error(e, "While testing")

        assert "While testing: ValueError: bad value" in caplog.text
        assert "Traceback" in caplog.text

    def test_exception_without_context(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="transgizmo"):
            log.debug(KeyError("kind"))
        assert caplog.records[-1].getMessage().startswith("KeyError: 'kind'")

    def test_set_level(self):
        logger = logging.getLogger("transgizmo")
        old = logger.level
        try:
            log.set_level(logging.ERROR)
            assert logger.level == logging.ERROR
            log.set_level("DEBUG")
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(old)


class TestHandleLogging:

    def test_skipped_update_is_logged_at_debug(self, caplog):
        handle = TranslationHandle(
            HandleConfig(direction=[0, 0, 1], transform_kind=TransformKind.PLANE)
        )
        ray = Ray(origin=np.array([0.0, 0.0, 1.0]), direction=np.array([1.0, 0.0, 0.0]))

        with caplog.at_level(logging.DEBUG, logger="transgizmo"):
            assert handle.update(ray) is None

        assert any("skipped" in r.getMessage() for r in caplog.records)
        assert all(r.levelno == logging.DEBUG for r in caplog.records)

"""
Unit tests for the process-wide error reporter.
"""
import logging
from logpool.observability import hooks


class TestErrorReporter:

    def test_default_reporter_logs_with_traceback(self, logger, caplog):
        def broken(msg):
            raise ValueError("handler exploded")

        logger.add_handler(broken)
        with caplog.at_level(logging.ERROR, logger="logpool"):
            logger.log(1, "x")
        records = [r for r in caplog.records if r.name == "logpool"]
        assert len(records) == 1
        assert "handler exploded" in records[0].getMessage()
        assert records[0].exc_info is not None

    def test_use_error_reporter_restores_previous(self):
        before = hooks.get_error_reporter()
        seen = []
        with hooks.use_error_reporter(seen.append):
            assert hooks.get_error_reporter() == seen.append
            hooks.report_error(RuntimeError("boom"))
        assert hooks.get_error_reporter() is before
        assert len(seen) == 1

    def test_none_restores_default(self):
        with hooks.use_error_reporter(lambda e: None):
            hooks.set_error_reporter(None)
            assert hooks.get_error_reporter() is hooks.log_error

    def test_broken_reporter_never_reaches_caller(self, logger, caplog):
        def bad_reporter(error):
            raise RuntimeError("reporter down")

        def broken(msg):
            raise ValueError("handler down")

        got = []
        logger.add_handler(broken)
        logger.add_handler(got.append)
        with hooks.use_error_reporter(bad_reporter):
            with caplog.at_level(logging.ERROR, logger="logpool"):
                logger.log(1, "x")
        assert got == ["x"]
        assert any("reporter" in r.getMessage() for r in caplog.records)

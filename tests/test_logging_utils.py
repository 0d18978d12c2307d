import logging
import os
import tempfile
import unittest

from solana_sniper import logging_utils
from solana_sniper.logging_utils import LOGGER_NAME, new_logger


class NewLoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        log = logging.getLogger(LOGGER_NAME)
        while logging_utils._HANDLERS:
            handler = logging_utils._HANDLERS.pop()
            log.removeHandler(handler)
            handler.close()

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        new_logger()
        log = new_logger()
        stream_handlers = [h for h in log.handlers if h in logging_utils._HANDLERS]
        self.assertEqual(len(stream_handlers), 1)

    def test_leaves_foreign_handlers_attached(self) -> None:
        log = logging.getLogger(LOGGER_NAME)
        foreign = logging.NullHandler()
        log.addHandler(foreign)
        try:
            new_logger()
            new_logger()
            self.assertIn(foreign, log.handlers)
        finally:
            log.removeHandler(foreign)

    def test_writes_utc_lines_to_log_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "sniper.log")
            log = new_logger(log_file=path)
            log.info("hello")
            self.tearDown()
            with open(path, encoding="utf-8") as fh:
                line = fh.read().strip()
        self.assertRegex(line, r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z INFO hello$")


if __name__ == "__main__":
    unittest.main()

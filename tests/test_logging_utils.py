import logging
import unittest

from pgnfacts.utils.logger import get_logger, set_level


class LoggingUtilsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger("pgnfacts")
        self.original_handlers = list(self.logger.handlers)
        self.original_level = self.logger.level

    def tearDown(self) -> None:
        self.logger.handlers = list(self.original_handlers)
        self.logger.setLevel(self.original_level)

    def test_get_logger_reuses_existing_handlers(self) -> None:
        handler = logging.StreamHandler()
        self.logger.handlers = [handler]

        logger = get_logger("pgnfacts")

        self.assertIs(logger, self.logger)
        self.assertEqual(logger.handlers, [handler])

    def test_module_loggers_propagate_to_package_logger(self) -> None:
        logger = get_logger("pgnfacts.some_module")

        self.assertEqual(logger.handlers, [])
        self.assertTrue(logger.propagate)
        self.assertTrue(self.logger.handlers)
        self.assertFalse(self.logger.propagate)

    def test_set_level_updates_package_logger(self) -> None:
        set_level(logging.WARNING)

        self.assertEqual(logging.getLogger("pgnfacts").level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()

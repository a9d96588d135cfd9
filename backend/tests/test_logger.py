import logging
import unittest

from vivida.utils.logger import DEFAULT_FORMAT, configure_logger, logger


class LoggerTests(unittest.TestCase):
    def tearDown(self):
        configure_logger("test")

    def test_module_logger_uses_project_name(self):
        self.assertEqual(logger.name, "vivida")
        self.assertEqual(logger.level, logging.INFO)
        self.assertFalse(logger.propagate)

    def test_development_is_verbose_with_source_location(self):
        log = configure_logger("development")

        self.assertEqual(log.level, logging.DEBUG)
        self.assertEqual(len(log.handlers), 1)
        self.assertIn("%(module)s", log.handlers[0].formatter._fmt)

    def test_other_environments_use_default_format(self):
        configure_logger("development")
        log = configure_logger("production")

        self.assertEqual(log.level, logging.INFO)
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.handlers[0].formatter._fmt, DEFAULT_FORMAT)


if __name__ == "__main__":
    unittest.main()

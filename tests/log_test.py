import json
import os
import tempfile
from unittest import TestCase, mock

from ccs import log


class ConfigureLoggingTests(TestCase):
    @mock.patch("logging.config.dictConfig")
    def test_replaces_log_path_and_creates_log_directory(self, dict_config):
        with tempfile.TemporaryDirectory() as tmp:
            log_config_file = os.path.join(tmp, "logging.json")
            with open(log_config_file, "wt", encoding="utf-8") as f:
                json.dump({
                    "version": 1,
                    "handlers": {
                        "log_file": {"class": "logging.FileHandler", "filename": "${LOG_PATH}/ccs.log"},
                        "console": {"class": "logging.StreamHandler"},
                    },
                }, f)

            with mock.patch("ccs.paths.logs", return_value=os.path.join(tmp, "logs")):
                log.configure_logging(log_config_file)

            self.assertTrue(os.path.isdir(os.path.join(tmp, "logs")))
            applied = dict_config.call_args[0][0]
            self.assertEqual(os.path.join(tmp, "logs", "ccs.log"), applied["handlers"]["log_file"]["filename"])
            self.assertNotIn("filename", applied["handlers"]["console"])

    def test_packaged_log_config_exists(self):
        with open(log.default_log_config_file(), "rt", encoding="utf-8") as f:
            log_config = json.load(f)

        self.assertEqual(1, log_config["version"])
        self.assertIn("${LOG_PATH}", log_config["handlers"]["log_file"]["filename"])

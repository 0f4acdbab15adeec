import os
from unittest import TestCase, mock

from ccs import paths


class PathsTests(TestCase):
    @mock.patch.dict(os.environ, {"CCS_HOME": "/srv/ccs"})
    def test_confdir_below_configured_home(self):
        self.assertEqual("/srv/ccs/.ccs", paths.ccs_confdir())
        self.assertEqual("/srv/ccs/.ccs/logs", paths.logs())

    def test_default_config_file_is_packaged(self):
        self.assertTrue(os.path.isfile(paths.default_config_file()))

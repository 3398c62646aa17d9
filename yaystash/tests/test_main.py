# Copyright 2013 Isotoma Limited
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import io
import os
import shutil
import tempfile
import unittest

import mock

from yaystash import main


class TestMain(unittest.TestCase):

    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.stdout = io.StringIO()
        patcher = mock.patch("sys.stdout", self.stdout)
        patcher.start()
        self.addCleanup(patcher.stop)
        # keep the test run's own logging configuration
        patcher = mock.patch("yaystash.main.configure_logging")
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        shutil.rmtree(self.dir)

    def write(self, contents):
        path = os.path.join(self.dir, "params.yaml")
        with open(path, "w") as fp:
            fp.write(contents)
        return path

    def test_check(self):
        self.assertEqual(main._main(["-o", "Debian", "check"]), 0)

    def test_check_invalid(self):
        path = self.write("osfamily: RedHat\nversion: '7.10'\npackage_url: https://example.com/pkg.rpm\n")
        self.assertEqual(main._main(["-C", path, "check"]), 162)

    def test_check_unsupported(self):
        self.assertEqual(main._main(["-o", "Plan9", "check"]), 164)

    def test_check_missing_file(self):
        path = os.path.join(self.dir, "nope.yaml")
        self.assertEqual(main._main(["-C", path, "-o", "Debian", "check"]), 128)

    def test_check_bad_yaml(self):
        path = self.write("settings: [unclosed\n")
        self.assertEqual(main._main(["-C", path, "-o", "Debian", "check"]), 128)

    def test_plan(self):
        self.assertEqual(main._main(["-o", "Debian", "plan"]), 0)
        output = self.stdout.getvalue()
        self.assertIn("order: repo -> package -> config -> service\n", output)
        self.assertIn("edge: repo -> package\n", output)
        self.assertIn("    Service[logstash] (manage)\n", output)
        self.assertIn("        notify Service[logstash]\n", output)

    def test_plan_absent(self):
        path = self.write("ensure: absent\nmanage_repo: false\n")
        self.assertEqual(main._main(["-C", path, "-o", "Suse", "plan"]), 0)
        output = self.stdout.getvalue()
        self.assertIn("edge: service -> package\n", output)
        self.assertIn("    Package[logstash] (purge)\n", output)

    def test_simulate(self):
        self.assertEqual(main._main(["-o", "Debian", "simulate"]), 0)
        output = self.stdout.getvalue()
        self.assertIn("run 2: 0 changes\n", output)
        self.assertIn("    started service logstash\n", output)

    def test_bad_command(self):
        with mock.patch("sys.stderr", io.StringIO()):
            self.assertRaises(SystemExit, main._main, ["-o", "Debian", "explode"])
            self.assertRaises(SystemExit, main._main, [])

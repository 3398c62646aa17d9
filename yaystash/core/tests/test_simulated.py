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

import unittest

from yaystash.core.simulated import SimulatedHost


class TestSimulatedHost(unittest.TestCase):

    def setUp(self):
        self.host = SimulatedHost(available={"logstash": "7.10.2"})

    def test_package_present(self):
        self.assertTrue(self.host.ensure_package("logstash", "present"))
        self.assertEqual(self.host.packages["logstash"], "7.10.2")
        self.assertFalse(self.host.ensure_package("logstash", "present"))

    def test_package_version(self):
        self.assertTrue(self.host.ensure_package("logstash", "7.9.0"))
        self.assertFalse(self.host.ensure_package("logstash", "7.9.0"))
        self.assertFalse(self.host.ensure_package("logstash", "present"))
        self.assertTrue(self.host.ensure_package("logstash", "latest"))
        self.assertEqual(self.host.packages["logstash"], "7.10.2")

    def test_package_purged(self):
        self.assertFalse(self.host.ensure_package("logstash", "purged"))
        self.host.ensure_package("logstash", "present")
        self.assertTrue(self.host.ensure_package("logstash", "purged"))
        self.assertNotIn("logstash", self.host.packages)

    def test_render_file(self):
        self.assertTrue(self.host.render_file("/etc/a", "a", "root", "root", 0o644))
        self.assertFalse(self.host.render_file("/etc/a", "a", "root", "root", 0o644))
        self.assertTrue(self.host.render_file("/etc/a", "a", "root", "root", 0o600))

    def test_purge(self):
        self.host.render_file("/etc/logstash/old.conf", "", "root", "root", 0o644)
        self.host.render_file("/etc/logstash/conf.d/new.conf", "", "root", "root", 0o644)
        self.host.render_file("/etc/logstashold", "", "root", "root", 0o644)
        self.host.ensure_directory("/etc/logstash/conf.d", "root", "root", 0o755)
        self.assertTrue(self.host.ensure_directory(
            "/etc/logstash", "root", "root", 0o755, purge=True,
            keep=("/etc/logstash/conf.d/new.conf", )))
        self.assertEqual(sorted(self.host.files), ["/etc/logstash/conf.d/new.conf", "/etc/logstashold"])
        self.assertIn("/etc/logstash/conf.d", self.host.directories)

    def test_remove_path(self):
        self.host.ensure_directory("/etc/logstash", "root", "root", 0o755)
        self.host.render_file("/etc/logstash/a", "", "root", "root", 0o644)
        self.assertTrue(self.host.remove_path("/etc/logstash"))
        self.assertEqual(self.host.files, {})
        self.assertEqual(self.host.directories, {})
        self.assertFalse(self.host.remove_path("/etc/logstash"))

    def test_service(self):
        self.assertFalse(self.host.service_running("logstash"))
        self.assertTrue(self.host.ensure_service("logstash", True, None))
        self.assertEqual(self.host.services["logstash"], {"running": True, "enabled": False})
        self.assertFalse(self.host.ensure_service("logstash", True, None))
        self.assertFalse(self.host.ensure_service("logstash", None, None))
        self.assertTrue(self.host.ensure_service("logstash", None, True))
        self.assertTrue(self.host.service_running("logstash"))

    def test_repo(self):
        self.assertTrue(self.host.ensure_repo("elastic-7.x", "7.x", "/etc/apt/sources.list.d/elastic-7.x.list", "deb", "key"))
        self.assertFalse(self.host.ensure_repo("elastic-7.x", "7.x", "/etc/apt/sources.list.d/elastic-7.x.list", "deb", "key"))
        self.assertIn("/etc/apt/sources.list.d/elastic-7.x.list", self.host.files)

    def test_changes_recorded(self):
        self.host.restart_service("logstash")
        self.host.execute(["/bin/true"])
        self.assertEqual(self.host.changes, ["restarted service logstash", "executed /bin/true"])
        self.assertEqual(self.host.restarts, ["logstash"])
        self.assertEqual(self.host.executed, [["/bin/true"]])

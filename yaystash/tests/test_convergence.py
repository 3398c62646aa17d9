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

import mock

from yaystash import manifest, params
from yaystash.core.host import Host
from yaystash.core.runner import Runner
from yaystash.core.simulated import SimulatedHost


def build(**kwargs):
    return manifest.build(params.resolve("Debian", **kwargs))


class TestConvergence(unittest.TestCase):

    def setUp(self):
        self.host = SimulatedHost(available={"logstash": "7.10.2"})

    def converge(self, **kwargs):
        del self.host.changes[:]
        return Runner(build(**kwargs), self.host).run()

    def test_first_run(self):
        self.assertTrue(self.converge())
        self.assertEqual(self.host.packages, {"logstash": "7.10.2"})
        self.assertIn("elastic-7.x", self.host.repos)
        self.assertEqual(self.host.services["logstash"], {"running": True, "enabled": True})
        self.assertIn("/etc/logstash/logstash.yml", self.host.files)
        self.assertEqual(self.host.executed, [[
            "/usr/share/logstash/bin/system-install",
            "/etc/logstash/startup.options",
            "systemd",
            ]])
        # the service was started by this run, so it is not restarted as well
        self.assertEqual(self.host.restarts, [])

    def test_idempotent(self):
        self.converge(purge_configdir=True, jvm_options=["-Xmx1g"])
        self.assertFalse(self.converge(purge_configdir=True, jvm_options=["-Xmx1g"]))
        self.assertEqual(self.host.changes, [])

    def test_restart_on_change(self):
        self.converge()
        self.converge(settings={"pipeline.workers": 2}, startup_options={"LS_NICE": "0"})
        self.assertEqual(self.host.restarts, ["logstash"])
        self.assertEqual(len(self.host.executed), 2)

    def test_restart_when_reenabled(self):
        self.converge()
        self.host.services["logstash"]["enabled"] = False
        self.converge(settings={"pipeline.workers": 4})
        self.assertIn("enabled service logstash", self.host.changes)
        self.assertEqual(self.host.restarts, ["logstash"])

    def test_no_restart_on_change(self):
        self.converge(restart_on_change=False)
        self.assertTrue(self.converge(restart_on_change=False, settings={"pipeline.workers": 2}))
        self.assertEqual(self.host.restarts, [])

    def test_restart_on_upgrade(self):
        self.converge()
        self.host.available["logstash"] = "7.11.0"
        self.converge(autoupgrade=True)
        self.assertEqual(self.host.packages["logstash"], "7.11.0")
        self.assertEqual(self.host.restarts, ["logstash"])

    def test_system_install_only_on_startup_options(self):
        self.converge()
        self.converge(settings={"pipeline.workers": 2})
        self.assertEqual(len(self.host.executed), 1)

    def test_running_leaves_boot_alone(self):
        self.converge(status="running")
        self.assertEqual(self.host.services["logstash"], {"running": True, "enabled": False})

    def test_disabled(self):
        self.converge()
        self.converge(status="disabled")
        self.assertEqual(self.host.services["logstash"], {"running": False, "enabled": False})

    def test_unmanaged(self):
        self.converge(status="unmanaged")
        self.assertNotIn("logstash", self.host.services)
        self.assertEqual(self.host.restarts, [])

    def test_purge(self):
        self.host.render_file("/etc/logstash/conf.d/old.conf", "", "root", "root", 0o644)
        self.host.render_file("/etc/logstash/jvm.options", "", "root", "root", 0o644)
        self.converge(purge_configdir=True)
        self.assertNotIn("/etc/logstash/conf.d/old.conf", self.host.files)
        self.assertNotIn("/etc/logstash/jvm.options", self.host.files)
        self.assertIn("/etc/logstash/startup.options", self.host.files)

    def test_no_purge(self):
        self.host.render_file("/etc/logstash/conf.d/old.conf", "", "root", "root", 0o644)
        self.converge(purge_configdir=False)
        self.assertIn("/etc/logstash/conf.d/old.conf", self.host.files)

    def test_absent(self):
        self.converge()
        self.assertTrue(self.converge(ensure="absent"))
        self.assertEqual(self.host.packages, {})
        self.assertEqual(self.host.services["logstash"], {"running": False, "enabled": False})
        self.assertEqual([p for p in self.host.files if p.startswith("/etc/logstash")], [])
        self.assertEqual(self.host.restarts, [])
        # the repository registration is left in place
        self.assertIn("elastic-7.x", self.host.repos)
        self.assertFalse(self.converge(ensure="absent"))

    def test_absent_stops_before_purge(self):
        self.converge()
        self.converge(ensure="absent")
        self.assertLess(self.host.changes.index("stopped service logstash"),
                        self.host.changes.index("purged package logstash"))


class TestHostCalls(unittest.TestCase):

    def setUp(self):
        self.host = mock.Mock(spec=Host)
        for name in ("ensure_repo", "ensure_package", "render_file", "ensure_directory",
                     "remove_path", "ensure_service"):
            getattr(self.host, name).return_value = False

    def test_download(self):
        Runner(build(package_url="https://example.com/logstash-7.10.2.deb", download_timeout=90), self.host).run()
        self.host.ensure_package.assert_called_once_with(
            "logstash", "present",
            source="https://example.com/logstash-7.10.2.deb",
            download_timeout=90,
            provider="dpkg",
            )
        self.host.ensure_directory.assert_any_call(
            "/var/lib/logstash/swdl", "root", "root", 0o755, purge=False, keep=())

    def test_repository(self):
        Runner(build(), self.host).run()
        name, version, path, content, key = self.host.ensure_repo.call_args[0]
        self.assertEqual((name, version, path), ("elastic-7.x", "7.x", "/etc/apt/sources.list.d/elastic-7.x.list"))
        self.assertEqual(key, "https://artifacts.elastic.co/GPG-KEY-elasticsearch")

    def test_repository_first(self):
        calls = []
        self.host.ensure_repo.side_effect = lambda *a, **kw: calls.append("repo")
        self.host.ensure_package.side_effect = lambda *a, **kw: calls.append("package")
        Runner(build(), self.host).run()
        self.assertEqual(calls, ["repo", "package"])

    def test_purge(self):
        Runner(build(ensure="absent", manage_repo=False), self.host).run()
        self.host.ensure_package.assert_called_once_with("logstash", "purged", provider=None)
        self.host.remove_path.assert_called_once_with("/etc/logstash")
        self.host.ensure_service.assert_called_once_with("logstash", False, False, provider="systemd")
        self.assertFalse(self.host.ensure_repo.called)

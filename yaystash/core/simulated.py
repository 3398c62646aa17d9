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

import logging

from yaystash.core.host import Host

logger = logging.getLogger("simulated")


class SimulatedHost(Host):

    """ A host that only exists in memory. It is used by ``yaystash simulate``
    and by the tests. Everything a real host would do is recorded in
    ``changes`` instead. """

    def __init__(self, available=None):
        # versions the package manager would install for "latest"
        self.available = available or {}
        self.repos = {}
        self.packages = {}
        self.files = {}
        self.directories = {}
        self.services = {}
        self.restarts = []
        self.executed = []
        self.changes = []

    def _change(self, message, *args):
        message = message % args
        logger.debug(message)
        self.changes.append(message)
        return True

    def ensure_repo(self, name, version, path, content, key):
        wanted = (version, path, content, key)
        if self.repos.get(name) == wanted:
            return False
        self.repos[name] = wanted
        self.files[path] = (content, "root", "root", 0o644)
        return self._change("registered repository %s", name)

    def ensure_package(self, name, version, source=None, download_timeout=None, provider=None):
        installed = self.packages.get(name)
        if version in ("absent", "purged"):
            if installed is None:
                return False
            del self.packages[name]
            return self._change("%s package %s", version, name)
        if version == "present":
            if installed is not None:
                return False
            wanted = self.available.get(name, "installed")
        elif version == "latest":
            wanted = self.available.get(name, installed or "installed")
        else:
            wanted = version
        if installed == wanted:
            return False
        self.packages[name] = wanted
        return self._change("installed package %s %s from %s", name, wanted, source or "repository")

    def render_file(self, path, content, owner, group, mode):
        wanted = (content, owner, group, mode)
        if self.files.get(path) == wanted:
            return False
        self.files[path] = wanted
        return self._change("wrote %s", path)

    def ensure_directory(self, path, owner, group, mode, purge=False, keep=()):
        changed = False
        wanted = (owner, group, mode)
        if self.directories.get(path) != wanted:
            self.directories[path] = wanted
            changed = self._change("created directory %s", path)
        if purge:
            prefix = path.rstrip("/") + "/"
            for existing in list(self.files) + list(self.directories):
                if not existing.startswith(prefix) or existing in keep:
                    continue
                if any(k.startswith(existing + "/") for k in keep):
                    continue
                self.files.pop(existing, None)
                self.directories.pop(existing, None)
                changed = self._change("purged %s", existing)
        return changed

    def remove_path(self, path):
        prefix = path.rstrip("/") + "/"
        doomed = [p for p in list(self.files) + list(self.directories) if p == path or p.startswith(prefix)]
        if not doomed:
            return False
        for p in doomed:
            self.files.pop(p, None)
            self.directories.pop(p, None)
        return self._change("removed %s", path)

    def service_running(self, name, provider=None):
        return self.services.get(name, {}).get("running", False)

    def ensure_service(self, name, running, enable, provider=None):
        state = self.services.setdefault(name, {"running": False, "enabled": False})
        changed = False
        if running is not None and state["running"] != running:
            state["running"] = running
            changed = self._change("%s service %s", "started" if running else "stopped", name)
        if enable is not None and state["enabled"] != enable:
            state["enabled"] = enable
            changed = self._change("%s service %s", "enabled" if enable else "disabled", name)
        return changed

    def restart_service(self, name, provider=None):
        self.services.setdefault(name, {"running": False, "enabled": False})["running"] = True
        self.restarts.append(name)
        self._change("restarted service %s", name)

    def execute(self, command, cwd=None):
        self.executed.append(list(command))
        self._change("executed %s", " ".join(command))

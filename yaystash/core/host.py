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

""" The interface yaystash converges against.

yaystash does not install packages or start services itself. A host wraps
whatever package manager, service manager and file system the managed machine
has. Every ``ensure_*`` method must be idempotent and return True only if it
had to change something. Failures are raised as
:py:exc:`yaystash.error.ExecutionError` and are not handled by yaystash. """

from abc import ABCMeta, abstractmethod


class Host(object, metaclass=ABCMeta):

    @abstractmethod
    def ensure_repo(self, name, version, path, content, key):
        """ Register the package repository described by ``content`` at
        ``path``, trusting the signing key at the ``key`` URL. """

    @abstractmethod
    def ensure_package(self, name, version, source=None, download_timeout=None, provider=None):
        """ Converge the package ``name``. ``version`` is a version string or
        one of ``present``, ``latest`` or ``purged``. When ``source`` is given
        the package is fetched from that URL, giving up after
        ``download_timeout`` seconds. """

    @abstractmethod
    def render_file(self, path, content, owner, group, mode):
        """ Make the file at ``path`` hold ``content`` with the given
        ownership and mode. """

    @abstractmethod
    def ensure_directory(self, path, owner, group, mode, purge=False, keep=()):
        """ Make ``path`` a directory. When ``purge`` is set, everything
        below it that is not in ``keep`` is removed. """

    @abstractmethod
    def remove_path(self, path):
        """ Remove a file or directory tree. """

    @abstractmethod
    def service_running(self, name, provider=None):
        """ Return True if the service is running now. """

    @abstractmethod
    def ensure_service(self, name, running, enable, provider=None):
        """ ``running`` and ``enable`` are True, False or None. None means
        that aspect of the service is left alone. """

    @abstractmethod
    def restart_service(self, name, provider=None):
        pass

    @abstractmethod
    def execute(self, command, cwd=None):
        """ Run ``command`` (a list of arguments). """

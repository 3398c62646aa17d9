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

from yaystash.core import provider
from yaystash.resources import package


class _PackageMixin(object):

    def install(self, host, source=None, download_timeout=None, provider=None):
        return host.ensure_package(
            self.resource.name,
            self.resource.version,
            source=source,
            download_timeout=download_timeout,
            provider=provider,
            )


class RepositoryInstall(_PackageMixin, provider.Provider):

    """ Installs from whatever repositories the host's package manager is
    configured with. """

    policies = (package.PackageInstallPolicy,)

    @classmethod
    def isvalid(self, policy, resource):
        return not resource.source

    def apply(self, host):
        return self.install(host)


class DownloadInstall(_PackageMixin, provider.Provider):

    """ Fetches the package from a URL and installs it with the low level
    package tool. """

    policies = (package.PackageInstallPolicy,)

    @classmethod
    def isvalid(self, policy, resource):
        return bool(resource.source)

    def apply(self, host):
        return self.install(
            host,
            source=self.resource.source,
            download_timeout=self.resource.download_timeout,
            provider=self.resource.provider,
            )


class Purge(provider.Provider):

    policies = (package.PackagePurgePolicy,)

    def apply(self, host):
        return host.ensure_package(self.resource.name, "purged", provider=self.resource.provider)


class Register(provider.Provider):

    policies = (package.RepositoryRegisterPolicy,)

    def apply(self, host):
        r = self.resource
        return host.ensure_repo(r.name, r.version, r.path, r.content, r.key)

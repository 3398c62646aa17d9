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
from yaystash.resources import filesystem


class File(provider.Provider):

    policies = (filesystem.FileApplyPolicy,)

    def apply(self, host):
        r = self.resource
        return host.render_file(r.name, r.content, r.owner, r.group, r.mode)


class RemoveFile(provider.Provider):

    policies = (filesystem.FileRemovePolicy,)

    def apply(self, host):
        return host.remove_path(self.resource.name)


class Directory(provider.Provider):

    policies = (filesystem.DirectoryAppliedPolicy,)

    def apply(self, host):
        r = self.resource
        return host.ensure_directory(r.name, r.owner, r.group, r.mode, purge=r.purge, keep=tuple(r.keep))


class RemoveDirectory(provider.Provider):

    policies = (filesystem.DirectoryRemovedRecursivePolicy,)

    def apply(self, host):
        return host.remove_path(self.resource.name)

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

""" Registration of the Elastic package repository. """

from yaystash.core.resource import ResourceBundle
from yaystash.resources.package import Repository
from yaystash.util import render_template

KEY = "https://artifacts.elastic.co/GPG-KEY-elasticsearch"
LOCATION = "https://artifacts.elastic.co/packages/%(version)s/%(format)s"

LAYOUT = {
    # repo type: (package format, path of the definition, template)
    "apt": ("apt", "/etc/apt/sources.list.d/%s.list", "apt.list.j2"),
    "yum": ("yum", "/etc/yum.repos.d/%s.repo", "rpm.repo.j2"),
    "zypper": ("yum", "/etc/zypp/repos.d/%s.repo", "rpm.repo.j2"),
    }


def declare(descriptor):
    bundle = ResourceBundle()
    if not descriptor.manage_repo:
        return bundle

    name = "elastic-%s" % descriptor.repo_version
    format, path, template = LAYOUT[descriptor.repo_type]
    location = LOCATION % dict(version=descriptor.repo_version, format=format)
    content = render_template(template, dict(
        name=name,
        kind=descriptor.repo_type,
        version=descriptor.repo_version,
        location=location,
        key=KEY,
        ))

    bundle.add(Repository(
        name=name,
        version=descriptor.repo_version,
        kind=descriptor.repo_type,
        location=location,
        key=KEY,
        path=path % name,
        content=content,
        ))
    return bundle

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

""" The Logstash package itself. """

from yaystash.core.argument import StringOrFalse
from yaystash.core.resource import ResourceBundle
from yaystash.declarations import service
from yaystash.resources.filesystem import Directory
from yaystash.resources.package import Package
from yaystash.validation import package_provider


def package_version(descriptor):
    """ What the package manager is asked for. """
    if not descriptor.present:
        return "purged"
    if descriptor.package_url:
        return "present"
    if StringOrFalse.isset(descriptor.version):
        return descriptor.version
    if descriptor.autoupgrade:
        return "latest"
    return "present"


def declare(descriptor):
    bundle = ResourceBundle()

    if not descriptor.present:
        bundle.add(Package(name=descriptor.package_name, policy="purge"))
        return bundle

    notify = service.notifications(descriptor)

    if descriptor.package_url:
        bundle.add(Directory(name=descriptor.package_dir))
        bundle.add(Package(
            name=descriptor.package_name,
            version=package_version(descriptor),
            source=descriptor.package_url,
            provider=package_provider(descriptor.package_url),
            download_timeout=descriptor.download_timeout,
            notify=notify,
            ))
    else:
        bundle.add(Package(
            name=descriptor.package_name,
            version=package_version(descriptor),
            notify=notify,
            ))

    return bundle

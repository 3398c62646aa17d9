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

from yaystash.core.resource import Resource
from yaystash.core.policy import (
    Absent,
    Policy,
    Present,
    )
from yaystash.core.argument import (
    Enum,
    FullPath,
    Integer,
    String,
    URL,
    )


class Package(Resource):

    """ Represents an operating system package, installed and managed via the
    OS package management system. For example::

        Package(name="logstash", version="1:7.10.2-1")

    A package can also be fetched from a URL, in which case ``provider`` says
    which low level tool installs it::

        Package(name="logstash",
                version="present",
                source="https://example.com/logstash-7.10.2.deb",
                provider="dpkg")

    """

    name = String()
    """ The name of the package. """

    version = String(default="present")
    """ The version of the package, or one of ``present`` (any version will
    do) or ``latest`` (keep upgrading). """

    source = URL()
    """ Where to fetch the package from when it is not installed from a
    repository. """

    download_timeout = Integer(positive=True, default=600)
    """ How long in seconds fetching ``source`` may take. """

    provider = Enum(("dpkg", "rpm"))


class PackageInstallPolicy(Policy):

    """ Install the specified package. If the package is already installed it
    is only changed when a specific version or ``latest`` is asked for. """

    resource = Package
    name = "install"
    default = True
    signature = (
        Present("name"),
        Present("version"),
        )


class PackagePurgePolicy(Policy):

    """ Remove the package and as much of its configuration as the package
    manager is willing to remove. """

    resource = Package
    name = "purge"
    default = False
    signature = (
        Present("name"),
        Absent("source"),
        )


class Repository(Resource):

    """ An upstream package repository registered with the host's package
    manager.

    ``content`` is the complete repository definition (an apt source list or
    a yum/zypper repo file) and is written to ``path``. """

    name = String()

    version = String()
    """ The release series the repository serves, for example ``7.x``. """

    kind = Enum(("apt", "yum", "zypper"))

    location = URL()

    key = URL()
    """ The URL of the key that signs the repository. """

    path = FullPath()

    content = String()


class RepositoryRegisterPolicy(Policy):

    resource = Repository
    name = "register"
    default = True
    signature = (
        Present("name"),
        Present("version"),
        Present("path"),
        Present("content"),
        )

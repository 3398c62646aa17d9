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
from yaystash.core.policy import Policy, Present

from yaystash.core.argument import (
    Boolean,
    Enum,
    String,
    )


class Service(Resource):

    """ This represents service startup and shutdown via an init daemon. """

    name = String()
    """ A unique name representing the service.

    This would normally match the name of the unit or init script. """

    provider = Enum(("systemd", "upstart", "sysv"), default="systemd")
    """ The init system the service is managed by. """

    running = Boolean(default=None)
    """ Whether the service should be running. None leaves it alone. """

    enable = Boolean(default=None)
    """ Whether the service should start at boot. None leaves it alone. """


class ServiceManagePolicy(Policy):

    """ Bring the service to the requested runtime and boot state, and restart
    it when a resource that notifies it changes. """

    resource = Service
    name = "manage"
    default = True
    signature = (
        Present("name"),
        )


class ServiceUnmanagedPolicy(Policy):

    """ Declare the service without enforcing anything about it. """

    resource = Service
    name = "unmanaged"
    signature = (
        Present("name"),
        )

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

""" The Logstash service. """

from yaystash.core.resource import ResourceBundle
from yaystash.resources.service import Service

# status: (running, enabled at boot), None is left alone
STATES = {
    "enabled": (True, True),
    "disabled": (False, False),
    "running": (True, None),
    "unmanaged": (None, None),
    }


def service_id(descriptor):
    return "Service[%s]" % descriptor.service_name


def notifications(descriptor):
    """ The notify list for resources whose changes restart the service. """
    if descriptor.present and descriptor.restart_on_change:
        return [service_id(descriptor)]
    return []


def declare(descriptor):
    bundle = ResourceBundle()

    if not descriptor.present:
        running, enable = False, False
    else:
        running, enable = STATES[descriptor.status]

    kwargs = dict(
        name=descriptor.service_name,
        provider=descriptor.service_provider,
        )
    if running is None and enable is None:
        kwargs["policy"] = "unmanaged"
    if running is not None:
        kwargs["running"] = running
    if enable is not None:
        kwargs["enable"] = enable

    bundle.add(Service(**kwargs))
    return bundle

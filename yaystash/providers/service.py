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
from yaystash.resources import service


class Manage(provider.Provider):

    policies = (service.ServiceManagePolicy,)

    def __init__(self, resource):
        super(Manage, self).__init__(resource)
        self.started = False

    def apply(self, host):
        r = self.resource
        self.started = r.running is True and not host.service_running(r.name, provider=r.provider)
        return host.ensure_service(r.name, r.running, r.enable, provider=r.provider)

    def refresh(self, host):
        # a service started by this run already has the new state
        if self.resource.running is not True or self.started:
            return False
        host.restart_service(self.resource.name, provider=self.resource.provider)
        return True


class Unmanaged(provider.Provider):

    policies = (service.ServiceUnmanagedPolicy,)

    def apply(self, host):
        return False

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
from yaystash.resources import execute


class Execute(provider.Provider):

    policies = (execute.ExecuteRefreshPolicy,)

    def apply(self, host):
        return False

    def refresh(self, host):
        host.execute(self.resource.command, cwd=self.resource.cwd)
        return True

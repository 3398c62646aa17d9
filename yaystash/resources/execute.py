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
from yaystash.core.argument import FullPath, List, String


class Execute(Resource):

    """ Execute a command. This is only done when a resource that notifies
    this one has changed, for example::

        File(name="/etc/logstash/startup.options",
             content="...",
             notify=["Execute[system-install]"])

        Execute(name="system-install",
                command=["/usr/share/logstash/bin/system-install"])

    """

    name = String()
    """ The name of this resource. """

    command = List(items=str)
    """ The command and its arguments. """

    cwd = FullPath()
    """ The working directory in which to execute the command. """


class ExecuteRefreshPolicy(Policy):

    """ Run the command when notified, and never otherwise. """

    resource = Execute
    name = "refresh"
    default = True
    signature = (
        Present("name"),
        Present("command"),
        )

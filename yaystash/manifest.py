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

""" Turns a descriptor into an ordered set of resources.

The resources are grouped into units, one per concern. The units are the
nodes of a :py:class:`yaystash.core.dependency.Graph`, and an edge from one
unit to another means the first must be converged before the second.

When Logstash is wanted::

    repo -> package -> config -> service
               \\____________________^

When it is not, the service is stopped before the package is purged and
nothing else is ordered::

    service -> package      config      repo

"""

import collections
import logging

from yaystash.core.dependency import Graph
from yaystash.core.resource import ResourceBundle
from yaystash.declarations import config, package, repo, service
from yaystash import validation

logger = logging.getLogger("manifest")

REPO = "repo"
PACKAGE = "package"
CONFIG = "config"
SERVICE = "service"


class Manifest(object):

    """ The declared resources for one descriptor and the order they must be
    converged in. """

    def __init__(self, descriptor):
        self.descriptor = descriptor
        self.units = collections.OrderedDict()
        self.graph = Graph()
        self._resources = None

    def add_unit(self, name, bundle):
        self.units[name] = bundle
        self.graph.add_node(name)

    def add_edge(self, before, after):
        self.graph.add_edge(before, after)

    def edges(self):
        """ Every ``(before, after)`` pair of units. """
        return self.graph.edges()

    def order(self):
        """ The unit names in the order they will be converged. """
        return self.graph.resolve()

    def resources(self):
        """ A :py:class:`ResourceBundle` holding every resource in convergence
        order. Notifications are checked to point forwards. """
        if self._resources is None:
            bundle = ResourceBundle()
            for unit in self.order():
                bundle.extend(self.units[unit])
            bundle.bind()
            self._resources = bundle
        return self._resources

    def __iter__(self):
        return iter(self.resources().values())

    def __len__(self):
        return len(self.resources())


def build(descriptor):
    """ Validate the descriptor and declare everything it asks for. Nothing
    is declared if validation fails. """
    if not descriptor.frozen:
        validation.validate(descriptor)

    manifest = Manifest(descriptor)
    if descriptor.manage_repo:
        manifest.add_unit(REPO, repo.declare(descriptor))
    manifest.add_unit(PACKAGE, package.declare(descriptor))
    manifest.add_unit(CONFIG, config.declare(descriptor))
    manifest.add_unit(SERVICE, service.declare(descriptor))

    if descriptor.present:
        if descriptor.manage_repo:
            manifest.add_edge(REPO, PACKAGE)
        manifest.add_edge(PACKAGE, CONFIG)
        manifest.add_edge(PACKAGE, SERVICE)
        manifest.add_edge(CONFIG, SERVICE)
    else:
        manifest.add_edge(SERVICE, PACKAGE)

    order = manifest.order()
    logger.debug("Declared %d resources for %r in order %s",
                 len(manifest), descriptor, ", ".join(order))
    return manifest

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

""" Dependency graph """

from yaystash.error import CircularReferenceError


class Node:

    def __init__(self, ref):
        self.ref = ref
        # the nodes that must be applied before this one
        self.edges = []

    def add_edge(self, node):
        if node not in self.edges:
            self.edges.append(node)


class Graph:

    """ Represents an ordering graph. An edge from ``a`` to ``b`` means ``a``
    must be applied before ``b``. Copes with multiple unlinked graphs, which
    are resolved in the order their nodes were added. """

    def __init__(self):
        self.nodes = []

    def dep_resolve(self, node, resolved, unresolved):
        unresolved.append(node)
        for edge in node.edges:
            if edge not in resolved:
                if edge in unresolved:
                    raise CircularReferenceError("Circular reference detected from %r to %r" % (node.ref, edge.ref))
                self.dep_resolve(edge, resolved, unresolved)
        resolved.append(node)
        unresolved.remove(node)

    def get_node(self, ref):
        for n in self.nodes:
            if n.ref == ref:
                return n
        node = Node(ref)
        self.nodes.append(node)
        return node

    def add_edge(self, before, after):
        before_node = self.get_node(before)
        after_node = self.get_node(after)
        after_node.add_edge(before_node)

    def add_node(self, ref):
        """ Add a node without creating an edge. """
        # a side effect of getting a node is to add it if necessary
        self.get_node(ref)

    def edges(self):
        """ Return every edge as a ``(before, after)`` tuple. """
        return [(e.ref, n.ref) for n in self.nodes for e in n.edges]

    def resolve(self):
        resolved = []
        for n in self.nodes:
            if n not in resolved:
                self.dep_resolve(n, resolved, [])
        return [n.ref for n in resolved]

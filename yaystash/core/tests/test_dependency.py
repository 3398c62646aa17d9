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

import unittest

from yaystash import error
from yaystash.core import dependency


class TestDependency(unittest.TestCase):

    def test_resolution(self):
        # repo -> package -> config -> service
        #            \_______________^
        graph = dependency.Graph()
        graph.add_edge("repo", "package")
        graph.add_edge("package", "config")
        graph.add_edge("package", "service")
        graph.add_edge("config", "service")
        self.assertEqual(graph.resolve(), ["repo", "package", "config", "service"])

    def test_edges(self):
        graph = dependency.Graph()
        graph.add_edge("repo", "package")
        graph.add_edge("package", "config")
        graph.add_edge("package", "service")
        graph.add_edge("config", "service")
        self.assertEqual(graph.edges(), [
            ("repo", "package"),
            ("package", "config"),
            ("package", "service"),
            ("config", "service"),
            ])

    def test_duplicate_edge(self):
        graph = dependency.Graph()
        graph.add_edge("a", "b")
        graph.add_edge("a", "b")
        self.assertEqual(graph.edges(), [("a", "b")])

    def test_before_added_later(self):
        graph = dependency.Graph()
        graph.add_node("package")
        graph.add_node("service")
        graph.add_edge("service", "package")
        self.assertEqual(graph.resolve(), ["service", "package"])

    def test_circular(self):
        graph = dependency.Graph()
        graph.add_edge("a", "b")
        graph.add_edge("b", "c")
        graph.add_edge("c", "a")
        self.assertRaises(dependency.CircularReferenceError, graph.resolve)

    def test_circular_is_a_graph_error(self):
        graph = dependency.Graph()
        graph.add_edge("a", "a")
        self.assertRaises(error.GraphError, graph.resolve)

    def test_unlinked_graphs(self):
        graph = dependency.Graph()
        graph.add_edge("b", "a")
        graph.add_edge("d", "c")
        self.assertEqual(graph.resolve(), ["b", "a", "d", "c"])

    def test_no_graph(self):
        graph = dependency.Graph()
        graph.add_node("a")
        graph.add_node("b")
        self.assertEqual(graph.resolve(), ["a", "b"])
        self.assertEqual(graph.edges(), [])

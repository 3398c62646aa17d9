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

import collections

from yaystash import error
from yaystash.core import policy
from yaystash.core.argument import Argument, ArgumentsType, List, String


class ResourceType(ArgumentsType):

    """ Keeps a registry of resources as they are created, and provides some
    simple access to their arguments. """

    resources = {}

    def __new__(meta, class_name, bases, new_attrs):
        cls = super(ResourceType, meta).__new__(meta, class_name, bases, new_attrs)
        cls.policies = AvailableResourcePolicies()

        if class_name != 'Resource':
            rname = new_attrs.get("__resource_name__", class_name)
            if rname in meta.resources:
                raise error.ParseError("Redefinition of resource %s" % rname)
            meta.resources[rname] = cls

        return cls


class AvailableResourcePolicies(dict):

    """ A collection of the policies available for a resource, with some logic
    to work out which of them is the one and only default policy. """

    def default(self):
        default = [p for p in self.values() if p.default]
        if default:
            return default[0]
        return policy.NullPolicy


class Resource(object, metaclass=ResourceType):

    """ A resource represents something that can be configured on the host.
    This might be as simple as a directory or as complex as a package
    repository. Resources have policies that represent how the resource is to
    be treated. Providers are the implementation of the resource policy, and
    they do their work by calling the convergence host.

    Resource definitions specify the complete set of attributes that can be
    configured for a resource. Policies define which attributes must be
    configured for the policy to be used.
    """

    policies = AvailableResourcePolicies()
    """ A dictionary of policy names mapped to policy classes (not objects).

    Populated as policy classes are defined, this is effectively static once
    yaystash is imported. """

    policy = String()
    """ The name of the policy to apply. If not given the resource's default
    policy is used. """

    name = String()

    notify = List(default=[])
    """ A list of resource ids (for example ``Service[logstash]``) to refresh
    when this resource changes. Notified resources must be applied after this
    one. """

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            key = key.replace("-", "_")
            if key not in self.get_argument_names():
                raise error.ParseError("'%s' is not a valid option for resource %s" % (key, self.__class__.__name__))
            setattr(self, key, value)

    @classmethod
    def get_argument_names(klass):
        for k in dir(klass):
            attr = getattr(klass, k)
            if isinstance(attr, Argument):
                yield attr.name

    def get_argument_values(self):
        """ Return all argument names and values in a dictionary. If an
        argument has no default and has not been set, its value in the
        dictionary will be None. """
        retval = {}
        for key in self.get_argument_names():
            retval[key] = getattr(self, key, None)
        return retval

    def validate(self):
        """ Validate that this resource is correctly specified. Will raise
        an exception if it is invalid. Returns True if it is valid.

        We only validate if:

           - every argument that was set is acceptable to its argument type
           - the chosen policy exists, or there is a default policy, and
           - the arguments provided conform with the selected policy, and
           - exactly one provider is available for the policy

        """
        klass = self.__class__
        for key in self.get_argument_names():
            arg = getattr(klass, key)
            if arg.is_set(self):
                arg.check(getattr(self, key))

        this_policy = self.get_policy()
        if not this_policy.conforms(self):
            raise error.NonConformingPolicy("%r does not conform to policy '%s'" % (self, this_policy.name))

        # throws an exception if there is not one and only one provider
        this_policy.get_provider()
        return True

    def get_policy(self):
        """ Return an instantiated policy for this resource. """
        if self.policy:
            if self.policy not in self.policies:
                raise error.ParseError("'%s' is not a valid policy for %r" % (self.policy, self))
            return self.policies[self.policy](self)
        return self.policies.default()(self)

    def get_provider(self):
        pol = self.get_policy()
        return pol.get_provider()(self)

    @property
    def id(self):
        classname = getattr(self, '__resource_name__', self.__class__.__name__)
        return "%s[%s]" % (classname, self.name)

    def __repr__(self):
        return self.id

    def __str__(self):
        return self.id


class ResourceBundle(collections.OrderedDict):

    """ An ordered, indexed collection of resources. """

    def add(self, resource):
        if resource.id in self:
            raise error.ParseError("'%s' cannot be defined multiple times" % resource.id)
        resource.validate()
        self[resource.id] = resource
        return resource

    def create(self, typename, **kwargs):
        """ Instantiate a resource of the named type and add it. """
        try:
            kls = ResourceType.resources[typename]
        except KeyError:
            raise error.ParseError("There is no resource type of '%s'" % typename)
        return self.add(kls(**kwargs))

    def extend(self, resources):
        for resource in resources.values():
            self.add(resource)

    def bind(self):
        """ Check every notification points at a resource that exists and is
        applied after the notifying resource. """
        ids = list(self.keys())
        for i, resource in enumerate(self.values()):
            for target in resource.notify:
                if target == resource.id:
                    raise error.BindingError("Attempt to bind %r to itself!" % resource)
                if target not in self:
                    raise error.BindingError("Cannot bind %r to missing resource named '%s'" % (resource, target))
                if ids.index(target) < i:
                    raise error.BindingError("Attempt to bind backwards from %r to %s" % (resource, target))

    def under(self, path):
        """ Yield the paths of every file system resource below ``path``. """
        prefix = path.rstrip("/") + "/"
        for resource in self.values():
            name = resource.name or ""
            if getattr(resource, "is_path", False) and name.startswith(prefix):
                yield name

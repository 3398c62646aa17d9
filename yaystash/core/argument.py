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

import copy
from urllib.parse import urlparse

from yaystash import error


class Argument(object):

    """
    Adds a property descriptor to a class. Values are stored as given, it is
    up to :py:meth:`check` to decide whether a value is acceptable. A value
    that was never set resolves to the default.
    """

    default = None

    def __init__(self, **kwargs):
        self.name = None
        self.default = kwargs.pop("default", self.default)
        self.__doc__ = kwargs.pop("help", None)

    def __get__(self, instance, owner):
        if instance is None:
            return self
        try:
            return instance.__dict__[self.name]
        except KeyError:
            return copy.copy(self.default)

    def __set__(self, instance, value):
        instance.__dict__[self.name] = value

    def is_set(self, instance):
        return self.name in instance.__dict__

    def check(self, value):
        """ Raise a :py:exc:`error.ParseError` if ``value`` cannot be used for
        this argument. """
        pass

    def fail(self, exc_class, value, expected):
        raise exc_class("'%s' expects %s, got %r" % (self.name, expected, value))


class ArgumentsType(type):

    """ Tells every :py:class:`Argument` on a class what it is called. """

    def __new__(meta, class_name, bases, new_attrs):
        cls = type.__new__(meta, class_name, bases, new_attrs)
        for k, v in new_attrs.items():
            if isinstance(v, Argument):
                v.name = k
        return cls


class Boolean(Argument):

    """ Represents a boolean. Strings such as "yes" are not accepted, the
    value must really be True or False. """

    default = False

    def check(self, value):
        if not isinstance(value, bool):
            self.fail(error.InvalidType, value, "a boolean")


class String(Argument):

    """ Represents a string. """

    def check(self, value):
        if not isinstance(value, str):
            self.fail(error.InvalidType, value, "a string")


class RequiredString(String):

    """ A string that must not be empty. """

    def check(self, value):
        if not isinstance(value, str) or not value:
            self.fail(error.MissingRequiredParameter, value, "a non-empty string")


class StringOrFalse(String):

    """ A string, or False to mean "not set". ``None`` is treated the same as
    False. """

    default = False

    def check(self, value):
        if value is False or value is None:
            return
        super(StringOrFalse, self).check(value)

    @staticmethod
    def isset(value):
        return value is not False and value is not None


class URL(Argument):

    """ A URL, or an empty value. Absolute local paths are accepted as
    ``file://`` URLs. """

    schemes = ("http", "https", "ftp", "file")

    def check(self, value):
        if not value:
            return
        if not isinstance(value, str):
            self.fail(error.InvalidType, value, "a URL")
        if not value.startswith("/") and urlparse(value).scheme not in self.schemes:
            self.fail(error.InvalidEnumeration, value, "one of the schemes %s" % ", ".join(self.schemes))


class FullPath(String):

    """ Represents a full path on the filesystem. This should start with a
    '/'. """

    def check(self, value):
        super(FullPath, self).check(value)
        if not value.startswith("/"):
            self.fail(error.InvalidType, value, "a full path")


class Integer(Argument):

    """ Represents an integer. Booleans are not integers here, even if Python
    thinks they are. """

    def __init__(self, positive=False, **kwargs):
        super(Integer, self).__init__(**kwargs)
        self.positive = positive

    def check(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            self.fail(error.InvalidType, value, "an integer")
        if self.positive and value <= 0:
            self.fail(error.InvalidType, value, "a positive integer")


class Octal(Integer):

    """ A file permission mode. Strings are read as octal, so "644" and 0o644
    are the same thing. """

    def __get__(self, instance, owner):
        value = super(Octal, self).__get__(instance, owner)
        if isinstance(value, str):
            return int(value, 8)
        return value


class Enum(Argument):

    """ One of a fixed set of values. """

    def __init__(self, choices, **kwargs):
        super(Enum, self).__init__(**kwargs)
        self.choices = tuple(choices)

    def check(self, value):
        if value not in self.choices:
            self.fail(error.InvalidEnumeration, value, "one of %s" % ", ".join(self.choices))


class Dict(Argument):

    def __init__(self, values=None, **kwargs):
        kwargs.setdefault("default", {})
        super(Dict, self).__init__(**kwargs)
        self.values = values

    def check(self, value):
        if not isinstance(value, dict):
            self.fail(error.InvalidType, value, "a mapping")
        if self.values is not None:
            for k, v in value.items():
                if not isinstance(k, str) or not isinstance(v, self.values):
                    self.fail(error.InvalidType, value, "a mapping of strings to %s" % self.values.__name__)


class List(Argument):

    def __init__(self, items=None, **kwargs):
        kwargs.setdefault("default", [])
        super(List, self).__init__(**kwargs)
        self.items = items

    def check(self, value):
        if not isinstance(value, (list, tuple)):
            self.fail(error.InvalidType, value, "a list")
        if self.items is not None:
            for item in value:
                if not isinstance(item, self.items):
                    self.fail(error.InvalidType, value, "a list of %s" % self.items.__name__)

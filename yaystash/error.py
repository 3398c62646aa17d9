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

"""

Classes that represent errors within yaystash.

What is listed here are the exceptions raised within Python, with an
explanation of their meaning. If you wish to detect a specific error on
invocation, you can do so via the return code of the yaystash process.

All yaystash errors have a returncode, which is returned from the yaystash
program if these errors occur. These are stable, feel free to rely on them.

Errors under :py:class:`ParseError` are raised while the parameters are
checked and the manifest is built. None of them are raised once a host has
been touched. Errors under :py:class:`ExecutionError` are raised by hosts
while converging and are never handled by yaystash itself. """


class Error(Exception):
    """ Base class for all yaystash specific exceptions. """
    returncode = 253

    def __init__(self, msg=""):
        super(Error, self).__init__(msg)
        self.msg = msg

    def __str__(self):
        return "%s: %s" % (self.__class__.__name__, self.msg)


class ParseError(Error):
    """ Root of exceptions that are caused by an error in input. """

    returncode = 128
    """ returns error code 128 to the invoking environment. """


class BindingError(Error):
    """ A resource notifies a resource that does not exist, or one that is
    applied before it. """

    returncode = 129
    """ returns error code 129 to the invoking environment. """


class ExecutionError(Error):
    """ Root of exceptions that are caused by execution failing in an
    unexpected way. Hosts raise these, yaystash does not handle them. """

    returncode = 130
    """ returns error code 130 to the invoking environment. """


class NonConformingPolicy(ParseError):
    """ A policy has been specified, or has been chosen by default, but the
    arguments provided for the resource do not match those required for the
    policy. """

    returncode = 136
    """ returns error code 136 to the invoking environment. """


class NoSuitableProviders(ParseError):
    """ There are no suitable providers available for the policy and resource
    chosen. """

    returncode = 137
    """ returns error code 137 to the invoking environment. """


class TooManyProviders(ParseError):
    """ More than one provider matches the specified resource, and yaystash
    is unable to choose between them. """

    returncode = 138
    """ returns error code 138 to the invoking environment. """


class MissingAsset(ParseError):
    """ A template referenced by a config file could not be found. """

    returncode = 149
    """ returns error code 149 to the invoking environment. """


class InvalidEnumeration(ParseError):
    """ A parameter that only accepts a fixed set of values was given
    something else. """

    returncode = 160
    """ returns error code 160 to the invoking environment. """


class InvalidType(ParseError):
    """ A parameter was given a value of the wrong type, for example a string
    where a boolean is expected. """

    returncode = 161
    """ returns error code 161 to the invoking environment. """


class MutuallyExclusiveParameters(ParseError):
    """ Two parameters were set that cannot be used together, for example
    ``version`` and ``package_url``. """

    returncode = 162
    """ returns error code 162 to the invoking environment. """


class MissingRequiredParameter(ParseError):
    """ A parameter that is required by another parameter's value was not
    provided, for example ``repo_version`` when ``manage_repo`` is set. """

    returncode = 163
    """ returns error code 163 to the invoking environment. """


class UnsupportedPlatform(ParseError):
    """ There are no defaults for the requested OS family. """

    returncode = 164
    """ returns error code 164 to the invoking environment. """


class GraphError(Error):
    """ The ordering graph could not be resolved. """

    returncode = 165
    """ returns error code 165 to the invoking environment. """


class CircularReferenceError(GraphError):
    """ The ordering graph contains a cycle. """


class TemplateError(ParseError):
    """ The template engine was unable to render a template. """

    returncode = 166
    """ returns error code 166 to the invoking environment. """


class NoMatching(TemplateError):
    """ A template used a variable that was not provided. """

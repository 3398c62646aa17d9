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

""" Checks a :py:class:`yaystash.descriptor.Descriptor` before anything is
declared from it.

The rules are a table that is walked in order. The first rule that fails
stops the walk, and its error describes the parameter and the value that was
wrong. A descriptor that passes every rule is frozen. """

import collections
import logging
import os
from urllib.parse import urlparse

from yaystash import error
from yaystash.core.argument import StringOrFalse
from yaystash.descriptor import Descriptor

logger = logging.getLogger("validation")

PACKAGE_EXTENSIONS = {
    ".deb": "dpkg",
    ".rpm": "rpm",
    }


Result = collections.namedtuple("Result", ["ok", "descriptor", "error"])
""" The outcome of :py:func:`check`. ``error`` is None when ``ok``. """


def argument(name):
    """ A rule that checks ``name`` with its own argument type. """
    def rule(descriptor):
        Descriptor.get_argument(name).check(getattr(descriptor, name))
    rule.__name__ = name
    return rule


def package_source_exclusive(descriptor):
    if descriptor.package_url and StringOrFalse.isset(descriptor.version):
        raise error.MutuallyExclusiveParameters(
            "'version' (%r) and 'package_url' (%r) cannot both be set" % (descriptor.version, descriptor.package_url))


def repo_version_required(descriptor):
    if descriptor.manage_repo:
        Descriptor.get_argument("repo_version").check(descriptor.repo_version)


def package_url_extension(descriptor):
    if not descriptor.package_url:
        return
    package_provider(descriptor.package_url)


def pipelines_have_ids(descriptor):
    for pipeline in descriptor.pipelines:
        if not pipeline.get("pipeline.id"):
            raise error.MissingRequiredParameter("'pipelines' entry %r has no 'pipeline.id'" % (pipeline, ))


def pipelines_without_path_config(descriptor):
    if descriptor.pipelines and "path.config" in descriptor.settings:
        raise error.MutuallyExclusiveParameters(
            "'settings' path.config (%r) and 'pipelines' cannot both be set" % (descriptor.settings["path.config"], ))


def configfile_sources(descriptor):
    for name, spec in descriptor.configfiles.items():
        if "/" in name:
            raise error.InvalidType("'configfiles' name %r must not contain '/'" % name)
        has_content = "content" in spec
        has_template = "template" in spec
        if has_content and has_template:
            raise error.MutuallyExclusiveParameters(
                "'configfiles' entry %r cannot have both 'content' and 'template'" % name)
        if not has_content and not has_template:
            raise error.MissingRequiredParameter(
                "'configfiles' entry %r needs one of 'content' or 'template'" % name)
        if not isinstance(spec.get("template_args", {}), dict):
            raise error.InvalidType("'configfiles' entry %r expects 'template_args' to be a mapping" % name)


RULES = (
    argument("ensure"),
    argument("autoupgrade"),
    argument("download_timeout"),
    argument("status"),
    argument("restart_on_change"),
    argument("purge_configdir"),
    package_source_exclusive,
    argument("manage_repo"),
    repo_version_required,
    argument("package_url"),
    argument("version"),
    package_url_extension,
    argument("startup_options"),
    argument("settings"),
    argument("jvm_options"),
    argument("pipelines"),
    pipelines_have_ids,
    pipelines_without_path_config,
    argument("configfiles"),
    configfile_sources,
    argument("template_path"),
    argument("patternfiles"),
    argument("repo_type"),
    argument("package_name"),
    argument("logstash_user"),
    argument("logstash_group"),
    argument("service_name"),
    argument("service_provider"),
    argument("configdir"),
    argument("home_dir"),
    argument("package_dir"),
    )


def package_provider(url):
    """ Return the low level package tool that installs the package at
    ``url``, judged by its file extension. """
    path = urlparse(url).path if not url.startswith("/") else url
    ext = os.path.splitext(path)[1].lower()
    try:
        return PACKAGE_EXTENSIONS[ext]
    except KeyError:
        raise error.InvalidEnumeration(
            "'package_url' expects a file ending in one of %s, got %r" % (", ".join(sorted(PACKAGE_EXTENSIONS)), url))


def check(descriptor):
    """ Walk every rule and return a :py:class:`Result` holding the first
    error, if there is one. """
    for rule in RULES:
        try:
            rule(descriptor)
        except error.ParseError as exc:
            logger.debug("%s failed: %s", rule.__name__, exc)
            return Result(False, descriptor, exc)
    return Result(True, descriptor, None)


def validate(descriptor):
    """ Raise the first validation error, or freeze and return the
    descriptor. """
    result = check(descriptor)
    if not result.ok:
        raise result.error
    descriptor.freeze()
    return descriptor

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

from yaystash import error
from yaystash.core.argument import (
    Argument,
    ArgumentsType,
    Boolean,
    Dict,
    Enum,
    FullPath,
    Integer,
    List,
    RequiredString,
    StringOrFalse,
    URL,
    )


class Descriptor(object, metaclass=ArgumentsType):

    """ The desired state of Logstash on one host for one convergence run.

    Values are stored exactly as they were given. Nothing is checked until
    :py:func:`yaystash.validation.validate` is called, after which the
    descriptor is frozen and any further assignment raises
    :py:exc:`AttributeError`.

    Use :py:func:`yaystash.params.resolve` rather than building one of these
    by hand, it fills in the platform defaults.
    """

    ensure = Enum(("present", "absent"), default="present")
    """ Whether Logstash should be installed at all. """

    status = Enum(("enabled", "disabled", "running", "unmanaged"), default="enabled")
    """ The runtime and boot state of the service:

    ``enabled``
        running, and started at boot
    ``disabled``
        stopped, and not started at boot
    ``running``
        running, boot behaviour left alone
    ``unmanaged``
        left alone entirely
    """

    restart_on_change = Boolean(default=True)
    """ Restart the service when the package or its configuration changes. """

    autoupgrade = Boolean(default=False)
    """ Keep the package at the latest version the repository offers. """

    version = StringOrFalse()
    """ A specific package version, or False for any. Cannot be used with
    ``package_url``. """

    package_url = URL()
    """ Fetch the package from here instead of a repository. http, https,
    ftp and file URLs are supported, as are absolute paths. """

    package_name = RequiredString(default="logstash")

    package_dir = FullPath(default="/var/lib/logstash/swdl")
    """ Where packages fetched from ``package_url`` are kept. """

    download_timeout = Integer(positive=True, default=600)
    """ How many seconds fetching ``package_url`` may take. """

    logstash_user = RequiredString(default="logstash")
    logstash_group = RequiredString(default="logstash")

    home_dir = FullPath(default="/usr/share/logstash")

    configdir = FullPath(default="/etc/logstash")

    purge_configdir = Boolean(default=False)
    """ Delete anything in ``configdir`` that yaystash does not manage. """

    service_name = RequiredString(default="logstash")
    service_provider = Enum(("systemd", "upstart", "sysv"), default="systemd")

    startup_options = Dict(values=str)
    """ Overrides for the settings in ``startup.options``, for example
    ``{"LS_NICE": "0"}``. """

    settings = Dict()
    """ Settings for ``logstash.yml``. """

    jvm_options = List(items=str)
    """ Lines for ``jvm.options``. Not managed when empty. """

    pipelines = List(items=dict)
    """ Entries for ``pipelines.yml``, each needs a ``pipeline.id``. Not
    managed when empty. """

    configfiles = Dict(values=dict)
    """ Pipeline configuration files for ``conf.d``, mapping a file name to
    either ``{"content": ...}`` or ``{"template": ..., "template_args":
    {...}}``. """

    template_path = List(items=str)
    """ Directories searched for ``configfiles`` templates. """

    patternfiles = Dict(values=str)
    """ Grok pattern files for ``patterns``, mapping a file name to its
    contents. """

    manage_repo = Boolean(default=True)
    """ Register the Elastic package repository before installing. """

    repo_version = RequiredString(default="7.x")
    """ The Elastic release series to register, required with
    ``manage_repo``. """

    repo_type = Enum(("apt", "yum", "zypper"), default="apt")

    def __init__(self, **kwargs):
        self._frozen = False
        names = set(self.get_argument_names())
        for key, value in kwargs.items():
            key = key.replace("-", "_")
            if key not in names:
                raise error.ParseError("'%s' is not a valid parameter" % key)
            setattr(self, key, value)

    def __setattr__(self, key, value):
        if getattr(self, "_frozen", False):
            raise AttributeError("Descriptor is read-only once validated, cannot set '%s'" % key)
        super(Descriptor, self).__setattr__(key, value)

    def freeze(self):
        self._frozen = True

    @property
    def frozen(self):
        return self._frozen

    @classmethod
    def get_argument(klass, name):
        return getattr(klass, name)

    @classmethod
    def get_argument_names(klass):
        for k in dir(klass):
            attr = getattr(klass, k)
            if isinstance(attr, Argument):
                yield attr.name

    def as_dict(self):
        return dict((k, getattr(self, k)) for k in self.get_argument_names())

    @property
    def present(self):
        return self.ensure == "present"

    def __repr__(self):
        return "<Descriptor %s %s>" % (self.package_name, self.ensure)

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

""" Everything under the Logstash configuration directory.

The layout is the one the Logstash packages use::

    /etc/logstash/
        conf.d/             pipeline configuration, one file per configfile
        patterns/           grok patterns, one file per patternfile
        jvm.options
        logstash.yml
        pipelines.yml
        startup.options

``startup.options`` is only read by ``bin/system-install``, which turns it
into a service definition. It is run whenever ``startup.options`` changes.
"""

import os
import shlex

import yaml

from yaystash.core.resource import ResourceBundle
from yaystash.declarations import service
from yaystash.resources.execute import Execute
from yaystash.resources.filesystem import Directory, File
from yaystash.util import render_template

HEADER = "# This file is managed by yaystash, local changes will be overwritten.\n"

DEFAULT_SETTINGS = {
    "path.data": "/var/lib/logstash",
    "path.logs": "/var/log/logstash",
    }


def startup_options(descriptor):
    """ The startup options Logstash ships with, overridden by the ones
    given. """
    options = {
        "JAVACMD": "/usr/bin/java",
        "LS_HOME": descriptor.home_dir,
        "LS_SETTINGS_DIR": descriptor.configdir,
        "LS_OPTS": "--path.settings %s" % descriptor.configdir,
        "LS_JAVA_OPTS": "",
        "LS_PIDFILE": "/var/run/logstash.pid",
        "LS_USER": descriptor.logstash_user,
        "LS_GROUP": descriptor.logstash_group,
        "LS_GC_LOG_FILE": "/var/log/logstash/gc.log",
        "LS_OPEN_FILES": "16384",
        "LS_NICE": "19",
        "SERVICE_NAME": descriptor.service_name,
        "SERVICE_DESCRIPTION": descriptor.service_name,
        }
    options.update(descriptor.startup_options)
    return dict((k, shlex.quote(v)) for k, v in options.items())


def settings(descriptor):
    merged = dict(DEFAULT_SETTINGS)
    # pipelines.yml is ignored by logstash when path.config is set
    if not descriptor.pipelines:
        merged["path.config"] = os.path.join(descriptor.configdir, "conf.d")
    merged.update(descriptor.settings)
    return merged


def pipelines(descriptor):
    return descriptor.pipelines or [{
        "pipeline.id": "main",
        "path.config": os.path.join(descriptor.configdir, "conf.d", "*.conf"),
        }]


def dump(data):
    return HEADER + yaml.safe_dump(data, default_flow_style=False)


def configfile_content(descriptor, spec):
    if "content" in spec:
        return spec["content"]
    return render_template(spec["template"], spec.get("template_args", {}), descriptor.template_path)


def declare(descriptor):
    bundle = ResourceBundle()
    configdir = descriptor.configdir

    if not descriptor.present:
        bundle.add(Directory(name=configdir, policy="remove-recursive"))
        return bundle

    owner = dict(owner=descriptor.logstash_user, group=descriptor.logstash_group)
    notify = service.notifications(descriptor)

    def path(*parts):
        return os.path.join(configdir, *parts)

    def add_file(name, content, notify=notify):
        bundle.add(File(name=name, content=content, mode=0o644, notify=notify, **owner))

    root = bundle.add(Directory(name=configdir, mode=0o755, purge=descriptor.purge_configdir, **owner))
    bundle.add(Directory(name=path("conf.d"), mode=0o755, **owner))
    bundle.add(Directory(name=path("patterns"), mode=0o755, **owner))

    startup = path("startup.options")
    add_file(startup, render_template("startup.options.j2", dict(
        home_dir=descriptor.home_dir,
        options=startup_options(descriptor),
        )), notify=["Execute[system-install]"])

    add_file(path("logstash.yml"), dump(settings(descriptor)))
    add_file(path("pipelines.yml"), dump(pipelines(descriptor)))

    if descriptor.jvm_options:
        add_file(path("jvm.options"), render_template("jvm.options.j2", dict(
            options=descriptor.jvm_options,
            )))

    for name in sorted(descriptor.configfiles):
        add_file(path("conf.d", name), configfile_content(descriptor, descriptor.configfiles[name]))

    for name in sorted(descriptor.patternfiles):
        add_file(path("patterns", name), descriptor.patternfiles[name])

    bundle.add(Execute(
        name="system-install",
        command=[
            os.path.join(descriptor.home_dir, "bin", "system-install"),
            startup,
            descriptor.service_provider,
            ],
        notify=notify,
        ))

    root.keep = sorted(bundle.under(configdir))
    return bundle

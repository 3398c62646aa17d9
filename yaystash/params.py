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

""" Platform defaults.

The defaults are kept in ``data/defaults.yaml``. A ``common`` section applies
to every platform, then the OS family section (``Debian``, ``RedHat`` or
``Suse``), then a section for the family and major release, for example
``RedHat-6``. Parameters given by the caller win over all of them. """

import copy
import logging
import os

import yaml

from yaystash import error
from yaystash.descriptor import Descriptor

logger = logging.getLogger("params")

DEFAULTS = os.path.join(os.path.dirname(__file__), "data", "defaults.yaml")


def load_defaults(path=DEFAULTS):
    with open(path) as fp:
        return yaml.safe_load(fp)


def families(defaults):
    return sorted(k for k in defaults if k != "common" and "-" not in k)


def defaults_for(osfamily, release=None, defaults=None):
    """ Return the merged default parameters for a platform. """
    if defaults is None:
        defaults = load_defaults()

    lookup = dict((k.lower(), k) for k in defaults)
    family = lookup.get((osfamily or "").lower())
    if family is None or family == "common" or "-" in family:
        raise error.UnsupportedPlatform(
            "No defaults for OS family %r, supported families are %s" % (osfamily, ", ".join(families(defaults))))

    merged = copy.deepcopy(defaults.get("common", {}))
    merged.update(copy.deepcopy(defaults[family]))
    if release:
        major = str(release).split(".")[0]
        section = lookup.get(("%s-%s" % (family, major)).lower())
        if section:
            merged.update(copy.deepcopy(defaults[section]))
    return merged


def resolve(osfamily, release=None, defaults=None, **parameters):
    """ Build a :py:class:`Descriptor` for a platform from its defaults and
    the parameters given. The descriptor is not validated yet. """
    merged = defaults_for(osfamily, release, defaults)
    for key, value in parameters.items():
        merged[key.replace("-", "_")] = value
    logger.debug("Resolved parameters for %s %s: %r", osfamily, release or "", merged)
    return Descriptor(**merged)


def load(path, osfamily=None, release=None):
    """ Read parameters from a YAML file and resolve them. The file may name
    its own ``osfamily`` and ``release``, the arguments win over it. """
    try:
        with open(path) as fp:
            parameters = yaml.safe_load(fp) or {}
    except OSError as e:
        raise error.ParseError("Cannot read parameters from %s: %s" % (path, e.strerror or e))
    except yaml.YAMLError as e:
        raise error.ParseError("%s is not valid YAML: %s" % (path, e))
    if not isinstance(parameters, dict):
        raise error.ParseError("%s does not contain a mapping of parameters" % path)
    file_family = parameters.pop("osfamily", None)
    file_release = parameters.pop("release", None)
    return resolve(osfamily or file_family, release or file_release, **parameters)

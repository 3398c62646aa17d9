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

import logging

logger = logging.getLogger("runner")


class Runner(object):

    """ Converges a manifest against a host.

    Resources are applied in manifest order. When a resource changes, every
    resource in its ``notify`` list is refreshed once it has been applied,
    however many resources notified it. Errors from the host are not caught.
    """

    def __init__(self, manifest, host):
        self.manifest = manifest
        self.host = host

    def run(self):
        """ Returns True if anything changed. """
        changed = False
        pending = set()

        for resource in self.manifest:
            logger.debug("Applying %r", resource)
            provider = resource.get_provider()

            if provider.apply(self.host):
                logger.info("%r changed", resource)
                changed = True
                pending.update(resource.notify)

            if resource.id in pending:
                pending.discard(resource.id)
                if provider.refresh(self.host):
                    logger.info("Refreshed %r", resource)
                    changed = True
                    pending.update(resource.notify)

        if not changed:
            logger.info("Nothing changed")
        return changed

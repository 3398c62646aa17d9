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

usage = """usage: %prog [options] command

commands:
    check       validate the parameters
    plan        print the units, their ordering and every resource
    simulate    converge twice against an in-memory host and print the changes
"""

COMMANDS = ("check", "plan", "simulate")


def get_version():
    from importlib.metadata import version, PackageNotFoundError
    try:
        return version("Yaystash")
    except PackageNotFoundError:
        return "unknown"


def configure_logging(opts):
    import logging
    import atexit

    logging.basicConfig(
        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    root = logging.getLogger()
    if opts.debug:
        root.setLevel(logging.DEBUG)
    elif opts.verbose:
        root.setLevel(logging.INFO)
    else:
        root.setLevel(logging.WARNING)

    if opts.logfile:
        handler = logging.FileHandler(opts.logfile)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s"))
        root.addHandler(handler)

    atexit.register(logging.shutdown)


def plan(manifest, out):
    out.write("order: %s\n" % " -> ".join(manifest.order()))
    for before, after in manifest.edges():
        out.write("edge: %s -> %s\n" % (before, after))
    for unit in manifest.order():
        out.write("%s:\n" % unit)
        for resource in manifest.units[unit].values():
            policy = resource.get_policy()
            out.write("    %s (%s)\n" % (resource.id, policy.name))
            for target in resource.notify:
                out.write("        notify %s\n" % target)


def simulate(manifest, out):
    from yaystash.core.runner import Runner
    from yaystash.core.simulated import SimulatedHost

    host = SimulatedHost()
    for attempt in (1, 2):
        del host.changes[:]
        Runner(manifest, host).run()
        out.write("run %d: %d changes\n" % (attempt, len(host.changes)))
        for change in host.changes:
            out.write("    %s\n" % change)


def _main(argv):
    # We do the imports here so that Ctrl+C doesn't show any ugly traceback
    import sys
    import logging
    import optparse

    from yaystash import error, manifest, params

    parser = optparse.OptionParser(version=get_version(), usage=usage)
    parser.add_option("-C", "--config", default=None, action="store",
                      help="Path to a YAML file of parameters")
    parser.add_option("-o", "--osfamily", default=None, action="store",
                      help="The OS family to take defaults for, if the parameter file does not say")
    parser.add_option("-r", "--release", default=None, action="store",
                      help="The OS release to take defaults for")
    parser.add_option("-d", "--debug", default=False, action="store_true",
                      help="switch all logging to maximum")
    parser.add_option("-l", "--logfile", default=None,
                      help="Also write the log to this file")
    parser.add_option("-v", "--verbose", default=0, action="count",
                      help="Write additional informational messages to the console log.")
    opts, args = parser.parse_args(argv)

    if len(args) != 1 or args[0] not in COMMANDS:
        parser.error("expected one of %s" % ", ".join(COMMANDS))

    configure_logging(opts)
    logger = logging.getLogger("yaystash")

    try:
        if opts.config:
            descriptor = params.load(opts.config, opts.osfamily, opts.release)
        else:
            descriptor = params.resolve(opts.osfamily, opts.release)
        m = manifest.build(descriptor)
    except error.Error as e:
        logger.error("%s", e)
        return e.returncode

    if args[0] == "plan":
        plan(m, sys.stdout)
    elif args[0] == "simulate":
        simulate(m, sys.stdout)
    else:
        logger.info("Parameters are valid")
    return 0


def main(argv=None):
    import sys
    try:
        sys.exit(_main(argv if argv is not None else sys.argv[1:]))
    except KeyboardInterrupt:
        print("")


if __name__ == "__main__":
    main()

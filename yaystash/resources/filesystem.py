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

""" Resources for handling the creation and removal of files and directories.
These deal with both the metadata associated with the file (for example owner
and permission) and the contents of the files themselves. """

from yaystash.core.resource import Resource
from yaystash.core.policy import Policy, Present

from yaystash.core.argument import (
    Boolean,
    FullPath,
    List,
    Octal,
    String,
    )


class File(Resource):

    """ A file with fully known contents.

    For example::

        File(name="/etc/logstash/startup.options",
             owner="root",
             group="root",
             mode=0o644,
             content="LS_HOME=/usr/share/logstash\\n")

    """

    is_path = True

    name = FullPath()
    """The full path to the file this resource represents."""

    owner = String(default="root")
    """A unix username or UID who will own the file."""

    group = String(default="root")
    """A unix group or GID who will own the file."""

    mode = Octal(default=0o644)
    """The permissions of the file. Strings are read as octal."""

    content = String(default="")
    """The complete contents of the file."""


class FileApplyPolicy(Policy):

    """ Create a file and populate its contents if required. """

    resource = File
    name = "apply"
    default = True
    signature = (Present("name"),
                 Present("owner"),
                 Present("group"),
                 )


class FileRemovePolicy(Policy):

    """ Delete a file if it exists. You should only provide the name in this
    case. """

    resource = File
    name = "remove"
    default = False
    signature = (Present("name"),
                 )


class Directory(Resource):

    """ A directory on disk.

    When ``purge`` is set, anything inside the directory that is not listed in
    ``keep`` is deleted. The manifest fills ``keep`` in with every file and
    directory it declares below this one.
    """

    is_path = True

    name = FullPath()
    """ The full path to the directory on disk """

    owner = String(default="root")
    """ The unix username who should own this directory, by default this is 'root' """

    group = String(default="root")
    """ The unix group who should own this directory, by default this is 'root' """

    mode = Octal(default=0o755)
    """ The octal mode that represents this directory's permissions, by default this is '755'. """

    purge = Boolean(default=False)

    keep = List(items=str)


class DirectoryAppliedPolicy(Policy):

    """ Ensure a directory exists and matches the arguments provided
    by the resource. """

    resource = Directory
    name = "apply"
    default = True
    signature = (Present("name"),
                 Present("owner"),
                 Present("group"),
                 Present("mode"),
                 )


class DirectoryRemovedRecursivePolicy(Policy):

    """ If a directory described by this resource exists then remove it and
    its children. """

    resource = Directory
    name = "remove-recursive"
    default = False
    signature = (Present("name"),
                 )

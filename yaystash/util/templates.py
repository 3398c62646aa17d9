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

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    )
from jinja2.exceptions import TemplateNotFound, TemplateSyntaxError, UndefinedError

from yaystash import error


class LessStrictUndefined(StrictUndefined):
    """
    Fail strictly if someone uses a variable that isn't defined in the context
    expression - but still allow boolean checks
    """
    def __bool__(self):
        return False


def get_template_environment(searchpath=()):
    """
    Sets up a standard yaystash template rendering environment

    In particular yaystash has these requirements:

      * The use of line_statement_prefix - to enable strong control over whitespace
      * Templates are looked up on ``searchpath`` first, then in the templates
        shipped with yaystash
      * The use of stricter undefined error handling than provided by Jinja by default

    """
    loader = ChoiceLoader([
        FileSystemLoader(list(searchpath)),
        PackageLoader("yaystash", "templates"),
        ])
    env = Environment(
        loader=loader,
        line_statement_prefix='%',
        keep_trailing_newline=True,
        undefined=LessStrictUndefined,
        )
    return env


def _call_get(callable, *args, **kwargs):
    try:
        return callable(*args, **kwargs)
    except TemplateNotFound as e:
        raise error.MissingAsset("Template '%s' could not be found" % e.name)
    except TemplateSyntaxError as e:
        raise error.ParseError("'%s' at line %d: %s" % (e.filename or e.name or "<string>", e.lineno, e.message))


def _call_render(template, *args, **kwargs):
    try:
        return template.render(*args, **kwargs)
    except error.Error:
        # Don't intercept valid yaystash errors
        raise
    except UndefinedError as e:
        raise error.NoMatching("'%s': %s" % (template.name or "<string>", e))
    except Exception as e:
        raise error.TemplateError("The template engine was unable to fill in your template and reported: '%s'" % str(e))


def render_template(template, arguments, searchpath=()):
    """
    Look up the named template on ``searchpath`` and then in the templates
    shipped with yaystash, and render it.

    Template exceptions will be mapped to yaystash exceptions.
    """
    env = get_template_environment(searchpath)
    template = _call_get(env.get_template, template)
    return _call_render(template, arguments)

import base64
import os
import re
from types import SimpleNamespace

import jinja2

from ccs.exceptions import ConfigError, InvalidSyntax

# A complete ``{{ ... }}`` token on one line, or an unmatched ``{{``
TOKEN_PATTERN = re.compile(r"\{\{(.*?)\}\}|\{\{")
PLACEHOLDER_NAME_PATTERN = re.compile(r"^[A-Za-z_]\w*(\.[A-Za-z_]\w*)*$")
VERBATIM_TOKENS = "_verbatim_tokens"

# bootstrap data is plain text, so only variable tokens are syntax
_UNUSED_BLOCK_START = "\x00{%"
_UNUSED_BLOCK_END = "%}\x00"
_UNUSED_COMMENT_START = "\x00{#"
_UNUSED_COMMENT_END = "#}\x00"


def _nest(substitutions):
    """
    Turns dotted placeholder names (``k8s_master.password``) into namespaces that Jinja can traverse.
    """
    grouped = {}
    leaves = {}
    for key, value in substitutions.items():
        if not PLACEHOLDER_NAME_PATTERN.match(key):
            raise ValueError(f"[{key}] is not a valid placeholder name.")
        head, _, tail = key.partition(".")
        if tail:
            grouped.setdefault(head, {})[tail] = value
        else:
            leaves[head] = value
    clashes = set(grouped) & set(leaves)
    if clashes:
        raise ValueError(f"Placeholder(s) {sorted(clashes)} are used both as a value and as a prefix.")
    nested = dict(leaves)
    for head, children in grouped.items():
        nested[head] = SimpleNamespace(**_nest(children))
    return nested


def _protect_unknown_tokens(template_body, substitutions):
    """
    Replaces every token that is not a known placeholder by a reference to its original text.

    :return: A tuple of the rewritten template body and the list of original token texts.
    """
    verbatim = []

    def protect(match):
        name = match.group(1)
        if name is not None and name.strip() in substitutions:
            return match.group(0)
        verbatim.append(match.group(0))
        return "{{ %s[%d] }}" % (VERBATIM_TOKENS, len(verbatim) - 1)

    return TOKEN_PATTERN.sub(protect, template_body), verbatim


def _environment():
    return jinja2.Environment(block_start_string=_UNUSED_BLOCK_START, block_end_string=_UNUSED_BLOCK_END,
                              comment_start_string=_UNUSED_COMMENT_START, comment_end_string=_UNUSED_COMMENT_END,
                              undefined=jinja2.StrictUndefined, autoescape=False, keep_trailing_newline=True)


def _render(template_body, substitutions):
    context = _nest(substitutions)
    if VERBATIM_TOKENS in context:
        raise ValueError(f"[{VERBATIM_TOKENS}] is a reserved placeholder name.")
    body, context[VERBATIM_TOKENS] = _protect_unknown_tokens(template_body, substitutions)
    return _environment().from_string(body).render(context)


def render(template_body, substitutions):
    """
    Renders bootstrap data from a template body. The body is plain text: only ``{{ placeholder }}`` tokens naming a
    substitution are replaced, everything else including tokens without a substitution is kept exactly as written.

    :param template_body: Template text with ``{{ placeholder }}`` tokens.
    :param substitutions: A dict mapping placeholder names (e.g. ``k8s_master.password``) to their values.
    :return: The rendered text.
    """
    return _handle_template_rendering_exceptions(_render, template_body, substitutions)


def encode_user_data(text):
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class BootstrapRenderer:
    def render_template_file(self, path, substitutions):
        root_path, file_name = os.path.split(path)
        return _handle_template_rendering_exceptions(self._render_template_file, root_path, file_name, substitutions)

    def _render_template_file(self, root_path, file_name, substitutions):
        loader = jinja2.FileSystemLoader(root_path or ".")
        template_body, _, _ = loader.get_source(_environment(), file_name)
        return _render(template_body, substitutions)


def _handle_template_rendering_exceptions(render_func, *args):
    try:
        return render_func(*args)
    except jinja2.exceptions.TemplateSyntaxError as e:
        raise InvalidSyntax("%s" % str(e))
    except jinja2.exceptions.TemplateNotFound as e:
        raise ConfigError("Bootstrap template [%s] does not exist." % str(e))
    except (OSError, ValueError) as e:
        raise ConfigError("%s" % str(e), e)

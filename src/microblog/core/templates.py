"""Shared HTML layout: built-in Jinja2 templates and the loader that compiles them"""

from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    Template,
    TemplateError,
    select_autoescape,
)

from microblog.errors import TemplateLoadError


HEADER = """\
<!DOCTYPE html>
<html>
<head>
	<meta charset="UTF-8">
	<title>{{ title }}</title>
	<meta name="viewport" content="width=device-width, initial-scale=1" />
</head>
<body>
"""

FOOTER = """\
<hr>
<footer>
<p><small>Powered by microblog</small></p>
</footer>
</body>
</html>
"""

ARTICLE = """\
{% include "header.html" %}
<a href="#" onclick="history.back(); return false;">back</a>
<article>
{{ content }}
</article>
{% include "footer.html" %}
"""

LIST = """\
<ul>
{% for entry in entries %}
	<li><a href="{{ entry.url }}">{{ entry.title }}</a></li>
{% endfor %}
</ul>
"""

BUILTIN_TEMPLATES = {
    "header.html":  HEADER,
    "footer.html":  FOOTER,
    "article.html": ARTICLE,
    "list.html":    LIST,
}

TEMPLATE_NAMES = ("header", "footer", "article", "list")


def make_environment(template_dir: Path = None) -> Environment:
    """Jinja2 environment; files in template_dir shadow the built-in templates of the same name."""
    loaders = [DictLoader(BUILTIN_TEMPLATES)]
    if template_dir is not None:
        loaders.insert(0, FileSystemLoader(template_dir))
    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(),
        trim_blocks=True,
        keep_trailing_newline=True,
    )


def load_templates(template_dir: Path = None) -> dict[str, Template]:
    """Compile every shared template once. Raises TemplateLoadError on the first failure."""
    env = make_environment(template_dir)
    templates = {}
    for name in TEMPLATE_NAMES:
        try:
            templates[name] = env.get_template(f"{name}.html")
        except TemplateError as e:
            raise TemplateLoadError(name, e) from e
    return templates

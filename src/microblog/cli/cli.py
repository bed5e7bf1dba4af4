"""CLI entrypoint: Typer app definition and command registration"""

import typer

from microblog.cli.commands import build_cmd, init_cmd


app = typer.Typer(name="microblog", no_args_is_help=True, help="Markdown drafts and articles to a static HTML site")

app.command(name="build")(build_cmd)
app.command(name="init")(init_cmd)

"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdmatter.cli.commands import check_cmd, language_cmd, main_callback, parse_cmd, stringify_cmd


app = typer.Typer(name="mdmatter", no_args_is_help=True, help="Front matter extraction and stringification")

app.callback()(main_callback)
app.command(name="parse")(parse_cmd)
app.command(name="stringify")(stringify_cmd)
app.command(name="check")(check_cmd)
app.command(name="language")(language_cmd)

"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdforge.cli.commands import batch_cmd, convert_cmd, detect_cmd, main_callback, validate_cmd


app = typer.Typer(name="mdforge", no_args_is_help=True, help="Markdown -> structured document -> JSON/YAML converter")

app.callback()(main_callback)
app.command(name="convert")(convert_cmd)
app.command(name="batch")(batch_cmd)
app.command(name="detect")(detect_cmd)
app.command(name="validate")(validate_cmd)

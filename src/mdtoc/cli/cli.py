"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdtoc.cli.commands import toc_cmd


app = typer.Typer(name="mdtoc", add_completion=False, help="Markdown table-of-contents updater")

app.command(name="toc")(toc_cmd)

# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

# Main entry point for the sbom-source-config CLI tool

import typer

from sbom_source_config.cli.resolve_source_command import (
    describe_fields,
    resolve_source,
)

app = typer.Typer(add_completion=False)
app.command()(resolve_source)
app.command()(describe_fields)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        ctx.exit(2)


if __name__ == "__main__":
    app()

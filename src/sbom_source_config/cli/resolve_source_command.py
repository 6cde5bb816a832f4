# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

# Command for loading, validating and printing the source configuration

import json
import logging
from typing import Annotated, Optional

import typer
import yaml

from sbom_source_config import JSON_SCHEMA_VERSION
from sbom_source_config.config.config_parser import ConfigParser
from sbom_source_config.config.source_config import (
    FIELD_DESCRIPTIONS,
    SourceConfig,
    default_source_config,
)
from sbom_source_config.errors import SourceConfigError
from sbom_source_config.utils.logging import setup_logging


def apply_overrides(
    config: SourceConfig,
    name: Optional[str] = None,
    version: Optional[str] = None,
    supplier: Optional[str] = None,
    authors: Optional[list[str]] = None,
    source: Optional[str] = None,
    base_path: Optional[str] = None,
    digests: Optional[list[str]] = None,
    default_pull_source: Optional[str] = None,
    max_layer_size: Optional[str] = None,
) -> SourceConfig:
    """Apply command line values on top of a loaded configuration."""
    if name is not None:
        config.name = name
    if version is not None:
        config.version = version
    if supplier is not None:
        config.supplier = supplier
    if authors is not None:
        config.authors = authors
    if source is not None:
        config.source = source
    if base_path is not None:
        config.base_path = base_path
    if digests is not None:
        config.file.digests = digests
    if default_pull_source is not None:
        config.image.default_pull_source = default_pull_source
    if max_layer_size is not None:
        config.image.max_layer_size = max_layer_size
    return config


def resolve_source(
    config_file: Annotated[
        Optional[str],
        typer.Option(
            "--config",
            "-c",
            help="Path to a JSON or YAML configuration file.",
        ),
    ] = None,
    name: Annotated[
        Optional[str], typer.Option(help=FIELD_DESCRIPTIONS["name"])
    ] = None,
    version: Annotated[
        Optional[str], typer.Option(help=FIELD_DESCRIPTIONS["version"])
    ] = None,
    supplier: Annotated[
        Optional[str], typer.Option(help=FIELD_DESCRIPTIONS["supplier"])
    ] = None,
    authors: Annotated[
        Optional[list[str]],
        typer.Option("--author", help=FIELD_DESCRIPTIONS["authors"]),
    ] = None,
    source: Annotated[
        Optional[str], typer.Option(help=FIELD_DESCRIPTIONS["source"])
    ] = None,
    base_path: Annotated[
        Optional[str],
        typer.Option("--base-path", help=FIELD_DESCRIPTIONS["base-path"]),
    ] = None,
    digests: Annotated[
        Optional[list[str]],
        typer.Option("--digest", help=FIELD_DESCRIPTIONS["file.digests"]),
    ] = None,
    default_pull_source: Annotated[
        Optional[str],
        typer.Option(
            "--default-pull-source",
            help=FIELD_DESCRIPTIONS["image.default-pull-source"],
        ),
    ] = None,
    max_layer_size: Annotated[
        Optional[str],
        typer.Option(
            "--max-layer-size", help=FIELD_DESCRIPTIONS["image.max-layer-size"]
        ),
    ] = None,
    debug: Annotated[
        bool, typer.Option("--debug", help="Enable debug logging.")
    ] = False,
) -> None:
    """
    Load the source configuration, validate it and print the resolved values as JSON.

    Command line values take precedence over the configuration file.
    """
    setup_logging(logging.DEBUG if debug else logging.WARNING)

    try:
        if config_file:
            config = ConfigParser.load_source_config(config_file)
        else:
            config = default_source_config()
        apply_overrides(
            config,
            name=name,
            version=version,
            supplier=supplier,
            authors=authors,
            source=source,
            base_path=base_path,
            digests=digests,
            default_pull_source=default_pull_source,
            max_layer_size=max_layer_size,
        )
        config.post_load()
    except FileNotFoundError:
        typer.echo(f"Error: File '{config_file}' not found.", err=True)
        raise typer.Exit(code=1)
    except (SourceConfigError, json.JSONDecodeError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(code=1)

    output = {
        "schema": {"version": JSON_SCHEMA_VERSION},
        "source": config.to_dict(),
        "authors": [author.to_dict() for author in config.parsed_authors],
        "read-limits": {
            "per-file-read-limit": config.read_limits().per_file_read_limit
        },
    }
    typer.echo(json.dumps(output, indent=2))


def describe_fields() -> None:
    """
    Print every configuration key with its description.
    """
    for key, description in FIELD_DESCRIPTIONS.items():
        typer.echo(f"{key}: {description}")

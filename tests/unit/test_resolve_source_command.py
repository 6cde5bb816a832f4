# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import json
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner

from sbom_source_config import JSON_SCHEMA_VERSION
from sbom_source_config.cli.main_cli import app
from sbom_source_config.cli.resolve_source_command import apply_overrides
from sbom_source_config.config.source_config import default_source_config
from sbom_source_config.source.read_limit import (
    DEFAULT_PER_FILE_READ_LIMIT,
    set_per_file_read_limit,
)


@pytest.fixture
def runner() -> CliRunner:
    """Create a fresh CLI runner for each test."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_read_limit() -> Iterator[None]:
    yield
    set_per_file_read_limit(DEFAULT_PER_FILE_READ_LIMIT)


def test_no_subcommand_prints_help(runner: CliRunner) -> None:
    result = runner.invoke(app, [], color=False)

    assert result.exit_code == 2
    assert "resolve-source" in result.stdout


def test_resolve_source_defaults(runner: CliRunner) -> None:
    result = runner.invoke(app, ["resolve-source"], color=False)

    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert output["schema"] == {"version": JSON_SCHEMA_VERSION}
    assert output["source"]["file"]["digests"] == ["sha256"]
    assert output["authors"] == []
    assert output["read-limits"]["per-file-read-limit"] == DEFAULT_PER_FILE_READ_LIMIT


def test_resolve_source_with_flags(runner: CliRunner) -> None:
    result = runner.invoke(
        app,
        [
            "resolve-source",
            "--name",
            "my-app",
            "--author",
            "Person:Jane Doe:jane@example.com",
            "--author",
            "Tool:syft-core",
            "--digest",
            "sha256",
            "--digest",
            "sha1",
            "--digest",
            "sha256",
            "--default-pull-source",
            "docker",
            "--max-layer-size",
            "10MB",
        ],
        color=False,
    )

    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert output["source"]["name"] == "my-app"
    assert output["source"]["file"]["digests"] == ["sha1", "sha256"]
    assert output["source"]["image"]["default-pull-source"] == "docker"
    assert output["authors"] == [
        {"name": "Jane Doe", "email": "jane@example.com", "type": "Person"},
        {"name": "syft-core", "email": "", "type": "Tool"},
    ]
    assert output["read-limits"]["per-file-read-limit"] == 10_000_000


def test_resolve_source_flags_override_config_file(
    runner: CliRunner, tmp_path: Path
) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "source:\n"
        "  name: from-file\n"
        "  supplier: Datadog\n"
        "  image:\n"
        "    default-pull-source: registry\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        ["resolve-source", "--config", str(config_file), "--name", "from-flag"],
        color=False,
    )

    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert output["source"]["name"] == "from-flag"
    assert output["source"]["supplier"] == "Datadog"
    assert output["source"]["image"]["default-pull-source"] == "registry"


def test_resolve_source_invalid_author(runner: CliRunner) -> None:
    result = runner.invoke(
        app, ["resolve-source", "--author", "Robot:bad"], color=False
    )

    assert result.exit_code == 1
    assert "Error: invalid author type 'Robot'" in result.stderr


def test_resolve_source_invalid_pull_source(runner: CliRunner) -> None:
    result = runner.invoke(
        app, ["resolve-source", "--default-pull-source", "foo"], color=False
    )

    assert result.exit_code == 1
    assert "Error: foo is not a valid default source" in result.stderr
    assert "registry, docker, podman" in result.stderr


def test_resolve_source_invalid_max_layer_size(runner: CliRunner) -> None:
    result = runner.invoke(
        app, ["resolve-source", "--max-layer-size", "bogus"], color=False
    )

    assert result.exit_code == 1
    assert "Error: invalid byte size 'bogus'" in result.stderr


def test_resolve_source_config_file_not_found(runner: CliRunner) -> None:
    result = runner.invoke(
        app, ["resolve-source", "--config", "nonexistent.yaml"], color=False
    )

    assert result.exit_code == 1
    assert "Error: File 'nonexistent.yaml' not found." in result.stderr


@patch("sbom_source_config.config.config_parser.open_file")
def test_resolve_source_invalid_json(mock_open_file: Mock, runner: CliRunner) -> None:
    mock_open_file.return_value = "invalid json"

    result = runner.invoke(
        app, ["resolve-source", "--config", "config.json"], color=False
    )

    assert result.exit_code == 1
    assert "Error:" in result.stderr


def test_describe_fields(runner: CliRunner) -> None:
    result = runner.invoke(app, ["describe-fields"], color=False)

    assert result.exit_code == 0
    assert "file.digests: the file digest algorithms" in result.stdout
    assert "image.default-pull-source:" in result.stdout


def test_apply_overrides_keeps_unset_values() -> None:
    config = default_source_config()
    config.name = "from-file"
    config.authors = ["Tool:syft-core"]

    apply_overrides(config, version="1.0.0", digests=["md5"])

    assert config.name == "from-file"
    assert config.version == "1.0.0"
    assert config.authors == ["Tool:syft-core"]
    assert config.file.digests == ["md5"]


def test_resolve_source_config_path_is_directory(
    runner: CliRunner, tmp_path: Path
) -> None:
    result = runner.invoke(
        app, ["resolve-source", "--config", str(tmp_path)], color=False
    )

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error reading configuration:" in result.stderr


def test_resolve_source_config_file_not_utf8(
    runner: CliRunner, tmp_path: Path
) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_bytes(b"name: \xff\xfe\xfa\n")

    result = runner.invoke(
        app, ["resolve-source", "--config", str(config_file)], color=False
    )

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error reading configuration:" in result.stderr


def test_resolve_source_numeric_version_in_config_file(
    runner: CliRunner, tmp_path: Path
) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("version: 2.0\n", encoding="utf-8")

    result = runner.invoke(
        app, ["resolve-source", "--config", str(config_file)], color=False
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout)["source"]["version"] == "2.0"


def test_resolve_source_max_layer_size_trailing_text(runner: CliRunner) -> None:
    result = runner.invoke(
        app, ["resolve-source", "--max-layer-size", "10MB extra"], color=False
    )

    assert result.exit_code == 1
    assert "Error: invalid byte size '10MB extra'" in result.stderr

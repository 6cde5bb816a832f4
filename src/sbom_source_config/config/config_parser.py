# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import json
import logging
from typing import Any

import yaml

from sbom_source_config.adaptors.os import file_extension, open_file
from sbom_source_config.config.source_config import SourceConfig
from sbom_source_config.errors import SourceConfigError

YAML_EXTENSIONS = {".yaml", ".yml"}


class ConfigParser:
    """Parser for the source configuration files (JSON or YAML)."""

    @staticmethod
    def parse_document(content: str, extension: str) -> dict[str, Any]:
        """Parse a configuration document and return its source section.

        The keys may sit at the top level or under a "source" mapping, as
        they do in a full tool configuration file.

        Raises:
            json.JSONDecodeError: If a JSON document is invalid
            yaml.YAMLError: If a YAML document is invalid
            SourceConfigError: If the document is not a mapping
        """
        if extension in YAML_EXTENSIONS:
            document = yaml.safe_load(content)
        else:
            document = json.loads(content)

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise SourceConfigError("configuration document must be a mapping")

        section = document.get("source")
        if isinstance(section, dict):
            return section
        return document

    @staticmethod
    def load_source_config(config_file_path: str) -> SourceConfig:
        """Load a SourceConfig from a file, without running post load validation.

        Raises:
            FileNotFoundError: If the configuration file is not found
            json.JSONDecodeError: If the JSON file is invalid
            yaml.YAMLError: If the YAML file is invalid
            SourceConfigError: If the configuration format is invalid
        """
        try:
            data = ConfigParser.parse_document(
                open_file(config_file_path), file_extension(config_file_path)
            )
            return SourceConfig.from_dict(data)
        except FileNotFoundError:
            logging.error(f"Configuration file not found: {config_file_path}")
            raise
        except json.JSONDecodeError:
            logging.error(f"Invalid JSON in configuration file: {config_file_path}")
            raise
        except yaml.YAMLError:
            logging.error(f"Invalid YAML in configuration file: {config_file_path}")
            raise
        except Exception as e:
            logging.error(f"Failed to load configuration: {str(e)}")
            raise

# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from .config_parser import ConfigParser
from .source_config import (
    FileSourceConfig,
    ImageSourceConfig,
    PullSource,
    SourceConfig,
    default_source_config,
)

__all__ = [
    "ConfigParser",
    "FileSourceConfig",
    "ImageSourceConfig",
    "PullSource",
    "SourceConfig",
    "default_source_config",
]

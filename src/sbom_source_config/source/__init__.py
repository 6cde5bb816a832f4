# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from .author import Author, AuthorType, parse_authors
from .description import (
    DirectoryMetadata,
    FileMetadata,
    ImageMetadata,
    SourceDescription,
    SourceMetadata,
)
from .read_limit import ReadLimits, resolve_byte_size

__all__ = [
    "Author",
    "AuthorType",
    "parse_authors",
    "DirectoryMetadata",
    "FileMetadata",
    "ImageMetadata",
    "SourceDescription",
    "SourceMetadata",
    "ReadLimits",
    "resolve_byte_size",
]

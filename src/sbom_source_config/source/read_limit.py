# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

"""Per-file read limit applied when opening container image layers."""

import logging
import re
from dataclasses import dataclass

from pydantic import ByteSize, TypeAdapter, ValidationError

from sbom_source_config.errors import InvalidByteSizeFormatError

DEFAULT_PER_FILE_READ_LIMIT = 2 * 1024**3

MAX_BYTE_SIZE = 2**64 - 1

# Number and unit must cover the whole value, pydantic alone accepts trailing text
BYTE_SIZE_PATTERN = re.compile(r"^\s*\d+(\.\d+)?\s*(?P<unit>[A-Za-z]*)\s*$")

_byte_size_adapter = TypeAdapter(ByteSize)

# Written during configuration loading only, read-only once scanning starts.
_per_file_read_limit = DEFAULT_PER_FILE_READ_LIMIT


@dataclass(frozen=True)
class ReadLimits:
    """Read limits handed explicitly to anything opening files or layers."""

    per_file_read_limit: int = DEFAULT_PER_FILE_READ_LIMIT


def resolve_byte_size(size: str) -> int:
    """Parse a human readable size such as "500MB" or "1GiB" into bytes.

    Decimal suffixes (KB, MB, GB) are powers of 1000, binary suffixes
    (KiB, MiB, GiB) powers of 1024. Thousands separators are dropped, so
    "1,000KB" is 1000000. Callers are expected to skip empty values
    instead of resolving them.

    Raises:
        InvalidByteSizeFormatError: If the value can't be parsed, uses a bit
            unit or doesn't fit in 64 bits
    """
    cleaned = size.replace(",", "")
    match = BYTE_SIZE_PATTERN.match(cleaned)
    if match is None:
        raise InvalidByteSizeFormatError(size, "expected a number and a byte unit")
    if match.group("unit").lower().endswith("bit"):
        raise InvalidByteSizeFormatError(size, "bit units are not supported")

    try:
        resolved = int(_byte_size_adapter.validate_python(cleaned.strip()))
    except ValidationError as e:
        raise InvalidByteSizeFormatError(size, e.errors()[0]["msg"]) from e

    if resolved > MAX_BYTE_SIZE:
        raise InvalidByteSizeFormatError(size, "too large")
    return resolved


def set_per_file_read_limit(limit: int) -> None:
    global _per_file_read_limit
    logging.debug(f"Setting per file read limit to {limit} bytes")
    _per_file_read_limit = limit


def get_per_file_read_limit() -> int:
    return _per_file_read_limit

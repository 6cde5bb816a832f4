# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.


class SourceConfigError(ValueError):
    """Base class for user input mistakes found while loading the source configuration."""


class MalformedAuthorFormatError(SourceConfigError):
    def __init__(self, author: str) -> None:
        self.author = author
        super().__init__(
            f"invalid author format '{author}', expected 'type:name' or 'type:name:email'"
        )


class InvalidAuthorTypeError(SourceConfigError):
    def __init__(self, author_type: str) -> None:
        self.author_type = author_type
        super().__init__(
            f"invalid author type '{author_type}', must be Person, Organization, or Tool"
        )


class EmptyAuthorNameError(SourceConfigError):
    def __init__(self) -> None:
        super().__init__("author name cannot be empty")


class InvalidDefaultPullSourceError(SourceConfigError):
    def __init__(self, value: str, valid_values: list[str]) -> None:
        self.value = value
        self.valid_values = valid_values
        super().__init__(
            f"{value} is not a valid default source; please use one of the following: "
            f"{', '.join(valid_values)}''"
        )


class InvalidByteSizeFormatError(SourceConfigError):
    def __init__(self, size: str, reason: str) -> None:
        self.size = size
        super().__init__(f"invalid byte size '{size}': {reason}")

# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from sbom_source_config.errors import (
    EmptyAuthorNameError,
    InvalidAuthorTypeError,
    MalformedAuthorFormatError,
)


class AuthorType(Enum):
    """
    Enum for the kinds of entities that can author an SBOM.
    """

    PERSON = "Person"
    ORGANIZATION = "Organization"
    TOOL = "Tool"


@dataclass(frozen=True)
class Author:
    """An author of the SBOM."""

    name: str
    email: str
    type: AuthorType

    @staticmethod
    def parse(author_str: str) -> "Author":
        """Parse an author string in the format "type:name" or "type:name:email".

        Only the first two colons are significant, anything after the third
        segment is ignored.

        Raises:
            MalformedAuthorFormatError: If the string has less than two segments
            InvalidAuthorTypeError: If the type is not Person, Organization or Tool
            EmptyAuthorNameError: If the name segment is empty
        """
        parts = author_str.split(":")
        if len(parts) < 2:
            raise MalformedAuthorFormatError(author_str)

        try:
            author_type = AuthorType(parts[0])
        except ValueError:
            raise InvalidAuthorTypeError(parts[0])

        name = parts[1]
        if name == "":
            raise EmptyAuthorNameError()

        email = parts[2] if len(parts) >= 3 else ""

        return Author(name=name, email=email, type=author_type)

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email, "type": self.type.value}


def parse_authors(author_strings: Sequence[str]) -> list[Author]:
    """Parse author strings into Author records, preserving input order.

    The first invalid entry aborts the whole batch.
    """
    return [Author.parse(author_str) for author_str in author_strings]

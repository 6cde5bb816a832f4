# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sbom_source_config.errors import (
    InvalidDefaultPullSourceError,
    SourceConfigError,
)
from sbom_source_config.source.author import Author, parse_authors
from sbom_source_config.source.description import SourceDescription, SourceMetadata
from sbom_source_config.source.read_limit import (
    ReadLimits,
    get_per_file_read_limit,
    resolve_byte_size,
    set_per_file_read_limit,
)

DEFAULT_DIGEST_ALGORITHMS = ["sha256"]

FIELD_DESCRIPTIONS = {
    "name": "set the name of the target being analyzed",
    "version": "set the version of the target being analyzed",
    "supplier": "the organization that supplied the component",
    "authors": (
        'authors of the SBOM in the format "type:name" or "type:name:email" '
        "(type is one of: Person, Organization, Tool)"
    ),
    "source": "determine the source type explicitly instead of detecting it",
    "base-path": "base directory for scanning, all reported file paths are relative to it",
    "file.digests": (
        'the file digest algorithms to use on the scanned file (options: "md5", '
        '"sha1", "sha224", "sha256", "sha384", "sha512")'
    ),
    "image.default-pull-source": (
        "allows users to specify which image source should be used to generate "
        "the sbom, valid values are: registry, docker, podman"
    ),
    "image.max-layer-size": (
        'the maximum number of bytes read from a single image layer (e.g. "500MB")'
    ),
}


class PullSource(Enum):
    """
    Enum for the mechanisms that can be used to obtain a container image.
    """

    REGISTRY = "registry"
    DOCKER = "docker"
    PODMAN = "podman"
    NONE = ""


VALID_DEFAULT_PULL_SOURCES = [pull_source.value for pull_source in PullSource]


def normalize_digests(digests: Iterable[str]) -> list[str]:
    """Deduplicate digest algorithm names and sort them.

    Names are compared as opaque strings, "SHA256" and "sha256" are kept apart.
    """
    return sorted(set(digests))


def check_default_pull_source(value: str) -> PullSource:
    try:
        return PullSource(value)
    except ValueError:
        raise InvalidDefaultPullSourceError(value, VALID_DEFAULT_PULL_SOURCES)


def _string_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise SourceConfigError(f"'{key}' must be a list of strings")
    return list(value)


def _string(key: str, value: Any) -> str:
    if value is None:
        return ""
    # YAML reads unquoted versions as numbers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise SourceConfigError(f"'{key}' must be a string")
    return value


def _section(key: str, value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SourceConfigError(f"'{key}' must be a mapping")
    return value


def _warn_unknown_keys(prefix: str, data: dict[str, Any], known: set[str]) -> None:
    for key in data:
        if key not in known:
            logging.warning(f"Ignoring unknown configuration key: {prefix}{key}")


@dataclass
class FileSourceConfig:
    digests: list[str] = field(
        default_factory=lambda: list(DEFAULT_DIGEST_ALGORITHMS)
    )

    def post_load(self) -> None:
        self.digests = normalize_digests(self.digests)
        logging.debug(f"Using file digest algorithms: {self.digests}")


@dataclass
class ImageSourceConfig:
    default_pull_source: str = ""
    max_layer_size: str = ""
    max_layer_size_bytes: int | None = field(default=None, init=False, repr=False)

    def post_load(self) -> None:
        """Resolve the layer size limit and validate the pull source.

        A non empty max_layer_size becomes the process wide per file read limit.
        """
        if self.max_layer_size != "":
            self.max_layer_size_bytes = resolve_byte_size(self.max_layer_size)
            set_per_file_read_limit(self.max_layer_size_bytes)
        check_default_pull_source(self.default_pull_source)


@dataclass
class SourceConfig:
    """User facing configuration describing the source to catalog.

    Empty values mean the scanning pipeline default is used.
    """

    name: str = ""
    version: str = ""
    supplier: str = ""
    authors: list[str] = field(default_factory=list)
    source: str = ""
    base_path: str = ""
    file: FileSourceConfig = field(default_factory=FileSourceConfig)
    image: ImageSourceConfig = field(default_factory=ImageSourceConfig)
    parsed_authors: list[Author] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SourceConfig":
        """Create a SourceConfig from the configuration keys, on top of the defaults."""
        config = default_source_config()
        _warn_unknown_keys(
            "",
            data,
            {"name", "version", "supplier", "authors", "source", "base-path", "file", "image"},
        )

        config.name = _string("name", data.get("name"))
        config.version = _string("version", data.get("version"))
        config.supplier = _string("supplier", data.get("supplier"))
        config.source = _string("source", data.get("source"))
        config.base_path = _string("base-path", data.get("base-path"))
        if data.get("authors") is not None:
            config.authors = _string_list("authors", data["authors"])

        file_data = _section("file", data.get("file"))
        _warn_unknown_keys("file.", file_data, {"digests"})
        if file_data.get("digests") is not None:
            config.file.digests = _string_list("file.digests", file_data["digests"])

        image_data = _section("image", data.get("image"))
        _warn_unknown_keys(
            "image.", image_data, {"default-pull-source", "max-layer-size"}
        )
        config.image.default_pull_source = _string(
            "image.default-pull-source", image_data.get("default-pull-source")
        )
        config.image.max_layer_size = _string(
            "image.max-layer-size", image_data.get("max-layer-size")
        )
        return config

    def post_load(self) -> None:
        """Normalize and validate every section, stopping at the first failure."""
        self.parsed_authors = parse_authors(self.authors)
        self.file.post_load()
        self.image.post_load()

    def read_limits(self) -> ReadLimits:
        if self.image.max_layer_size_bytes is not None:
            return ReadLimits(per_file_read_limit=self.image.max_layer_size_bytes)
        return ReadLimits(per_file_read_limit=get_per_file_read_limit())

    def describe(
        self, source_id: str, metadata: SourceMetadata | None = None
    ) -> SourceDescription:
        return SourceDescription(
            id=source_id,
            name=self.name,
            version=self.version,
            supplier=self.supplier,
            authors=tuple(parse_authors(self.authors)),
            metadata=metadata,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "supplier": self.supplier,
            "authors": list(self.authors),
            "source": self.source,
            "base-path": self.base_path,
            "file": {"digests": list(self.file.digests)},
            "image": {
                "default-pull-source": self.image.default_pull_source,
                "max-layer-size": self.image.max_layer_size,
            },
        }


def default_source_config() -> SourceConfig:
    return SourceConfig(file=FileSourceConfig(digests=list(DEFAULT_DIGEST_ALGORITHMS)))

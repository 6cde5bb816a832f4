# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import hashlib
import json
from dataclasses import asdict, dataclass, field
from typing import Any

from sbom_source_config.source.author import Author


@dataclass(frozen=True)
class DirectoryMetadata:
    path: str
    base: str = ""


@dataclass(frozen=True)
class FileMetadata:
    path: str
    digests: tuple[str, ...] = ()  # "algorithm:value" entries
    mime_type: str = ""


@dataclass(frozen=True)
class ImageMetadata:
    user_input: str
    id: str = ""
    manifest_digest: str = ""
    media_type: str = ""
    tags: tuple[str, ...] = ()
    size: int = 0
    repo_digests: tuple[str, ...] = ()
    architecture: str = ""
    os: str = ""


SourceMetadata = DirectoryMetadata | FileMetadata | ImageMetadata

_METADATA_KINDS: dict[type, str] = {
    DirectoryMetadata: "directory",
    FileMetadata: "file",
    ImageMetadata: "image",
}


# Everything but metadata is provenance: it describes who produced the SBOM
# and under which name, not what was cataloged, so it stays out of the
# content hash.
@dataclass(frozen=True)
class SourceDescription:
    """Static source data describing "what" was cataloged."""

    id: str  # assigned by the resolved source, never by the user
    name: str = ""
    version: str = ""
    supplier: str = ""
    authors: tuple[Author, ...] = field(default_factory=tuple)
    metadata: SourceMetadata | None = None

    @property
    def kind(self) -> str | None:
        if self.metadata is None:
            return None
        return _METADATA_KINDS[type(self.metadata)]

    def content_hash(self) -> str:
        """Return a sha256 hex digest computed from the metadata payload only."""
        payload: dict[str, Any] = {"kind": self.kind}
        if self.metadata is not None:
            payload["metadata"] = asdict(self.metadata)
        encoded = json.dumps(payload, sort_keys=True).encode("utf-8")
        return hashlib.sha256(encoded).hexdigest()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "supplier": self.supplier,
            "authors": [author.to_dict() for author in self.authors],
            "type": self.kind,
            "metadata": asdict(self.metadata) if self.metadata is not None else None,
        }

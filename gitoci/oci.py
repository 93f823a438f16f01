"""OCI artifact types used to store Git repositories in OCI registries."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Mapping

ARTIFACT_TYPE_GIT_MANIFEST = "application/vnd.act3-ai.git.repo.v1+json"
"""Artifact type of a Git manifest."""

MEDIA_TYPE_GIT_CONFIG = "application/vnd.act3-ai.git.config.v1+json"
"""Media type of a Git config."""

MEDIA_TYPE_PACK_LAYER = "application/vnd.act3-ai.git.pack.v1"
"""Media type of a Git packfile stored as an OCI layer."""

ANNOTATION_GIT_REMOTE_OCI_VERSION = "vnd.act3-ai.git-remote-oci.version"
"""Annotation key recording the git-remote-oci version of the latest operation."""

_HASH_RE = re.compile(r"(?:[0-9a-f]{40}|[0-9a-f]{64})")
_DIGEST_RE = re.compile(r"[a-z0-9]+(?:[.+_-][a-z0-9]+)*:[a-zA-Z0-9=_-]+")


@dataclass(frozen=True)
class ReferenceInfo:
    """A commit pointed to by a reference and the layer whose packfile holds it."""

    commit: str
    layer: str

    def __post_init__(self) -> None:
        if not isinstance(self.commit, str):
            raise ValueError(f"commit must be a string, got {type(self.commit).__name__}")
        commit = self.commit.lower()
        if not _HASH_RE.fullmatch(commit):
            raise ValueError(f"invalid commit hash {self.commit!r}")
        object.__setattr__(self, "commit", commit)
        if not isinstance(self.layer, str) or not _DIGEST_RE.fullmatch(self.layer):
            raise ValueError(f"invalid layer digest {self.layer!r}")

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-ready mapping of this reference."""
        return {"commit": self.commit, "layer": self.layer}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ReferenceInfo:
        """Build a reference from its JSON mapping."""
        if not isinstance(data, Mapping):
            raise ValueError("reference info must be an object")
        try:
            return cls(commit=data["commit"], layer=data["layer"])
        except KeyError as exc:
            raise ValueError(f"reference info is missing {exc.args[0]!r}") from None


def _refs_from(data: Any, what: str) -> dict[str, ReferenceInfo]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object")
    return {str(name): ReferenceInfo.from_dict(info) for name, info in data.items()}


@dataclass
class ConfigGit:
    """OCI manifest config describing a Git repository's references."""

    heads: dict[str, ReferenceInfo] = field(default_factory=dict)
    tags: dict[str, ReferenceInfo] = field(default_factory=dict)

    def to_dict(self) -> dict[str, dict[str, dict[str, str]]]:
        """Return the JSON-ready mapping of this config."""
        return {
            "heads": {name: info.to_dict() for name, info in sorted(self.heads.items())},
            "tags": {name: info.to_dict() for name, info in sorted(self.tags.items())},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConfigGit:
        """Build a config from its JSON mapping."""
        if not isinstance(data, Mapping):
            raise ValueError("git config must be an object")
        return cls(
            heads=_refs_from(data.get("heads"), "heads"),
            tags=_refs_from(data.get("tags"), "tags"),
        )

    def to_json(self) -> str:
        """Serialise the config as compact JSON with sorted keys."""
        return json.dumps(self.to_dict(), separators=(",", ":"), sort_keys=True)

    @classmethod
    def from_json(cls, text: str | bytes) -> ConfigGit:
        """Parse a config from JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid git config JSON: {exc}") from exc
        return cls.from_dict(data)
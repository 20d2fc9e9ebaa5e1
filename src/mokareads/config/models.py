"""Frozen section models for mokareads.toml.

Defaults live here; the TOML file only carries overrides. An empty
project needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from mokareads.domain.content import DEFAULT_SITE_URL


class LibraryConfig(BaseModel):
    """[library] section."""

    model_config = {"frozen": True}

    content_dir: Path = Path("content")
    snapshot_path: Path = Path(".mokareads/snapshot.json")
    guides: list[str] = Field(default_factory=list)
    site_url: str = DEFAULT_SITE_URL


class RemoteConfig(BaseModel):
    """[remote] section."""

    model_config = {"frozen": True}

    api_base: str = "https://mokareads.org/api/"
    timeout: float = 10.0
    user_agent: str = "mokareads"


class FeedConfig(BaseModel):
    """[feed] section."""

    model_config = {"frozen": True}

    title: str = "Moka Reads"
    description: str = "An Opensource Education Platform"
    language: str = "en"
    ttl: int = 60

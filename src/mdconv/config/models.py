"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, mdconv.toml only contains
overrides.  With no config file at all the tool reads the input path as
given and writes under ``public/``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

# --- mdconv.toml sections ---


class PathsConfig(BaseModel):
    """[paths] section."""

    model_config = {"frozen": True}

    content_dir: str = ""
    public_dir: str = "public"
    output: str = "output.html"
    front_matter_output: str = "frontmatter/front_matter_output.json"
    create_parents: bool = False


class FrontMatterConfig(BaseModel):
    """[front_matter] section."""

    model_config = {"frozen": True}

    format: Literal["json", "yaml"] = "json"
    include_categories: bool = True


class MarkdownConfig(BaseModel):
    """[markdown] section."""

    model_config = {"frozen": True}

    preset: Literal["commonmark", "default", "zero"] = "commonmark"
    html: bool = True


"""Document splitting and front matter serialization.

A document has front matter when its first line is exactly ``---``,
followed by a YAML block, followed by a closing ``---`` line.  Only the
first block is recognized.  Stripping uses the same compiled pattern
that detected the block, so the body never contains the delimiters.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from io import StringIO
from typing import Literal

from ruamel.yaml import YAML

from mdconv.domain.frontmatter import FrontMatter

FrontMatterFormat = Literal["json", "yaml"]

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<yaml>.*?)^---[ \t]*\r?(?:\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


@dataclass(frozen=True)
class Document:
    """A parsed markdown document: decoded header plus the stripped body."""

    front_matter: FrontMatter = field(default_factory=FrontMatter)
    body: str = ""
    has_front_matter: bool = False


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def split_front_matter(text: str) -> tuple[str | None, str]:
    """Split *text* into ``(yaml_block, body)``.

    Returns ``(None, text)`` unchanged when no block is present.  Handles
    both ``\\n`` and ``\\r\\n`` line endings.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return None, text
    return match.group("yaml"), text[match.end() :]


def parse_document(text: str) -> Document:
    """Split *text* and decode its front matter.

    Raises:
        FrontMatterError: If a block is present but cannot be decoded.
    """
    block, body = split_front_matter(text)
    if block is None:
        return Document(body=body)
    return Document(
        front_matter=FrontMatter.from_yaml(block),
        body=body,
        has_front_matter=True,
    )


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _new_yaml() -> YAML:
    """Create a fresh block-style YAML emitter."""
    y = YAML()
    y.default_flow_style = False
    return y


def dump_front_matter(
    front_matter: FrontMatter,
    fmt: FrontMatterFormat = "json",
    *,
    include_categories: bool = True,
) -> str:
    """Serialize a record as pretty JSON (2-space indent) or block YAML."""
    payload = front_matter.to_payload(include_categories=include_categories)
    if fmt == "yaml":
        buf = StringIO()
        _new_yaml().dump(payload, buf)
        return buf.getvalue()
    return json.dumps(payload, indent=2, ensure_ascii=False)

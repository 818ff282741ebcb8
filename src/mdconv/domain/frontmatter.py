"""FrontMatter record: the fixed schema decoded from a document header.

Field order is the serialization order:
  title, date, categories, tags

Every field has a default so a document without front matter still
yields a fully populated record.  The model is frozen: it is built once
per invocation, serialized once, then discarded.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.error import YAMLError


class FrontMatterError(ValueError):
    """Front matter block could not be decoded into a FrontMatter record."""


class _FrontMatterConstructor(SafeConstructor):
    """Safe constructor that leaves timestamps as the text that was written."""


_FrontMatterConstructor.add_constructor(
    "tag:yaml.org,2002:timestamp", SafeConstructor.construct_yaml_str
)


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader.

    Front matter is only ever read here, never round-tripped, so the safe
    loader (plain dicts, lists and strings) is enough.  Dates and datetimes
    come back as ``str`` exactly as written; ints, bools and nulls keep
    their YAML types.
    """
    yaml = YAML(typ="safe", pure=True)
    yaml.Constructor = _FrontMatterConstructor
    return yaml


class FrontMatter(BaseModel):
    """Decoded front matter with empty defaults for every field."""

    model_config = {"frozen": True, "extra": "ignore"}

    title: str = ""
    date: str = ""
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_yaml(cls, text: str) -> FrontMatter:
        """Decode a YAML block into a record.

        An empty block yields the defaults.  Unknown keys are ignored.

        Raises:
            FrontMatterError: On YAML syntax errors, a non-mapping document,
                or a value whose type does not match its field.
        """
        try:
            data = _new_yaml().load(text)
        except YAMLError as exc:
            msg = f"Invalid YAML in front matter: {exc}"
            raise FrontMatterError(msg) from exc

        if data is None:
            return cls()
        if not isinstance(data, dict):
            msg = f"Front matter must be a mapping, got {type(data).__name__}"
            raise FrontMatterError(msg)

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise FrontMatterError(_summarize(exc)) from exc

    def to_payload(self, *, include_categories: bool = True) -> dict[str, Any]:
        """Return the record as an ordered dict ready for serialization."""
        exclude = None if include_categories else {"categories"}
        return self.model_dump(exclude=exclude)


def _summarize(exc: ValidationError) -> str:
    """Collapse a pydantic ValidationError into a one-line message."""
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}")
    return "Front matter does not match schema: " + "; ".join(parts)

"""
Content storage for the record browser.

Content types are declared in the configuration. The records of a content
type live in <content_path>/<slug>.yaml as a YAML list of mappings:

    - id: 1
      title: About us
      slug: about-us
      status: published
"""

from pathlib import Path
from typing import Any

import yaml

from .config import ContentTypeSpec

PUBLISHED = "published"


def _coerce_id(value):
    """Keep int and str ids as they are, render anything else (floats, dates) as text."""
    if value is None or (isinstance(value, (int, str)) and not isinstance(value, bool)):
        return value
    return str(value)


class Record:
    """A single content record."""

    def __init__(self, contenttype: ContentTypeSpec, values: dict[str, Any]):
        self.contenttype = contenttype
        self.values = dict(values)
        self.id = _coerce_id(values.get("id"))
        self.slug = values.get("slug")
        self.status = values.get("status", "draft")

    def get_title(self) -> str:
        title = self.values.get(self.contenttype.title_field)
        if title is None or not str(title).strip():
            return f"{self.contenttype.singular_name} #{self.id}"
        return str(title)

    @property
    def title(self) -> str:
        return self.get_title()

    def link(self) -> str:
        return f"/{self.contenttype.singular_slug}/{self.slug or self.id}"

    def __repr__(self) -> str:
        return f"<Record {self.contenttype.slug}#{self.id}>"


class ContentStorage:
    """Read-only access to records stored as YAML files."""

    def __init__(self, contenttypes: dict[str, ContentTypeSpec], content_path=None):
        self.contenttypes = contenttypes
        self.content_path = Path(content_path) if content_path else None

    @classmethod
    def from_config(cls, config) -> "ContentStorage":
        return cls(config.contenttypes, config.content_path)

    def get_content_types(self) -> list[str]:
        return list(self.contenttypes)

    def _load_records(self, contenttype: ContentTypeSpec) -> list[dict]:
        if self.content_path is None:
            return []
        path = self.content_path / f"{contenttype.slug}.yaml"
        if not path.is_file():
            return []
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or []
        if not isinstance(data, list):
            raise ValueError(f"{path} must contain a list of records")
        return [item for item in data if isinstance(item, dict)]

    def get_content(self, contenttype: str, published: bool = True) -> list[Record]:
        """
        Fetch the records of a content type.

        Args:
            contenttype: Content type slug.
            published: Only return records whose status is "published".

        Raises:
            KeyError: Unknown content type.
        """
        spec = self.contenttypes[contenttype]
        records = [Record(spec, values) for values in self._load_records(spec)]
        if published:
            records = [r for r in records if r.status == PUBLISHED]
        return [r for r in records if r.id is not None]

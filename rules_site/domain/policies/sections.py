"""Navigation sections parsed from the rules markdown."""

from __future__ import annotations

import re
from dataclasses import dataclass

_EMOJI_RE = re.compile(
    "["
    "\U0001F1E0-\U0001F1FF"  # flags
    "\U0001F300-\U0001F5FF"  # symbols & pictographs
    "\U0001F600-\U0001F64F"  # emoticons
    "\U0001F680-\U0001F6FF"  # transport & map
    "\U0001F900-\U0001F9FF"  # supplemental symbols
    "\U0001FA70-\U0001FAFF"
    "\u2600-\u26FF"  # misc symbols
    "\u2700-\u27BF"  # dingbats
    "\u2B00-\u2BFF"
    "\uFE0F\u200D"  # variation selector, zero-width joiner
    "]+"
)
_H2_RE = re.compile(r"^## (.+)$")


@dataclass(frozen=True)
class Section:
    id: str
    title: str
    level: int = 2

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "level": self.level}


def remove_emojis(text: str) -> str:
    """Strip emoji and collapse whitespace."""
    text = _EMOJI_RE.sub("", text)
    return re.sub(r"\s+", " ", text).strip()


def slugify(title: str) -> str:
    slug = re.sub(r"[^\w\s-]", "", title.lower())
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def parse_markdown_headers(content: str) -> list[Section]:
    """Collect second-level headers for the sidebar.

    Titles lose their emoji; ids are slugs of the cleaned title, made unique
    with ``-1``, ``-2`` … suffixes. A title that slugs to nothing gets
    ``section-<line index>``.
    """
    sections: list[Section] = []
    used_ids: set[str] = set()

    for index, line in enumerate(content.split("\n")):
        match = _H2_RE.match(line)
        if not match:
            continue

        title = remove_emojis(match.group(1).strip())
        base_id = slugify(title)

        unique_id = base_id or f"section-{index}"
        counter = 1
        while unique_id in used_ids:
            unique_id = f"{base_id or f'section-{index}'}-{counter}"
            counter += 1
        used_ids.add(unique_id)

        sections.append(Section(id=unique_id, title=title))

    return sections

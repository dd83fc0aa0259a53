"""Docs endpoints — navigation sections for each rules document."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException

from rules_site.config import settings
from rules_site.domain.policies.sections import parse_markdown_headers
from rules_site.domain.value_objects.enums import DocType

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/docs", tags=["docs"])


@router.get("/{doc_type}")
async def get_doc_sections(doc_type: str):
    """Sidebar sections parsed from ``<DOCS_PATH>/<doc_type>.md``."""
    try:
        dtype = DocType(doc_type)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown document type: {doc_type}")

    path = Path(settings.docs_path) / f"{dtype.value}.md"
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Rules document not found: %s", path)
        raise HTTPException(status_code=404, detail=f"Document not found: {dtype.value}")

    sections = parse_markdown_headers(content)
    return {
        "doc_type": dtype.value,
        "label": dtype.label,
        "description": dtype.description,
        "sections": [s.to_dict() for s in sections],
    }

"""Export payloads for a project: the markdown draft and a JSON provenance report."""

from datetime import UTC, datetime
from typing import Any

from quotecheck import __version__
from quotecheck.api.exceptions import ValidationError
from quotecheck.models import ContextPrecision, Project, Source

# Words this short are too common to attribute a paragraph to a source
MIN_ATTRIBUTION_WORD_LENGTH = 4

# Paragraph preview length in the report
PARAGRAPH_PREVIEW_CHARS = 100

CONFIDENCE_BY_PRECISION = {
    ContextPrecision.EXACT: "high",
    ContextPrecision.APPROXIMATE: "medium",
    ContextPrecision.NONE: "none",
}


def _require_draft(project: Project) -> None:
    if not project.draftText.strip():
        raise ValidationError("Project has no draft to export")


def split_paragraphs(text: str) -> list[str]:
    """Split a draft on blank lines, dropping empty paragraphs."""
    return [p for p in text.split("\n\n") if p.strip()]


def attribute_paragraph(paragraph: str, sources: list[Source]) -> list[Source]:
    """Sources sharing at least one non-trivial word with the paragraph."""
    keywords = {w for w in paragraph.lower().split() if len(w) >= MIN_ATTRIBUTION_WORD_LENGTH}
    attributed = []
    for source in sources:
        content = source.content.lower()
        if any(keyword in content for keyword in keywords):
            attributed.append(source)
    return attributed


def build_markdown(project: Project) -> str:
    """Return the draft as a markdown document."""
    _require_draft(project)
    return project.draftText


def build_json_report(project: Project, exported_at: datetime | None = None) -> dict[str, Any]:
    """Build the provenance report for a project.

    Includes export metadata, the editorial setup, per-paragraph source
    attribution, the quote verification mapping and workflow flags.
    """
    _require_draft(project)
    exported_at = exported_at or datetime.now(UTC)
    paragraphs = split_paragraphs(project.draftText)

    paragraph_entries = []
    for index, paragraph in enumerate(paragraphs):
        preview = paragraph[:PARAGRAPH_PREVIEW_CHARS]
        if len(paragraph) > PARAGRAPH_PREVIEW_CHARS:
            preview += "..."
        paragraph_entries.append({
            "paragraphNumber": index + 1,
            "content": preview,
            "wordCount": len(paragraph.split()),
            "sources": [
                {"id": s.id, "name": s.name, "type": s.type.value}
                for s in attribute_paragraph(paragraph, project.sources)
            ],
        })

    quote_mapping = [
        {
            "quoteId": index + 1,
            "quote": match.quote_text,
            "sourceId": match.source_id,
            "sourceName": match.source_name,
            "verified": match.matched,
            "context": match.context_excerpt,
            "confidence": CONFIDENCE_BY_PRECISION[match.precision],
        }
        for index, match in enumerate(project.quoteMatches)
    ]

    return {
        "metadata": {
            "exportDate": exported_at.isoformat(),
            "wordCount": len(project.draftText.split()),
            "keyPointsCount": len(project.keyPoints),
            "sourcesCount": len(project.sources),
            "paragraphsCount": len(paragraphs),
            "version": __version__,
        },
        "project": {
            "title": project.title,
            "direction": project.direction.model_dump(mode="json"),
            "keyPoints": [kp.model_dump(mode="json") for kp in project.keyPoints],
            "sources": [
                {"id": s.id, "type": s.type.value, "name": s.name, "url": s.url}
                for s in project.sources
            ],
        },
        "provenance": {
            "paragraphs": paragraph_entries,
            "quoteMapping": quote_mapping,
        },
        "workflow": {
            "transcriptLength": len(project.transcript),
            "keyPointsExtracted": len(project.keyPoints) > 0,
            "draftGenerated": len(project.draftText) > 0,
            "quotesChecked": len(project.quoteMatches) > 0,
            "sourcesAttached": len(project.sources) > 0,
        },
    }

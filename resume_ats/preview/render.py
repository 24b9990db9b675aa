from __future__ import annotations

import html
import re

from pydantic import BaseModel

from resume_ats.engine.vocabulary import DEFAULT_VOCABULARY, Vocabulary

from .templates import ResumeTemplate, export_filename, get_template

DEFAULT_CANDIDATE_NAME = "Candidate Name"

_BULLET_RE = re.compile(r"^(?:[-*•]|\d+[.)])\s+")
_MAX_HEADING_WORDS = 4


class ResumePreview(BaseModel):
    candidate_name: str
    initial: str
    template: ResumeTemplate
    html: str
    export_filename: str


def candidate_name(resume_text: str) -> str:
    for line in (resume_text or "").splitlines():
        stripped = line.strip()
        if stripped:
            return stripped
    return DEFAULT_CANDIDATE_NAME


def _is_heading(line: str, vocabulary: Vocabulary) -> bool:
    if len(line.split()) > _MAX_HEADING_WORDS:
        return False
    candidate = line.rstrip(":").strip()
    return any(pattern.search(candidate) for _, pattern in vocabulary.sections)


def plain_to_html(resume_text: str, *, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """Convert plain resume text into escaped HTML blocks.

    Consecutive bullet lines share one <ul>; short lines naming a section
    become headings; everything else is a paragraph.
    """
    lines = [line.strip() for line in (resume_text or "").splitlines()]
    parts: list[str] = []
    in_list = False

    for line in lines:
        if not line:
            continue
        bullet = _BULLET_RE.match(line)
        if bullet:
            if not in_list:
                parts.append("<ul>")
                in_list = True
            content = html.escape(line[bullet.end():].strip())
            parts.append(f"<li>{content}</li>")
            continue

        if in_list:
            parts.append("</ul>")
            in_list = False

        content = html.escape(line)
        if _is_heading(line, vocabulary):
            parts.append(f'<h2 class="section-heading">{content}</h2>')
        else:
            parts.append(f"<p>{content}</p>")

    if in_list:
        parts.append("</ul>")

    return "\n".join(parts) + ("\n" if parts else "")


def build_preview(
    resume_text: str,
    template_key: str | None = None,
    *,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> ResumePreview:
    template = get_template(template_key)
    name = candidate_name(resume_text)
    return ResumePreview(
        candidate_name=name,
        initial=name[:1].upper(),
        template=template,
        html=plain_to_html(resume_text, vocabulary=vocabulary),
        export_filename=export_filename(name, template.key),
    )

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel

TemplateKey = Literal["modern", "minimal", "creative"]

_FILENAME_UNSAFE_RE = re.compile(r"[^\w.-]+")


class ResumeTemplate(BaseModel):
    key: TemplateKey
    name: str
    class_name: str
    font_stack: str


TEMPLATES: dict[str, ResumeTemplate] = {
    "modern": ResumeTemplate(
        key="modern",
        name="Modern Professional",
        class_name="theme-modern",
        font_stack="ui-sans-serif, system-ui, Segoe UI, Arial",
    ),
    "minimal": ResumeTemplate(
        key="minimal",
        name="Minimal Clean",
        class_name="theme-minimal",
        font_stack="Arial, Helvetica, sans-serif",
    ),
    "creative": ResumeTemplate(
        key="creative",
        name="Creative Bold",
        class_name="theme-creative",
        font_stack="Helvetica, Arial, sans-serif",
    ),
}

DEFAULT_TEMPLATE: TemplateKey = "modern"


def get_template(key: str | None) -> ResumeTemplate:
    if not key:
        return TEMPLATES[DEFAULT_TEMPLATE]
    template = TEMPLATES.get(key.strip().lower())
    if template is None:
        raise ValueError(f"Unknown template '{key}'. Available: {', '.join(TEMPLATES)}.")
    return template


def export_filename(candidate_name: str, template_key: str) -> str:
    """File name used when the rendered preview is exported, e.g. John_Smith_modern_Resume.pdf."""
    stem = _FILENAME_UNSAFE_RE.sub("_", candidate_name.strip()).strip("_") or "Candidate"
    return f"{stem}_{template_key}_Resume.pdf"

from .render import DEFAULT_CANDIDATE_NAME, ResumePreview, build_preview, candidate_name, plain_to_html
from .templates import DEFAULT_TEMPLATE, TEMPLATES, ResumeTemplate, export_filename, get_template

__all__ = [
    "DEFAULT_CANDIDATE_NAME",
    "ResumePreview",
    "build_preview",
    "candidate_name",
    "plain_to_html",
    "DEFAULT_TEMPLATE",
    "TEMPLATES",
    "ResumeTemplate",
    "export_filename",
    "get_template",
]

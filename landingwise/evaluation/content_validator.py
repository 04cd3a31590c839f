"""
Heuristic checks for generated landing page HTML.

The checks are plain substring tests. They never parse the document, so
malformed or partial HTML is handled the same way as well-formed HTML:
a missing marker simply fails its check.
"""

from typing import Optional

from landingwise.models import ValidationVerdict

STYLE_FRAMEWORK_MARKERS = ("tailwind", "cdn.tailwindcss.com")


def has_document_structure(html: str) -> bool:
    """Opening and closing root-document markers are both present."""
    return "<html" in html and "</html>" in html


def has_collection_form(html: str) -> bool:
    """A form referencing an email field or a waitlist marker is present."""
    return "form" in html and ("email" in html or "waitlist" in html)


def has_style_framework(html: str) -> bool:
    """The Tailwind utility framework is referenced."""
    return any(marker in html for marker in STYLE_FRAMEWORK_MARKERS)


def validate_content(html: Optional[str]) -> ValidationVerdict:
    """
    Run all structural checks on a candidate HTML string.

    Args:
        html: Candidate document. None and non-string values count as empty.

    Returns:
        ValidationVerdict with one flag per check.
    """
    if not isinstance(html, str):
        html = ""

    return ValidationVerdict(
        has_document_structure=has_document_structure(html),
        has_collection_form=has_collection_form(html),
        has_style_framework=has_style_framework(html),
    )

"""
Parsing of raw LLM replies into HTML documents.
"""

import re

FENCE = "```"
DOCUMENT_MARKERS = ("<!doctype", "<html")
DOCUMENT_END = "</html>"

OPENING_FENCE = re.compile(r"```[A-Za-z0-9_-]*[ \t]*\n?")


class ResponseParser:
    """Parses LLM responses to extract HTML content."""

    @staticmethod
    def extract_html(response_text: str) -> str:
        """
        Extract HTML content from LLM response.

        A code fence is only unwrapped when it opens before the document
        does. Backticks inside a document (code samples on the page) are
        content and are left alone.

        Args:
            response_text: Raw LLM response.

        Returns:
            Extracted HTML content.
        """
        if not response_text:
            return ""

        text = response_text.strip()
        fence_start = text.find(FENCE)
        if fence_start == -1:
            return text

        lowered = text.lower()
        document_starts = [i for i in (lowered.find(m) for m in DOCUMENT_MARKERS) if i != -1]
        if document_starts and min(document_starts) < fence_start:
            return text

        opening = OPENING_FENCE.match(text, fence_start)
        body = text[opening.end():]

        # Close at the first fence after the document end, if there is one
        document_end = body.lower().rfind(DOCUMENT_END)
        search_from = document_end + len(DOCUMENT_END) if document_end != -1 else 0
        closing = body.find(FENCE, search_from)
        if closing != -1:
            body = body[:closing]

        return body.strip()

"""Markdown cleanup applied to raw extraction responses."""

import re

_ESCAPED_NEWLINE = "\\n"
_BOLD_MARKER = "**"
_HEADING_MARKER_RE = re.compile(r"^##\s*", flags=re.MULTILINE)


def clean_pass(text: str) -> str:
    """Apply one cleanup pass: escapes, bold markers, headings, then trim."""
    text = text.replace(_ESCAPED_NEWLINE, "\n")
    text = text.replace(_BOLD_MARKER, "")
    text = _HEADING_MARKER_RE.sub("", text)
    return text.strip()


def clean_report_text(raw: str) -> str:
    """Repeat `clean_pass` until the text is stable.

    A single pass can expose new markers (e.g. `#**#` or `####`), so the
    result is only guaranteed marker-free at the fixed point. Every pass that
    changes the text shortens it, so the loop terminates.
    """
    current = raw
    while True:
        cleaned = clean_pass(current)
        if cleaned == current:
            return cleaned
        current = cleaned

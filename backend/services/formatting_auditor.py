"""Plain-text formatting checks that approximate common ATS parse failures."""

import re

MIN_LENGTH = 500
MAX_LENGTH = 5000
MIN_LINES = 10

TOO_SHORT = "Resume appears too short"
TOO_LONG = "Resume appears too long"
NO_PHONE = "No phone number detected"
NO_EMAIL = "No email address detected"
FEW_LINE_BREAKS = "May have formatting issues - too few line breaks"

PHONE_RE = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b", re.ASCII)
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b", re.ASCII)


def audit_formatting(text: str) -> list[str]:
    """Return formatting defects in a fixed check order.

    Every check runs; an empty list means no defect was found.
    """
    issues = []

    if len(text) < MIN_LENGTH:
        issues.append(TOO_SHORT)
    if len(text) > MAX_LENGTH:
        issues.append(TOO_LONG)
    if not PHONE_RE.search(text):
        issues.append(NO_PHONE)
    if not EMAIL_RE.search(text):
        issues.append(NO_EMAIL)
    if len(text.split("\n")) < MIN_LINES:
        issues.append(FEW_LINE_BREAKS)

    return issues

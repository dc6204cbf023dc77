"""Display labels for commit authors and span operations."""

from typing import Any, Literal, Optional

from readout.i18n import t

LONG_OPERATION_EXACT = {
    "db.redis": "cache query",
    "resource": "resource",
    "resource.script": "JavaScript file",
    "resource.css": "stylesheet",
    "resource.img": "image",
}
# Checked in order; first match wins
LONG_OPERATION_PREFIXES = (
    ("http", "URL request"),
    ("db", "database query"),
    ("task", "application task"),
    ("serialize", "serializer"),
    ("middleware", "middleware"),
)
SHORT_OPERATION_PREFIXES = (
    ("http", "request"),
    ("db", "query"),
    ("task", "task"),
    ("serialize", "serializer"),
    ("middleware", "middleware"),
    ("resource", "resource"),
)
DEFAULT_OPERATION = "span"


def _field(user: Any, name: str) -> Any:
    if user is None:
        return None
    if isinstance(user, dict):
        return user.get(name)
    return getattr(user, name, None)


def user_display_name(user: Any, include_email: bool = True) -> str:
    """Name of a user or commit author, with the email in parentheses.

    user may be a dict or any object with name/email attributes. A missing
    or blank name falls back to 'Unknown author'.
    """
    name = _field(user, "name")
    display_name = str(name if name is not None else t("Unknown author")).strip()
    if not display_name:
        display_name = t("Unknown author")

    email_value = _field(user, "email")
    email = str(email_value if email_value is not None else "").strip()

    if email and email != display_name and include_email:
        display_name += f" ({email})"
    return display_name


def _match_prefix(operation: str, prefixes: tuple[tuple[str, str], ...]) -> Optional[str]:
    for prefix, description in prefixes:
        if operation.startswith(prefix):
            return description
    return None


def format_span_operation(
    operation: Optional[str] = None, length: Literal["short", "long"] = "short"
) -> str:
    """Describe a span operation, e.g. 'db.query' -> 'query' or 'database query'."""
    description = None
    if operation:
        if length == "long":
            # db.redis must win over the db prefix, the resource.* names are exact
            description = LONG_OPERATION_EXACT.get(operation) or _match_prefix(
                operation, LONG_OPERATION_PREFIXES
            )
        else:
            description = _match_prefix(operation, SHORT_OPERATION_PREFIXES)
    return t(description or DEFAULT_OPERATION)

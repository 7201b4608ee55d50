"""Personalization token substitution for bulk mail ({{name}} style)."""

DEFAULT_FALLBACK = "there"


class MailRenderer:
    """Substitutes one named placeholder per call.

    Only the given field is replaced; placeholders for other field names are
    left untouched. Multi-field merging is not supported.
    """

    def __init__(self, fallback: str = DEFAULT_FALLBACK) -> None:
        self.fallback = fallback

    def render(self, template: str, field: str, value: str | None) -> str:
        """Replace every literal {{field}} in template with value (or the fallback when empty)."""
        placeholder = "{{" + field + "}}"
        return template.replace(placeholder, value or self.fallback)

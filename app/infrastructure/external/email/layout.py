"""HTML layout for outgoing mail (Jinja). Wraps a personalized plain-text body."""

from __future__ import annotations

from jinja2 import Environment, Template

_DEFAULT_LAYOUT = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ subject }}</title>
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px; background-color: #f8f9fa;">
<div style="background-color: #ffffff; border-radius: 8px; padding: 40px;">
<div style="text-align: center; margin-bottom: 30px; padding-bottom: 20px; border-bottom: 2px solid #e9ecef;">
<h1 style="margin: 0; color: #333;">{{ subject }}</h1>
</div>
<div>
{% for paragraph in paragraphs %}<p>{{ paragraph | replace('\\n', '<br>' | safe) }}</p>
{% endfor %}</div>
<div style="text-align: center; margin-top: 30px; padding-top: 20px; border-top: 1px solid #e9ecef; color: #6c757d; font-size: 14px;">
<p>Best regards,<br>{{ signature }}</p>
</div>
</div>
</body>
</html>
"""


class EmailLayoutRenderer:
    """Renders the HTML alternative of a message. Message text is HTML-escaped."""

    def __init__(self, layout: str | None = None, signature: str = "The TQRS Team") -> None:
        self._env = Environment(autoescape=True)
        self._template: Template = self._env.from_string(layout or _DEFAULT_LAYOUT)
        self.signature = signature

    @staticmethod
    def _paragraphs(body: str) -> list[str]:
        blocks = body.replace("\r\n", "\n").split("\n\n")
        return [block.strip("\n") for block in blocks if block.strip()]

    def render(self, subject: str, body: str) -> str:
        """Return the HTML document for subject and plain-text body."""
        return self._template.render(
            subject=subject,
            paragraphs=self._paragraphs(body),
            signature=self.signature,
        )

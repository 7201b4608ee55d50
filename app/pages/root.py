"""Root landing page for the TQRS CMS API with the public endpoints listed."""

from html import escape

_ENDPOINTS = (
    ("GET", "/api/v1/search?q=...", "Search blogs, webinars and apps"),
    ("GET", "/api/v1/search/suggestions?q=...", "Title suggestions"),
    ("POST", "/api/v1/apps/{app_id}/signup", "Early-access signup"),
    ("POST", "/api/v1/apps/{app_id}/notify-early-access", "Notify approved signups (staff)"),
)


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    rows = "\n".join(
        f"<tr><td><code>{method}</code></td><td><code>{escape(path)}</code></td>"
        f"<td>{escape(label)}</td></tr>"
        for method, path, label in _ENDPOINTS
    )
    name = escape(app_name)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
</head>
<body>
    <main>
        <h1>{name}</h1>
        <p>Content API for the research portal. Routes live under <code>/api/v1</code>.</p>
        <table>
            {rows}
        </table>
        <p>Run locally with <code>uvicorn app.main:app --reload</code> after copying
        <code>.env.example</code> to <code>.env</code> and setting DATABASE_URL and SECRET_KEY.</p>
        <p><a href="/docs">API docs (Swagger)</a> · <a href="/redoc">ReDoc</a></p>
    </main>
</body>
</html>
""".strip()

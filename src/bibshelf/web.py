"""FastAPI + Tailwind delivery for the bibliography.

Run with:
    uvicorn bibshelf.web:app --reload
"""
from __future__ import annotations

from html import escape
from typing import List, Optional

from fastapi import Depends, FastAPI, Header, Query
from fastapi.responses import HTMLResponse, JSONResponse, Response

from .app import BibliographyApp
from .config import Settings
from .formatter import format_author, format_review
from .merge import project_for_site
from .models import SiteItem

app = FastAPI(title="Bibshelf", description="Personal bibliography with per-site notes")


def get_bibliography_app() -> BibliographyApp:
    return BibliographyApp(Settings.from_env())


def _layout(content: str) -> str:
    """Wrap provided content in a Tailwind-powered HTML page."""

    return f"""
    <!doctype html>
    <html lang=\"en\" class=\"h-full bg-gray-50\">
    <head>
        <meta charset=\"utf-8\" />
        <title>Bibliography</title>
        <link href=\"https://cdn.jsdelivr.net/npm/tailwindcss@3.4.4/dist/tailwind.min.css\" rel=\"stylesheet\" />
    </head>
    <body class=\"min-h-full py-10\">
        <div class=\"max-w-5xl mx-auto px-4\">
            <div class=\"bg-white shadow rounded-lg p-6\">
                <h1 class=\"text-3xl font-semibold text-gray-900\">Bibliography</h1>
                {content}
            </div>
        </div>
    </body>
    </html>
    """


def _render_item(item: SiteItem) -> str:
    record = item.record
    details: List[str] = []
    if record.year:
        details.append(str(record.year))
    for value in (record.series, record.publisher):
        if value:
            details.append(escape(value))
    if record.isbn:
        details.append(f"ISBN {escape(record.isbn)}")

    title = escape(record.title)
    if record.url:
        title = f"<a class=\"text-indigo-700 hover:underline\" href=\"{escape(record.url)}\">{title}</a>"

    info_block = ""
    info = item.custom_info
    if info is not None:
        tags = "".join(
            f"<span class=\"inline-block bg-gray-100 text-gray-700 text-xs rounded px-2 py-1 mr-1\">{escape(tag)}</span>"
            for tag in info.tags or ()
        )
        reviews = "".join(
            f"<p class=\"text-gray-700 text-sm mt-1\">{escape(paragraph)}</p>"
            for paragraph in format_review(info)
        )
        read = (
            f"<p class=\"text-gray-500 text-xs mt-1\">Read {escape(info.read_date)}</p>"
            if info.read_date
            else ""
        )
        info_block = f"<div class=\"mt-2\">{tags}{reviews}{read}</div>"

    return f"""
    <li class=\"border-b border-gray-200 py-4\" id=\"{escape(record.key)}\">
        <h2 class=\"text-lg font-semibold text-gray-800\">{title}</h2>
        <p class=\"text-gray-600 text-sm\">{escape(format_author(record.author))}</p>
        <p class=\"text-gray-500 text-sm\">{' / '.join(details)}</p>
        {info_block}
    </li>
    """


def render_page(items: List[SiteItem]) -> str:
    if not items:
        return _layout("<p class=\"text-gray-600 mt-4\">No entries yet.</p>")
    entries = "".join(_render_item(item) for item in items)
    return _layout(f"<ul class=\"mt-6\">{entries}</ul>")


@app.get("/", response_class=HTMLResponse)
async def home(bib_app: BibliographyApp = Depends(get_bibliography_app)) -> HTMLResponse:
    """Render every record with the default site's public notes."""

    site_id = bib_app.settings.default_site_id
    items = [project_for_site(item, site_id) for item in bib_app.load_items()]
    return HTMLResponse(render_page(items))


@app.get("/health")
async def health(bib_app: BibliographyApp = Depends(get_bibliography_app)) -> dict:
    return {"status": "ok", "items": len(bib_app.load_items())}


@app.get("/api/bibliography")
async def bibliography(
    site_id: Optional[str] = Query(None, alias="siteId"),
    if_none_match: Optional[str] = Header(None),
    bib_app: BibliographyApp = Depends(get_bibliography_app),
) -> Response:
    """Return entries with metadata for ``siteId``, memo excluded."""

    result = bib_app.query(site_id, if_none_match=if_none_match)
    if result.status == 304:
        return Response(status_code=304, headers=result.headers)
    if isinstance(result.body, str):
        return Response(
            content=result.body,
            status_code=result.status,
            media_type="application/json",
            headers=result.headers,
        )
    return JSONResponse(result.body, status_code=result.status, headers=result.headers)


def main() -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    uvicorn.run("bibshelf.web:app", host="0.0.0.0", port=8000, reload=False)


__all__ = ["app", "main", "render_page"]

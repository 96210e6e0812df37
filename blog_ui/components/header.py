from dash import html

from blog_ui.constants import SITE_NAME, SITE_TAGLINE
from blog_ui.pages.ids import ShellIds as IDS


def page_header(title: str = SITE_NAME, tagline: str = SITE_TAGLINE) -> html.Header:
    """Static page header shown above the page content."""
    return html.Header([
        html.H1(title, className="h3 mb-1"),
        html.P(tagline, className="text-muted mb-0"),
    ], id=IDS.PAGE_HEADER, className="page-header border-bottom px-4 py-3")

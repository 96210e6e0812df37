import logging

from dash import callback, dcc, html, Input, Output
import dash_bootstrap_components as dbc

from blog_ui.components.layout import page_layout
from blog_ui.components.navigation import nav_bar
from blog_ui.constants import DEFAULT_ROUTES, SITE_NAME
from blog_ui.content.post_schema import (
    POSTS_URL_PREFIX,
    filename_from_path,
    title_from_filename,
)
from blog_ui.pages.ids import ShellIds as IDS
from blog_ui.state.sidebar_state import SidebarState
from blog_ui.utils.style_utils import DEFAULT_DIMENSIONS, SidebarDimensions

logger = logging.getLogger(__name__)


def layout(routes=None, dimensions: SidebarDimensions = DEFAULT_DIMENSIONS):
    """
    Build the page shell.

    Called on every page load, so the sidebar store starts EXPANDED on each
    fresh mount. The dimensions are written to the page so the sidebar
    callbacks render with the same sizes and breakpoint.
    """
    return html.Div([
        dcc.Location(id=IDS.URL, refresh=False),
        page_layout(
            nav_bar(DEFAULT_ROUTES if routes is None else routes, SidebarState.EXPANDED, dimensions),
            content=html.Div(id=IDS.PAGE_CONTENT),
            dimensions=dimensions,
        ),
    ])


def home_content():
    return dbc.Card(
        dbc.CardBody([
            html.H4(f"Welcome to {SITE_NAME}", className="card-title"),
            html.P("Pick a section from the navigation to get started.", className="card-text"),
            dcc.Link("Read the blog", href=POSTS_URL_PREFIX, className="btn btn-primary"),
        ]),
        className="shadow-sm",
    )


def posts_index_content():
    return html.Div([
        html.H4("Blog Posts"),
        html.P("Posts are managed in the CMS and listed here once published.",
               className="text-muted"),
    ])


def post_content(filename):
    return html.Article([
        html.H2(title_from_filename(filename)),
        html.P(f"{POSTS_URL_PREFIX}/{filename}", className="text-muted small"),
    ], className="post")


def not_found_content(pathname):
    return dbc.Alert(f"Nothing here yet: {pathname}", color="warning")


@callback(
    Output(IDS.PAGE_CONTENT, "children"),
    Input(IDS.URL, "pathname")
)
def render_page_content(pathname):
    """Pick the page content for the current path."""
    if pathname in (None, "", "/"):
        return home_content()

    if pathname.rstrip("/") == POSTS_URL_PREFIX:
        return posts_index_content()

    filename = filename_from_path(pathname)
    if filename is not None:
        return post_content(filename)

    logger.info("No page for path %s", pathname)
    return not_found_content(pathname)

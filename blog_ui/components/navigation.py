"""
Navigation Sidebar Components

The sidebar is assembled from three pieces:

- ``nav_item``: one route entry, icon plus label
- ``nav_header``: the branding block and the collapse toggle
- ``nav_bar``: the state owner composing the header and one item per route

The SidebarState is kept in a memory ``dcc.Store`` inside the nav bar and is
handed to the header and items read-only. The toggle control only raises a
click; the callbacks in ``blog_ui.callback.sidebar_callbacks`` flip the
stored state and re-render the readers.
"""

import logging

from dash import dcc, html

from blog_ui.constants import DEFAULT_ROUTES, SITE_NAME
from blog_ui.pages.ids import ShellIds as IDS
from blog_ui.state.sidebar_state import (
    LayoutMode,
    Route,
    SidebarState,
    normalize_route,
    normalize_routes,
)
from blog_ui.utils.style_utils import (
    DEFAULT_DIMENSIONS,
    SidebarDimensions,
    nav_bar_class,
    nav_bar_style,
    nav_header_class,
    nav_header_style,
    nav_item_label_class,
    resolve_sidebar_style,
    toggle_icon_style,
)

logger = logging.getLogger(__name__)


def nav_item(route, index: int, state: SidebarState = SidebarState.EXPANDED,
             dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> dcc.Link:
    """
    Create one navigation entry.

    Icon and label are always part of the markup; only the label's display
    classes depend on the state, and only for the wide layout.

    Args:
        route: Route or route mapping; malformed entries use fallbacks
        index: Position of the route, used in the pattern-matching ids
        state: Current sidebar state
        dimensions: Size configuration

    Returns:
        dcc.Link: The navigation entry
    """
    if not isinstance(route, Route):
        route = normalize_route(route)

    icon_slot = html.Span(
        html.I(className=route.icon) if route.icon else None,
        className="nav-item-icon d-inline-flex justify-content-center",
        style={"width": "1.5rem"},
    )
    label = html.Span(
        route.label,
        id={'type': IDS.NAV_ITEM_LABEL, 'index': index},
        className=nav_item_label_class(state, dimensions),
    )
    return dcc.Link(
        [icon_slot, label],
        id={'type': IDS.NAV_ITEM, 'index': index},
        href=route.href,
        title=route.label,
        className="nav-item-link d-flex align-items-center gap-3 px-3 py-2 text-white text-decoration-none",
    )


def nav_brand(state: SidebarState, dimensions: SidebarDimensions = DEFAULT_DIMENSIONS):
    """Branding block, or None when the sidebar is minimized."""
    if not resolve_sidebar_style(state, LayoutMode.WIDE, dimensions).brand_mounted:
        return None
    return html.Div([
        html.I(className="fas fa-feather-pointed me-2"),
        html.Span(SITE_NAME, className="fw-bold text-nowrap"),
    ], id=IDS.NAV_BRAND, className="nav-brand d-flex align-items-center")


def nav_header(state: SidebarState = SidebarState.EXPANDED,
               dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> html.Div:
    """
    Create the sidebar header with the branding block and toggle control.

    The branding slot is emptied, not hidden, when minimized. The header
    keeps a fixed height so the toggle stays where it is.
    """
    return html.Div([
        html.Div(nav_brand(state, dimensions), id=IDS.NAV_BRAND_SLOT,
                 className="nav-brand-slot overflow-hidden"),
        html.Button(
            html.I(className="fas fa-chevron-left", id=IDS.SIDEBAR_TOGGLE_ICON,
                   style=toggle_icon_style(state, dimensions)),
            id=IDS.SIDEBAR_TOGGLE,
            n_clicks=0,
            title="Collapse or expand the sidebar",
            className="sidebar-toggle btn btn-sm btn-outline-light ms-auto",
            **{"aria-label": "Toggle sidebar"},
        ),
    ], id=IDS.NAV_HEADER, className=nav_header_class(state, dimensions),
       style=nav_header_style(state, dimensions))


def nav_bar(routes=None, state: SidebarState = SidebarState.EXPANDED,
            dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> html.Nav:
    """
    Create the navigation sidebar.

    Args:
        routes: Ordered route configuration, DEFAULT_ROUTES when None
        state: State to render with, EXPANDED on a fresh mount
        dimensions: Size configuration

    Returns:
        html.Nav: The sidebar, including the stores holding its state and sizes
    """
    routes = normalize_routes(DEFAULT_ROUTES if routes is None else routes)
    logger.debug("Building nav bar with %d routes (%s)", len(routes), state.value)

    items = [nav_item(route, index, state, dimensions) for index, route in enumerate(routes)]
    return html.Nav([
        dcc.Store(id=IDS.SIDEBAR_STATE, data=state.value, storage_type='memory'),
        dcc.Store(id=IDS.SIDEBAR_DIMENSIONS, data=dimensions.to_store(), storage_type='memory'),
        nav_header(state, dimensions),
        html.Div(
            items,
            id=IDS.NAV_ITEMS,
            className=f"nav-items d-flex flex-row flex-{dimensions.breakpoint}-column "
                      f"justify-content-around justify-content-{dimensions.breakpoint}-start py-2",
        ),
    ], id=IDS.NAV_BAR, className=nav_bar_class(state, dimensions), style=nav_bar_style(state, dimensions))

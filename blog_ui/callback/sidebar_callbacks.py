import logging

from dash import callback, Input, Output, State, ALL
from dash.exceptions import PreventUpdate

from blog_ui.components.navigation import nav_brand
from blog_ui.pages.ids import ShellIds as IDS
from blog_ui.state.sidebar_state import SidebarState
from blog_ui.utils.style_utils import (
    SidebarDimensions,
    nav_bar_class,
    nav_bar_style,
    nav_item_label_class,
    toggle_icon_style,
)

logger = logging.getLogger(__name__)


# Callback for sidebar collapse/expand toggle
@callback(
    Output(IDS.SIDEBAR_STATE, "data"),  # Stores the state
    Input(IDS.SIDEBAR_TOGGLE, "n_clicks"),  # Toggle button clicks
    State(IDS.SIDEBAR_STATE, "data"),  # Current state
    prevent_initial_call=True
)
def toggle_sidebar(n_clicks, stored_state):
    """Flip the sidebar between expanded and minimized.

    Args:
        n_clicks: Number of clicks on the toggle button
        stored_state: Current state value kept in the store

    Returns:
        str: The new state value
    """
    if not n_clicks:
        raise PreventUpdate

    new_state = SidebarState.from_store(stored_state).toggle()
    logger.debug("Sidebar toggled to %s", new_state.value)
    return new_state.value


# Re-render every reader of the sidebar state
@callback(
    Output(IDS.NAV_BAR, "style"),
    Output(IDS.NAV_BAR, "className"),
    Output(IDS.NAV_BRAND_SLOT, "children"),
    Output(IDS.SIDEBAR_TOGGLE_ICON, "style"),
    Output({'type': IDS.NAV_ITEM_LABEL, 'index': ALL}, "className"),
    Input(IDS.SIDEBAR_STATE, "data"),
    State({'type': IDS.NAV_ITEM_LABEL, 'index': ALL}, "id"),
    State(IDS.SIDEBAR_DIMENSIONS, "data"),
)
def render_sidebar_state(stored_state, label_ids, stored_dimensions=None):
    """Apply the stored state to the nav bar, header and item labels.

    Sizes and breakpoint come from the dimensions store written by the nav
    bar, so a re-render keeps the configuration the page was built with.

    Returns:
        tuple: (nav_style, nav_class, brand_children, toggle_icon_style, label_classes)
    """
    state = SidebarState.from_store(stored_state)
    dimensions = SidebarDimensions.from_store(stored_dimensions)
    label_class = nav_item_label_class(state, dimensions)
    return (
        nav_bar_style(state, dimensions),
        nav_bar_class(state, dimensions),
        nav_brand(state, dimensions),
        toggle_icon_style(state, dimensions),
        [label_class for _ in (label_ids or [])],
    )

"""
Responsive page frame.

Markup order is always navigation then content. On narrow viewports the
frame is a reversed column, which puts the navigation at the bottom; from
the wide breakpoint on it is a row with the navigation first. The
navigation region never shrinks and both regions scroll on their own.
"""

from dash import html

from blog_ui.components.header import page_header
from blog_ui.pages.ids import ShellIds as IDS
from blog_ui.state.sidebar_state import LayoutMode
from blog_ui.utils.style_utils import DEFAULT_DIMENSIONS, SidebarDimensions, shell_class, visual_order

# Region names in wide-viewport screen order
REGIONS = ("navigation", "content")


def page_layout(navigation, content=None, header=None,
                dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> html.Div:
    """
    Arrange the navigation and content regions.

    Args:
        navigation: The nav bar component
        content: Arbitrary page content placed under the header
        header: Header component, the static page header when None
        dimensions: Size configuration, for the breakpoint

    Returns:
        html.Div: The page frame
    """
    if header is None:
        header = page_header()

    regions = {
        "navigation": html.Div(navigation, id=IDS.NAV_REGION,
                               className="shell-nav flex-shrink-0 overflow-auto"),
        "content": html.Main([
            header,
            html.Div(content, className="shell-body px-4 py-3"),
        ], id=IDS.CONTENT_REGION, className="shell-content flex-grow-1 overflow-auto"),
    }
    # The wide row is not reversed, so its screen order is the markup order
    markup = visual_order(LayoutMode.WIDE, REGIONS)
    return html.Div([regions[name] for name in markup], id=IDS.APP_SHELL, className=shell_class(dimensions))

"""
State management modules for the blog site shell.

The only interactive state is the sidebar's expanded/minimized flag.
"""

from blog_ui.state.sidebar_state import (
    LayoutMode,
    Route,
    SidebarConfigError,
    SidebarState,
    normalize_route,
    normalize_routes,
)

__all__ = [
    'LayoutMode',
    'Route',
    'SidebarConfigError',
    'SidebarState',
    'normalize_route',
    'normalize_routes',
]

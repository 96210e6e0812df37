"""
Utilities package for the blog site shell.

This package contains the style resolution helpers used by the navigation
components and their callbacks.
"""

from blog_ui.utils.style_utils import (
    SidebarDimensions,
    SidebarStyle,
    resolve_sidebar_style,
)

__all__ = [
    'SidebarDimensions',
    'SidebarStyle',
    'resolve_sidebar_style',
]

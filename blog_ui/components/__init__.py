"""
Presentational components of the blog site shell.
"""

from blog_ui.components.header import page_header
from blog_ui.components.layout import page_layout
from blog_ui.components.navigation import nav_bar, nav_header, nav_item

__all__ = [
    'nav_bar',
    'nav_header',
    'nav_item',
    'page_header',
    'page_layout',
]

"""
Shared constants for the blog site shell.

This module contains centralized constants used across the application
to avoid duplication and ensure consistency.
"""

SITE_NAME = "Field Notes"
SITE_TAGLINE = "Stories, guides and release notes"

# Navigation entries shown in the sidebar, in display order
DEFAULT_ROUTES = [
    {"label": "Home", "icon": "fas fa-house", "href": "/"},
    {"label": "Blog", "icon": "fas fa-newspaper", "href": "/posts"},
    {"label": "Projects", "icon": "fas fa-folder-open", "href": "/projects"},
    {"label": "About", "icon": "fas fa-user", "href": "/about"},
    {"label": "Contact", "icon": "fas fa-envelope", "href": "/contact"},
]

# Fallbacks for malformed route entries
FALLBACK_ROUTE_LABEL = "Untitled"
FALLBACK_ROUTE_ICON = ""
FALLBACK_ROUTE_HREF = "#"

# Sidebar widths are animation endpoints and must be explicit lengths
SIDEBAR_EXPANDED_WIDTH = "240px"
SIDEBAR_MINIMIZED_WIDTH = "80px"
SIDEBAR_HEADER_HEIGHT = "64px"
SIDEBAR_TRANSITION_MS = 200

# Bootstrap breakpoint at which the side-by-side arrangement starts
WIDE_BREAKPOINT = "md"

"""
Sidebar State Module

This module holds the state model of the navigation sidebar: the two-valued
SidebarState owned by the nav bar, the two layout modes the shell is
rendered in, and the Route records the hosting application configures.

The state itself lives in a memory ``dcc.Store`` on the page, so it is
reset to EXPANDED on every fresh mount and is never persisted.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from collections.abc import Mapping
from typing import Any, Iterable, List

from blog_ui.constants import (
    FALLBACK_ROUTE_HREF,
    FALLBACK_ROUTE_ICON,
    FALLBACK_ROUTE_LABEL,
)

logger = logging.getLogger(__name__)

# Lengths the CSS engine can interpolate between without measuring content
_LENGTH_LITERAL = re.compile(r"^\d+(\.\d+)?(px|rem|em)$")

BREAKPOINTS = ("sm", "md", "lg", "xl", "xxl")


class SidebarConfigError(ValueError):
    """Raised when the sidebar is configured with unusable values."""
    pass


class SidebarState(Enum):
    EXPANDED = "expanded"
    MINIMIZED = "minimized"

    def toggle(self) -> "SidebarState":
        """Return the opposite state."""
        if self is SidebarState.EXPANDED:
            return SidebarState.MINIMIZED
        return SidebarState.EXPANDED

    @property
    def is_minimized(self) -> bool:
        return self is SidebarState.MINIMIZED

    @classmethod
    def from_store(cls, value: Any) -> "SidebarState":
        """
        Read the state back from the value kept in the sidebar store.

        Args:
            value: Stored value, normally one of the enum values

        Returns:
            SidebarState: The parsed state, EXPANDED for anything unreadable
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.warning("Unreadable sidebar state %r, using expanded", value)
            return cls.EXPANDED


class LayoutMode(Enum):
    """Viewport classes the shell switches between."""

    NARROW = "narrow"
    WIDE = "wide"


@dataclass(frozen=True)
class Route:
    label: str
    icon: str
    href: str = FALLBACK_ROUTE_HREF


def validate_length_literal(value: Any, name: str = "length") -> str:
    """
    Check that a size used as an animation endpoint is an explicit length.

    Automatic sizes (``auto``, ``fit-content``, percentages, ...) cannot be
    interpolated by the browser, so the width transition would jump instead
    of animating.

    Args:
        value: The configured size
        name: Setting name used in the error message

    Returns:
        str: The validated literal

    Raises:
        SidebarConfigError: If the value is not a px/rem/em literal
    """
    if not isinstance(value, str) or not _LENGTH_LITERAL.match(value.strip()):
        raise SidebarConfigError(
            f"{name} must be an explicit length such as '240px', got {value!r}"
        )
    return value.strip()


def validate_breakpoint(value: Any) -> str:
    if value not in BREAKPOINTS:
        raise SidebarConfigError(
            f"Breakpoint must be one of {', '.join(BREAKPOINTS)}, got {value!r}"
        )
    return value


def _text_or_fallback(entry: Mapping, key: str, fallback: str) -> str:
    value = entry.get(key)
    if value is None or not isinstance(value, str) or not value.strip():
        return fallback
    return value.strip()


def normalize_route(entry: Any) -> Route:
    """
    Build a Route from one configuration entry.

    A malformed entry never raises: missing or blank fields are replaced by
    the fallback label, an empty icon slot and a dead link.

    Args:
        entry: A Route, a mapping with label/icon/href keys, or anything else

    Returns:
        Route: The normalized route
    """
    if isinstance(entry, Route):
        entry = {"label": entry.label, "icon": entry.icon, "href": entry.href}
    if not isinstance(entry, Mapping):
        logger.warning("Ignoring malformed route entry %r", entry)
        return Route(FALLBACK_ROUTE_LABEL, FALLBACK_ROUTE_ICON, FALLBACK_ROUTE_HREF)

    route = Route(
        label=_text_or_fallback(entry, "label", FALLBACK_ROUTE_LABEL),
        icon=_text_or_fallback(entry, "icon", FALLBACK_ROUTE_ICON),
        href=_text_or_fallback(entry, "href", FALLBACK_ROUTE_HREF),
    )
    if route.label == FALLBACK_ROUTE_LABEL and entry.get("label") != FALLBACK_ROUTE_LABEL:
        logger.warning("Route entry %r has no label, using %r", dict(entry), FALLBACK_ROUTE_LABEL)
    if not route.icon:
        logger.warning("Route entry %r has no icon, leaving the icon slot empty", dict(entry))
    return route


def normalize_routes(entries: Iterable[Any]) -> List[Route]:
    """Normalize a route sequence, keeping its order."""
    if entries is None:
        return []
    return [normalize_route(entry) for entry in entries]

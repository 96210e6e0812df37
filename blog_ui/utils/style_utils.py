"""
Style resolution for the responsive sidebar.

The sidebar is rendered under two independent rule sets, one per layout
mode. ``resolve_sidebar_style`` maps a SidebarState and a LayoutMode to a
SidebarStyle record; the class names and inline styles placed in the
component tree are composed from the NARROW and WIDE records so that a
rule of one mode never leaks into the other.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Optional, Sequence, Tuple

from blog_ui.constants import (
    SIDEBAR_EXPANDED_WIDTH,
    SIDEBAR_HEADER_HEIGHT,
    SIDEBAR_MINIMIZED_WIDTH,
    SIDEBAR_TRANSITION_MS,
    WIDE_BREAKPOINT,
)
from blog_ui.state.sidebar_state import (
    LayoutMode,
    SidebarConfigError,
    SidebarState,
    validate_breakpoint,
    validate_length_literal,
)


@dataclass(frozen=True)
class SidebarStyle:
    """Presentation of the sidebar for one state in one layout mode."""

    width: Optional[str]
    label_visible: bool
    header_visible: bool
    brand_mounted: bool
    toggle_rotation: int
    header_height: Optional[str]


@dataclass(frozen=True)
class SidebarDimensions:
    expanded_width: str = SIDEBAR_EXPANDED_WIDTH
    minimized_width: str = SIDEBAR_MINIMIZED_WIDTH
    header_height: str = SIDEBAR_HEADER_HEIGHT
    transition_ms: int = SIDEBAR_TRANSITION_MS
    breakpoint: str = WIDE_BREAKPOINT

    def __post_init__(self):
        validate_length_literal(self.expanded_width, "expanded_width")
        validate_length_literal(self.minimized_width, "minimized_width")
        validate_length_literal(self.header_height, "header_height")
        validate_breakpoint(self.breakpoint)
        if isinstance(self.transition_ms, bool) or not isinstance(self.transition_ms, int) \
                or self.transition_ms < 0:
            raise SidebarConfigError(
                f"transition_ms must be a non-negative integer, got {self.transition_ms!r}"
            )

    def to_store(self) -> Dict[str, object]:
        return asdict(self)

    @classmethod
    def from_store(cls, data) -> "SidebarDimensions":
        """Rebuild the dimensions kept in the page store, defaults when empty."""
        if not data:
            return DEFAULT_DIMENSIONS
        return cls(**data)


DEFAULT_DIMENSIONS = SidebarDimensions()

# The bottom bar on narrow viewports ignores the sidebar state entirely. The
# header, toggle included, is hidden there so a toggle can never change it.
_NARROW_STYLE = SidebarStyle(
    width=None,
    label_visible=True,
    header_visible=False,
    brand_mounted=False,
    toggle_rotation=0,
    header_height=None,
)


def resolve_sidebar_style(state: SidebarState, mode: LayoutMode,
                          dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> SidebarStyle:
    """
    Resolve how the sidebar looks for a state in a layout mode.

    Args:
        state: Current sidebar state
        mode: Layout mode the rules apply to
        dimensions: Validated size configuration

    Returns:
        SidebarStyle: The presentation record
    """
    if mode is LayoutMode.NARROW:
        return _NARROW_STYLE

    minimized = state.is_minimized
    return SidebarStyle(
        width=dimensions.minimized_width if minimized else dimensions.expanded_width,
        label_visible=not minimized,
        header_visible=True,
        brand_mounted=not minimized,
        toggle_rotation=180 if minimized else 0,
        header_height=dimensions.header_height,
    )


def _display_classes(narrow_visible: bool, wide_visible: bool, shown: str,
                     breakpoint: str) -> str:
    narrow = f"d-{shown}" if narrow_visible else "d-none"
    wide = f"d-{breakpoint}-{shown}" if wide_visible else f"d-{breakpoint}-none"
    return f"{narrow} {wide}"


def nav_item_label_class(state: SidebarState,
                         dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> str:
    """Class names of a nav item label, one display rule per layout mode."""
    narrow = resolve_sidebar_style(state, LayoutMode.NARROW, dimensions)
    wide = resolve_sidebar_style(state, LayoutMode.WIDE, dimensions)
    display = _display_classes(narrow.label_visible, wide.label_visible, "inline",
                               dimensions.breakpoint)
    return f"nav-item-label text-nowrap {display}"


def nav_header_class(state: SidebarState,
                     dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> str:
    narrow = resolve_sidebar_style(state, LayoutMode.NARROW, dimensions)
    wide = resolve_sidebar_style(state, LayoutMode.WIDE, dimensions)
    display = _display_classes(narrow.header_visible, wide.header_visible, "flex",
                               dimensions.breakpoint)
    return f"nav-header align-items-center justify-content-between px-3 border-bottom {display}"


def nav_header_style(state: SidebarState,
                     dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> Dict[str, str]:
    # Same height in both states so the toggle control never moves
    wide = resolve_sidebar_style(state, LayoutMode.WIDE, dimensions)
    return {"height": wide.header_height, "minHeight": wide.header_height}


def nav_bar_style(state: SidebarState,
                  dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> Dict[str, str]:
    """
    Inline style of the nav bar.

    The width is handed to the stylesheet as a custom property which only
    applies inside the wide media query, so the narrow bottom bar keeps its
    full width whatever the state.
    """
    wide = resolve_sidebar_style(state, LayoutMode.WIDE, dimensions)
    return {
        "--sidebar-width": wide.width,
        "--sidebar-transition": f"{dimensions.transition_ms}ms",
    }


def nav_bar_class(state: SidebarState,
                  dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> str:
    # sidebar-wide-<bp> selects the media block that applies --sidebar-width
    return (f"sidebar sidebar-wide-{dimensions.breakpoint} sidebar-{state.value} "
            "d-flex flex-column bg-dark text-white")


def toggle_icon_style(state: SidebarState,
                      dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> Dict[str, str]:
    wide = resolve_sidebar_style(state, LayoutMode.WIDE, dimensions)
    return {
        "transform": f"rotate({wide.toggle_rotation}deg)",
        "transition": f"transform {dimensions.transition_ms}ms ease-in-out",
    }


# ===== Shell arrangement =====

@dataclass(frozen=True)
class FlowRule:
    direction: str
    reversed: bool


SHELL_FLOW = {
    LayoutMode.NARROW: FlowRule(direction="column", reversed=True),
    LayoutMode.WIDE: FlowRule(direction="row", reversed=False),
}


def _flex_direction(rule: FlowRule) -> str:
    return f"{rule.direction}-reverse" if rule.reversed else rule.direction


def shell_class(dimensions: SidebarDimensions = DEFAULT_DIMENSIONS) -> str:
    """Class names of the outer frame, narrow rule first, wide rule scoped."""
    narrow = _flex_direction(SHELL_FLOW[LayoutMode.NARROW])
    wide = _flex_direction(SHELL_FLOW[LayoutMode.WIDE])
    return f"app-shell d-flex flex-{narrow} flex-{dimensions.breakpoint}-{wide} vh-100"


def visual_order(mode: LayoutMode, dom_order: Sequence[str]) -> Tuple[str, ...]:
    """
    Order in which regions appear on screen for a layout mode.

    Args:
        mode: Layout mode
        dom_order: Region names in markup order

    Returns:
        tuple: Region names in on-screen order
    """
    if SHELL_FLOW[mode].reversed:
        return tuple(reversed(dom_order))
    return tuple(dom_order)

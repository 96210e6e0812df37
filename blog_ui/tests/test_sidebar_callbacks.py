"""
Tests for the sidebar callbacks.

Callback functions are called directly; Dash returns the undecorated
function from ``callback`` so no server is needed.
"""

import unittest

from dash.exceptions import PreventUpdate

from blog_ui.callback.sidebar_callbacks import render_sidebar_state, toggle_sidebar
from blog_ui.components.navigation import nav_bar
from blog_ui.pages.ids import ShellIds as IDS
from blog_ui.state.sidebar_state import SidebarState
from blog_ui.tests.utils import find_all_by_type, find_by_id, walk
from blog_ui.utils.style_utils import SidebarDimensions

ROUTES = [
    {"label": "Home", "icon": "fas fa-house", "href": "/"},
    {"label": "Blog", "icon": "fas fa-newspaper", "href": "/posts"},
]


def describe(component):
    return [(type(c).__name__, getattr(c, "className", None), getattr(c, "children", None)
             if isinstance(getattr(c, "children", None), str) else None)
            for c in walk(component)]


def label_ids(count):
    return [{'type': IDS.NAV_ITEM_LABEL, 'index': index} for index in range(count)]


class TestToggleSidebar(unittest.TestCase):

    def test_no_click_does_not_update(self):
        with self.assertRaises(PreventUpdate):
            toggle_sidebar(0, "expanded")
        with self.assertRaises(PreventUpdate):
            toggle_sidebar(None, "expanded")

    def test_one_toggle_minimizes(self):
        self.assertEqual(toggle_sidebar(1, "expanded"), "minimized")

    def test_two_toggles_restore_initial_state(self):
        state = toggle_sidebar(1, SidebarState.EXPANDED.value)
        state = toggle_sidebar(2, state)
        self.assertEqual(state, SidebarState.EXPANDED.value)

    def test_unreadable_store_toggles_from_expanded(self):
        with self.assertLogs("blog_ui.state.sidebar_state", level="WARNING"):
            self.assertEqual(toggle_sidebar(1, None), "minimized")


class TestRenderSidebarState(unittest.TestCase):

    def assert_matches_fresh_render(self, state):
        nav = nav_bar(ROUTES, state)
        style, class_name, brand, icon_style, label_classes = render_sidebar_state(
            state.value, label_ids(len(ROUTES))
        )

        self.assertEqual(style, nav.style)
        self.assertEqual(class_name, nav.className)
        self.assertEqual(icon_style, find_by_id(nav, IDS.SIDEBAR_TOGGLE_ICON).style)
        self.assertEqual(label_classes,
                         [label.className for label in find_all_by_type(nav, IDS.NAV_ITEM_LABEL)])
        return brand

    def test_expanded(self):
        brand = self.assert_matches_fresh_render(SidebarState.EXPANDED)
        self.assertIsNotNone(brand)
        self.assertEqual(brand.id, IDS.NAV_BRAND)

    def test_minimized(self):
        brand = self.assert_matches_fresh_render(SidebarState.MINIMIZED)
        self.assertIsNone(brand)

    def test_round_trip_matches_initial_render(self):
        initial = render_sidebar_state("expanded", label_ids(2))
        state = toggle_sidebar(1, "expanded")
        state = toggle_sidebar(2, state)
        final = render_sidebar_state(state, label_ids(2))

        self.assertEqual(initial[0], final[0])
        self.assertEqual(initial[1], final[1])
        self.assertEqual(initial[3], final[3])
        self.assertEqual(initial[4], final[4])
        self.assertEqual(describe(initial[2]), describe(final[2]))

    def test_one_class_per_label(self):
        for count in (0, 1, 5):
            label_classes = render_sidebar_state("minimized", label_ids(count))[4]
            self.assertEqual(len(label_classes), count)

    def test_missing_label_ids(self):
        self.assertEqual(render_sidebar_state("expanded", None)[4], [])

    def test_custom_dimensions_survive_rerender(self):
        dimensions = SidebarDimensions("18rem", "4rem", breakpoint="lg")
        for state in SidebarState:
            nav = nav_bar(ROUTES, state, dimensions)
            stored_dimensions = find_by_id(nav, IDS.SIDEBAR_DIMENSIONS).data
            style, class_name, _, icon_style, label_classes = render_sidebar_state(
                state.value, label_ids(len(ROUTES)), stored_dimensions
            )

            self.assertEqual(style, nav.style)
            self.assertEqual(class_name, nav.className)
            self.assertEqual(icon_style, find_by_id(nav, IDS.SIDEBAR_TOGGLE_ICON).style)
            self.assertEqual(label_classes,
                             [label.className for label in find_all_by_type(nav, IDS.NAV_ITEM_LABEL)])

        minimized = render_sidebar_state("minimized", label_ids(1),
                                         dimensions.to_store())
        self.assertEqual(minimized[0]["--sidebar-width"], "4rem")
        self.assertIn("d-lg-none", minimized[4][0].split())
        self.assertIn("sidebar-wide-lg", minimized[1].split())

    def test_empty_dimensions_store_uses_defaults(self):
        style = render_sidebar_state("expanded", label_ids(1), None)[0]
        self.assertEqual(style["--sidebar-width"], "240px")


if __name__ == '__main__':
    unittest.main()

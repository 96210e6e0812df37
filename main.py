import logging
import os
from functools import partial

from blog_ui.app import app, server
from blog_ui.constants import WIDE_BREAKPOINT
from blog_ui.pages.home_layout import layout
from blog_ui.utils.style_utils import SidebarDimensions

# Import callbacks to register them with Dash
from blog_ui.callback import sidebar_callbacks

logging.basicConfig(
    level=logging.DEBUG if os.environ.get("BLOG_UI_DEBUG") == "1" else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app.layout = partial(
    layout,
    dimensions=SidebarDimensions(breakpoint=os.environ.get("BLOG_UI_BREAKPOINT", WIDE_BREAKPOINT)),
)

if __name__ == '__main__':
    # Run the server
    app.run(
        debug=os.environ.get("BLOG_UI_DEBUG") == "1",
        host=os.environ.get("BLOG_UI_HOST", "127.0.0.1"),
        port=int(os.environ.get("BLOG_UI_PORT", "8050")),
    )

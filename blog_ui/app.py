import dash
import dash_bootstrap_components as dbc

from blog_ui.constants import SITE_NAME

app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP, dbc.icons.FONT_AWESOME],
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    suppress_callback_exceptions=True,
    title=SITE_NAME,
)
server = app.server

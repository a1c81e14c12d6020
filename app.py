"""
app.py
──────
Thermographic Report Renderer — Application Entry Point.

Startup sequence:
  1. Configure logging from LOG_LEVEL
  2. Create Dash app with the BOOTSTRAP theme (printable, light)
  3. Register the report routing callback
  4. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from thermoreport.layout.main import create_layout

# ── 1. Logging ────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("thermoreport")

# ── 2. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="Relatório de Termografia",
)

server = app.server  # gunicorn entry point
app.layout = create_layout()

# ── 3. Register callbacks ─────────────────────────────────────────────────────
from thermoreport.callbacks import navigation

navigation.register(app)

if settings.DEMO_MODE:
    logger.info("DEMO_MODE enabled: reports are served from the bundled sample payload")
logger.info("Report API: %s (locale %s)", settings.API_BASE_URL, settings.LOCALE)

# ── 4. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )

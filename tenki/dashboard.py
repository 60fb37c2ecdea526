"""Weather widget dashboard — FastAPI backend serving one session + the page."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse

from tenki.config.defaults import CITY_CATALOG
from tenki.config.schema import AppConfig
from tenki.ingest.factory import build_provider
from tenki.ingest.providers import WeatherProvider
from tenki.presentation.formatters import state_to_dict
from tenki.session.controller import FetchController

WIDGET_HTML = Path(__file__).parent / "static" / "widget.html"


def create_app(
    config: AppConfig | None = None,
    provider: WeatherProvider | None = None,
) -> FastAPI:
    """Build the app around a single FetchController (one session).

    Raises ConfigError if the configured provider cannot be built.
    """
    config = config or AppConfig()
    if provider is None:
        provider = build_provider(config)
    controller = FetchController.from_config(config, provider)

    app = FastAPI(title="天気予報アプリ", version="0.1.0")
    app.state.controller = controller

    def _state() -> dict:
        return state_to_dict(controller.state, controller.auto_fetch)

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/cities")
    def get_cities():
        """The fixed city catalog, in display order."""
        return [
            {"id": c.id, "display_name": c.display_name, "query_name": c.query_name}
            for c in CITY_CATALOG
        ]

    @app.get("/api/state")
    def get_state():
        return _state()

    @app.get("/api/health")
    def get_health():
        return {
            "ok": True,
            "provider": config.provider.kind.value,
            "auto_fetch": controller.auto_fetch,
        }

    # ── Session actions ─────────────────────────────────────────────

    @app.post("/api/select/{city_id}")
    async def select_city(city_id: str):
        """Select a city; in auto-fetch mode waits for the dispatched fetch."""
        task = controller.select_city(city_id)
        if task is not None:
            await task
        if controller.state.selected_city_id != city_id:
            return JSONResponse(status_code=404, content=_state())
        return _state()

    @app.post("/api/fetch")
    async def fetch_weather():
        await controller.fetch_weather()
        return _state()

    # ── Serve widget ────────────────────────────────────────────────

    @app.get("/")
    def serve_widget():
        if WIDGET_HTML.exists():
            return FileResponse(WIDGET_HTML, media_type="text/html")
        return HTMLResponse("<h1>Widget not found</h1>", status_code=404)

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="127.0.0.1", port=8777)

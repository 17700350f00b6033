"""Weather proxy API — FastAPI app exposing CWA forecasts by city name."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cwaproxy.config.loader import load_config
from cwaproxy.config.schema import ProxyConfig
from cwaproxy.handler import ForecastRequestHandler
from cwaproxy.models.errors import ForecastError


def create_app(
    config: ProxyConfig | None = None,
    handler: ForecastRequestHandler | None = None,
) -> FastAPI:
    if config is None:
        config = handler.config if handler is not None else load_config()
    if handler is None:
        handler = ForecastRequestHandler(config)

    app = FastAPI(title="CWA Weather Proxy", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.handler = handler

    @app.exception_handler(ForecastError)
    async def forecast_error(request: Request, exc: ForecastError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    # ── Weather endpoints ───────────────────────────────────────

    @app.get("/weather")
    def get_default_weather():
        """Forecast for the configured default city."""
        return {"success": True, "data": handler.handle_default().to_dict()}

    @app.get("/weather/cities")
    def get_cities():
        """Supported city tokens and their CWA location names."""
        return {"success": True, "data": handler.supported_cities()}

    @app.get("/weather/{city}")
    def get_weather(city: str):
        return {"success": True, "data": handler.handle(city).to_dict()}

    # ── Health ──────────────────────────────────────────────────

    @app.get("/api/health")
    def get_health():
        return {
            "status": "ok",
            "api_key_configured": bool(handler.config.cwa.api_key),
        }

    return app


if __name__ == "__main__":
    import uvicorn

    cfg = load_config()
    uvicorn.run(create_app(cfg), host=cfg.server.host, port=cfg.server.port)

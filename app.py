from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings, load_settings
from server import build_server, configure_logging
from tools import REGISTRY


def utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def create_app(settings: Optional[Settings] = None, transport=None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    # -----------------------------
    # MCP over HTTP
    # -----------------------------
    mcp = build_server(settings, transport=transport)
    mcp_app = mcp.http_app(path="/mcp")

    app = FastAPI(title=settings.service_name, version=settings.version, lifespan=mcp_app.lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {
            "ok": True,
            "message": "Volkern MCP gateway alive",
            "service": settings.service_name,
            "version": settings.version,
            "ts": utc_iso(),
            "api_url": settings.api_url,
            "tools": len(REGISTRY),
            "mcp": "/mcp",
        }

    @app.get("/health")
    def health():
        return {"ok": True, "ts": utc_iso(), "service": settings.service_name, "version": settings.version}

    @app.get("/tools")
    def list_tools():
        return {"tools": REGISTRY.list_specs()}

    app.mount("/", mcp_app)
    return app


app = create_app()

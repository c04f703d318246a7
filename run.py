"""Entry point for serving the Site Admin API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8000``).  Other configuration is
described in ``site_admin_api/app/core/config.py`` and may be placed in
a ``.env.local`` or ``.env`` file next to this script.

Usage:
    python run.py
"""
import asyncio
import os

from uvicorn import Config, Server

from site_admin_api.app.main import app


async def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

"""Webhook server command."""

import cyclopts
import logfire
import uvicorn

from pkgsearch.cli.console import get_console
from pkgsearch.config import Config

app = cyclopts.App(name="server", help="Run the interaction webhook server")


@app.default
def serve(
    host: str = "0.0.0.0",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """Serve the interaction endpoint in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart on code changes (development only).
    """
    console = get_console()
    config = Config()

    # Must run before the app module is imported
    logfire.configure(
        service_name="pkgsearch",
        service_version=config.server.version,
        send_to_logfire="if-token-present",
        console=False,
    )

    if not config.discord.public_key:
        console.warning("PKGSEARCH_DISCORD__PUBLIC_KEY is not set; signatures will not be verified")
    console.success(f"Serving on http://{host}:{port}/api/v1/interactions")

    uvicorn.run(
        "pkgsearch.application.api.rest.app:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )

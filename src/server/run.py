"""CLI entry point for launching the FastAPI app with uvicorn."""

import uvicorn

from .dependencies import config


def main() -> None:
    """Run the development server."""
    uvicorn.run(
        "src.server.app:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.reload,
        reload_dirs=["src"] if config.server.reload else None,
    )


if __name__ == "__main__":
    main()

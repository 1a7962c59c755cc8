"""Console entry point: serve the app with uvicorn."""

from __future__ import annotations

import uvicorn

from dynaswitch.api.app import create_app
from dynaswitch.core.config import AppSettings


def main() -> None:
    settings = AppSettings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

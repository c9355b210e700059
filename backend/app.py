from pathlib import Path

from fastapi import FastAPI

from backend.routes import router
from lodging_watch import config
from lodging_watch.console import Console
from lodging_watch.session import Credentials
from lodging_watch.storage import Storage


def create_app(
    data_dir: Path | None = None,
    credentials: Credentials | None = None,
) -> FastAPI:
    resolved = data_dir or config.data_dir()
    console = Console(
        Storage(resolved),
        credentials=credentials or config.credentials(),
        agency_name=config.agency_name(),
    )

    app = FastAPI(title="Lodging Watch")
    app.state.console = console
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (uses DATA_DIR env var or default)
app = create_app()

from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env before anything reads settings from the environment.
_repo_root = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_repo_root / ".env", override=False)

from raster_editor.core.config import get_settings
from raster_editor.core.logger import setup_logger

from raster_editor.api import edit

logger = setup_logger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("Starting raster-editor...")
    logger.info(
        f"Settings: resample={settings.resample}, max_upload_pixels={settings.max_upload_pixels}, "
        f"output_format={settings.output_format}"
    )

    yield

    logger.info("Shutting down...")

app = FastAPI(
    title="Raster Editor",
    version="0.1.0",
    lifespan=lifespan
)

app.include_router(edit.router, prefix="/api/v1")

@app.get("/health")
async def health_check():
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("raster_editor.main:app", host="0.0.0.0", port=8000)

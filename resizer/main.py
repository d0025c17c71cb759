from __future__ import annotations

from fastapi import FastAPI

from resizer.handlers import image_handler
from resizer.utils.log_setup import configure_logging

configure_logging()

app = FastAPI(title="Story Image Resizer")


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


# Catch-all image route goes last so it does not shadow /healthz
app.include_router(image_handler.router)

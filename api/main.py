"""FastAPI application for the work-hour sync tool."""

from __future__ import annotations

from fastapi import FastAPI

from api.routes import router

app = FastAPI(
    title="Work-hour Sync API",
    description="Required-hours baselines and clock entry previews.",
    version="1.0.0",
)

app.include_router(router)


@app.get("/")
async def root():
    return {
        "name": "Work-hour Sync API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }

"""FastAPI application entry point."""

import ddtrace.auto  # noqa: F401
from fastapi import FastAPI

from file_directory.routes import files_router

app = FastAPI(title="File Directory Service")
app.include_router(files_router)

# api/main.py
"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.reports import router as reports_router
from hr_insights import __version__

# Create FastAPI application
app = FastAPI(
    title="HR Insights API",
    description="""
Read-only REST API over the HR dashboard reports.

## Features

### Reports
- List the report catalogue with sections and row ordering
- Build any report by its stable name from the current employee snapshot
- Every response carries the number of malformed records left out of the snapshot
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify allowed origins
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(reports_router)


@app.get("/", tags=["Health"])
def root():
    """API health check endpoint."""
    return {
        "status": "healthy",
        "message": "HR Insights API is running",
        "docs": "/docs"
    }


@app.get("/health", tags=["Health"])
def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "version": __version__,
        "endpoints": {
            "reports": "/reports",
            "snapshot": "/reports/snapshot",
            "docs": "/docs",
            "redoc": "/redoc"
        }
    }

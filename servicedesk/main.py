"""
ServiceDesk - Category API

Entry point for the FastAPI application.
Logging is configured by create_app() via logging_config.
"""
from servicedesk.core import create_app

# Create FastAPI application
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "servicedesk.main:app",
        host="0.0.0.0",
        port=8080,
        reload=True
    )

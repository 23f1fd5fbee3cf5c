"""
API module - FastAPI routers, endpoint definitions and dependencies.

Usage:
    from copilot.api.routes import api_router
    app.include_router(api_router, prefix="/api")
"""

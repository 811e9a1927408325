"""
API module - FastAPI routers, endpoint definitions and dependency providers.

Usage:
    from app.api.routes import api_router
    app.include_router(api_router)
"""

"""API module - FastAPI application, routers and request dependencies."""

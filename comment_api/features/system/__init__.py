from .routes import system_router

__all__ = ["system_router"]

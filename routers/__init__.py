from .convert import router as convert_router

__all__ = ["convert_router"]

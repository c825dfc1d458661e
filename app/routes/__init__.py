from app.routes.blog import router as blog_router
from app.routes.category import router as category_router

__all__ = ["blog_router", "category_router"]

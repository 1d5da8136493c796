from orders.api.routes import order_router

__all__ = ["order_router"]

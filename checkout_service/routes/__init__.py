from .core_routes import core
from .checkout_routes import checkout_bp

__all__ = ["core", "checkout_bp"]

from .core_routes import core
from .charge_routes import charges_bp
from .admin_routes import admin_bp

__all__ = ["core", "charges_bp", "admin_bp"]

# mycontext/db/__init__.py
"""
InstantDB admin access.
"""
from .instant import InstantAdminDB, init_admin_db, is_instant_configured, new_id

__all__ = ["InstantAdminDB", "init_admin_db", "is_instant_configured", "new_id"]

from adapters.web.admin import create_admin_app

__all__ = ["create_admin_app"]

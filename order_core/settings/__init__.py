# Settings package
from order_core.settings.app_settings import AppSettings, get_app_settings

__all__ = ["AppSettings", "get_app_settings"]

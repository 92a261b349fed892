from .app import create_app
from .form import render_form
from .browser import LaunchStrategy, detect_strategy, open_url

__all__ = ["create_app", "render_form", "LaunchStrategy", "detect_strategy", "open_url"]

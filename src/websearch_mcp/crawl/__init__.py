from .fetcher import Fetcher
from .models import Page

__all__ = ["Fetcher", "Page"]

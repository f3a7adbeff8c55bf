"""Domain models."""

from slideshow.domain.slide import Slide
from slideshow.domain.slide_store import SlideStore

__all__ = ["Slide", "SlideStore"]

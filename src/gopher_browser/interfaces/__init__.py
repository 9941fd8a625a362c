"""Abstract interfaces for the Gopher client."""

from .resource_fetcher import ResourceFetcher
from .terminal import Frame, Segment, Style, Terminal

__all__ = ["Frame", "ResourceFetcher", "Segment", "Style", "Terminal"]

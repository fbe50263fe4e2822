"""HTTP fetchers for retrieving highlight exports from remote locations."""
from .remote import BookcisionFetcher, is_remote

__all__ = ["BookcisionFetcher", "is_remote"]

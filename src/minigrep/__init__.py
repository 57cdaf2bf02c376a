"""minigrep - print the lines of a file that contain a query string."""

from minigrep.search import Searcher, search, search_case_insensitive

__all__ = ["Searcher", "search", "search_case_insensitive"]
__version__ = "0.1.0"

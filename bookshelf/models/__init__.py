from bookshelf.models.book import Book
from bookshelf.models.page import Page

__all__ = ["Book", "Page"]

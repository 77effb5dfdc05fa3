from bookshelf.logger import get_logger
from bookshelf.models.book import Book
from bookshelf.repositories.book_repository import BookRepository
from bookshelf.repositories.page_repository import PageRepository
from bookshelf.services.transaction import store_operation


logger = get_logger(__name__)


class BookService:
    def __init__(self, book_repository=None, page_repository=None):
        self.book_repository = book_repository or BookRepository()
        self.page_repository = page_repository or PageRepository()

    def list_books(self):
        with store_operation("list_books"):
            return self.book_repository.get_all()

    def create_book(self, name):
        with store_operation("create_book"):
            book = self.book_repository.add(name)
        logger.debug("Book created", book_id=book.id)
        return book

    def update_book(self, book_id, name):
        """Replace the book's name.

        An unknown id updates nothing and is not an error; the returned book
        always echoes the requested values.
        """
        with store_operation("update_book", book_id=book_id):
            updated = self.book_repository.update(book_id, name)
        logger.debug("Book updated", book_id=book_id, rows=updated)
        return Book(id=book_id, name=name)

    def delete_book(self, book_id):
        """Delete a book together with all of its pages in one transaction."""
        with store_operation("delete_book", book_id=book_id):
            pages = self.page_repository.delete_for_book(book_id)
            books = self.book_repository.delete(book_id)
        logger.debug("Book deleted", book_id=book_id, rows=books, pages=pages)

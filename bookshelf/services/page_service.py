from bookshelf.logger import get_logger
from bookshelf.models.page import Page
from bookshelf.repositories.page_repository import PageRepository
from bookshelf.services.transaction import store_operation


logger = get_logger(__name__)


class PageService:
    def __init__(self, page_repository=None):
        self.page_repository = page_repository or PageRepository()

    def list_pages(self, book_id=None):
        with store_operation("list_pages", book_id=book_id):
            return self.page_repository.get_all(book_id=book_id)

    def create_page(self, book_id, name, number, content):
        with store_operation("create_page", book_id=book_id):
            page = self.page_repository.add(book_id, name, number, content)
        logger.debug("Page created", page_id=page.id, book_id=book_id)
        return page

    def update_page(self, page_id, book_id, name, number, content):
        # book_id is echoed back but a page never moves to another book.
        with store_operation("update_page", page_id=page_id):
            updated = self.page_repository.update(page_id, name, number, content)
        logger.debug("Page updated", page_id=page_id, rows=updated)
        return Page(id=page_id, book_id=book_id, name=name, number=number, content=content)

    def delete_page(self, page_id):
        with store_operation("delete_page", page_id=page_id):
            deleted = self.page_repository.delete(page_id)
        logger.debug("Page deleted", page_id=page_id, rows=deleted)

from bookshelf import db
from bookshelf.models.page import Page


class PageRepository:
    def get_all(self, book_id=None):
        query = Page.query
        if book_id is not None:
            query = query.filter_by(book_id=book_id)
        return query.order_by(Page.number.asc(), Page.id.asc()).all()

    def add(self, book_id, name, number, content):
        page = Page(book_id=book_id, name=name, number=number, content=content)
        db.session.add(page)
        db.session.flush()
        return page

    def update(self, page_id, name, number, content):
        return Page.query.filter_by(id=page_id).update(
            {Page.name: name, Page.number: number, Page.content: content}
        )

    def delete(self, page_id):
        return Page.query.filter_by(id=page_id).delete()

    def delete_for_book(self, book_id):
        return Page.query.filter_by(book_id=book_id).delete()

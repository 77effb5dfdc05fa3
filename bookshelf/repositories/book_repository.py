from bookshelf import db
from bookshelf.models.book import Book


class BookRepository:
    def get_all(self):
        return Book.query.order_by(Book.id.asc()).all()

    def get_by_id(self, book_id):
        return db.session.get(Book, book_id)

    def add(self, name):
        book = Book(name=name)
        db.session.add(book)
        db.session.flush()
        return book

    def update(self, book_id, name):
        return Book.query.filter_by(id=book_id).update({Book.name: name})

    def delete(self, book_id):
        return Book.query.filter_by(id=book_id).delete()

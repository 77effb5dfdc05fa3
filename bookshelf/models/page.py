from bookshelf import db


class Page(db.Model):
    __tablename__ = "pages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    # Plain integer, not a foreign key: pages go away with their book through
    # BookService.delete_book only.
    book_id = db.Column(db.Integer, nullable=False)
    name = db.Column(db.Text, nullable=False, default="", server_default="")
    number = db.Column(db.Integer, nullable=True)
    content = db.Column(db.Text, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "bookId": self.book_id,
            "name": self.name,
            "number": self.number,
            "content": self.content,
        }

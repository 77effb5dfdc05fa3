from bookshelf import db


class Book(db.Model):
    __tablename__ = "books"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)

    def to_dict(self):
        return {"id": self.id, "name": self.name}

from flask import jsonify

from bookshelf.blueprints import book_service
from bookshelf.blueprints.books import books_bp
from bookshelf.blueprints.parsing import json_body, parse_id, reject_method, str_field


@books_bp.route("", methods=["GET"])
def list_books():
    books = book_service().list_books()
    return jsonify([b.to_dict() for b in books]), 200


@books_bp.route("", methods=["POST"])
def create_book():
    data = json_body()
    book = book_service().create_book(str_field(data, "name"))
    return jsonify(book.to_dict()), 200


@books_bp.route("/<id_segment:raw_id>", methods=["PUT"])
def update_book(raw_id):
    book_id = parse_id(raw_id)
    data = json_body()
    book = book_service().update_book(book_id, str_field(data, "name"))
    return jsonify(book.to_dict()), 200


@books_bp.route("/<id_segment:raw_id>", methods=["DELETE"])
def delete_book(raw_id):
    book_id = parse_id(raw_id)
    book_service().delete_book(book_id)
    return "", 200


@books_bp.route("/<id_segment:raw_id>", methods=["GET", "POST", "PATCH"])
def book_item_other(raw_id):
    reject_method(raw_id, ["PUT", "DELETE"])

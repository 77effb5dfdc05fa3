from flask import jsonify, request

from bookshelf.blueprints import page_service
from bookshelf.blueprints.pages import pages_bp
from bookshelf.blueprints.parsing import (
    int_field,
    json_body,
    parse_id,
    reject_method,
    str_field,
)


def _page_fields(data):
    return {
        "book_id": int_field(data, "bookId"),
        "name": str_field(data, "name"),
        "number": int_field(data, "number"),
        "content": str_field(data, "content"),
    }


@pages_bp.route("", methods=["GET"])
def list_pages():
    raw_book_id = request.args.get("bookId", "")
    book_id = parse_id(raw_book_id, label="bookId") if raw_book_id else None
    pages = page_service().list_pages(book_id=book_id)
    return jsonify([p.to_dict() for p in pages]), 200


@pages_bp.route("", methods=["POST"])
def create_page():
    fields = _page_fields(json_body())
    page = page_service().create_page(**fields)
    return jsonify(page.to_dict()), 200


@pages_bp.route("/<id_segment:raw_id>", methods=["PUT"])
def update_page(raw_id):
    page_id = parse_id(raw_id)
    fields = _page_fields(json_body())
    page = page_service().update_page(page_id, **fields)
    return jsonify(page.to_dict()), 200


@pages_bp.route("/<id_segment:raw_id>", methods=["DELETE"])
def delete_page(raw_id):
    page_id = parse_id(raw_id)
    page_service().delete_page(page_id)
    return "", 200


@pages_bp.route("/<id_segment:raw_id>", methods=["GET", "POST", "PATCH"])
def page_item_other(raw_id):
    reject_method(raw_id, ["PUT", "DELETE"])

from flask import current_app


def book_service():
    return current_app.extensions["book_service"]


def page_service():
    return current_app.extensions["page_service"]

# bookcase/sa/repositories/book.py
from typing import Optional, List
from sqlalchemy.orm import Session
from ..models import Book

class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by primary key"""
        return self.session.get(Book, book_id)

    def list_books(self) -> List[Book]:
        """All books, ordered by title"""
        return self.session.query(Book).order_by(Book.title, Book.id).all()

    def search_books(self, title: str) -> List[Book]:
        """Books whose title contains the given text, ignoring case"""
        return (
            self.session.query(Book)
            .filter(Book.title.icontains(title, autoescape=True))
            .order_by(Book.title, Book.id)
            .all()
        )

    def get_books_by_author(self, author_id: int) -> List[Book]:
        """All books written by an author, ordered by title"""
        return (
            self.session.query(Book)
            .filter(Book.author_id == author_id)
            .order_by(Book.title, Book.id)
            .all()
        )

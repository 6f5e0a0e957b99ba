# api/routes/books.py

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from bookcase.sa import models
from bookcase.services import BookService
from api.dependencies import get_db
from api.schemas.book import Book, BookCreate, BookList

router = APIRouter(prefix="/books", tags=["books"])

@router.get("", response_model=BookList)
def get_books(db: Session = Depends(get_db)):
    """All books, ordered by title"""
    return BookService(db).find_all()

@router.get("/title/{title}", response_model=BookList)
def get_books_by_title(title: str, db: Session = Depends(get_db)):
    """Books whose title contains the given text (case-insensitive)"""
    return BookService(db).find_by_title(title)

@router.get("/author/{author_id}", response_model=BookList)
def get_books_by_author(author_id: int, db: Session = Depends(get_db)):
    return BookService(db).find_by_author_id(author_id)

@router.get("/{book_id}", response_model=Book)
def get_book(book_id: int, db: Session = Depends(get_db)):
    return BookService(db).find(book_id)

@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(book: BookCreate, request: Request, response: Response, db: Session = Depends(get_db)):
    created = BookService(db).insert(book.to_model(models.Book))
    response.headers["Location"] = str(request.url_for("get_book", book_id=created.id))
    return created

@router.put("/{book_id}", response_model=Book)
def update_book(book_id: int, book: BookCreate, db: Session = Depends(get_db)):
    return BookService(db).update(book_id, book.to_model(models.Book))

@router.delete("/{book_id}", response_model=Book)
def delete_book(book_id: int, db: Session = Depends(get_db)):
    """Delete a book and its anthology and series memberships"""
    return BookService(db).delete(book_id)

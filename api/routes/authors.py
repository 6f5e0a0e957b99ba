# api/routes/authors.py

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from bookcase.sa import models
from bookcase.services import AuthorService
from api.dependencies import get_db
from api.schemas.author import Author, AuthorCreate, AuthorList

router = APIRouter(prefix="/authors", tags=["authors"])

@router.get("", response_model=AuthorList)
def get_authors(db: Session = Depends(get_db)):
    """All authors, ordered by last name then first name"""
    return AuthorService(db).find_all()

@router.get("/name/{name}", response_model=AuthorList)
def get_authors_by_name(name: str, db: Session = Depends(get_db)):
    """
    Search authors by name.

    "fred flint" matches authors whose first name contains "fred" or whose
    last name contains "flint"; a single word is matched against both.
    """
    return AuthorService(db).find_by_name(name)

@router.get("/{author_id}", response_model=Author)
def get_author(author_id: int, db: Session = Depends(get_db)):
    return AuthorService(db).find(author_id)

@router.post("", response_model=Author, status_code=status.HTTP_201_CREATED)
def create_author(author: AuthorCreate, request: Request, response: Response, db: Session = Depends(get_db)):
    created = AuthorService(db).insert(author.to_model(models.Author))
    response.headers["Location"] = str(request.url_for("get_author", author_id=created.id))
    return created

@router.put("/{author_id}", response_model=Author)
def update_author(author_id: int, author: AuthorCreate, db: Session = Depends(get_db)):
    return AuthorService(db).update(author_id, author.to_model(models.Author))

@router.delete("/{author_id}", response_model=Author)
def delete_author(author_id: int, db: Session = Depends(get_db)):
    """Delete an author along with their books, anthologies and series"""
    return AuthorService(db).delete(author_id)

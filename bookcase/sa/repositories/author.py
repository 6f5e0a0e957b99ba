# bookcase/sa/repositories/author.py
from typing import Optional, List
from sqlalchemy import or_
from sqlalchemy.orm import Session
from ..models import Author

class AuthorRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, author_id: int) -> Optional[Author]:
        """Get an author by primary key"""
        return self.session.get(Author, author_id)

    def get_by_name(self, first_name: str, last_name: str) -> Optional[Author]:
        """Get the author with exactly this name pair"""
        return self.session.query(Author).filter(
            Author.first_name == first_name,
            Author.last_name == last_name
        ).first()

    def list_authors(self) -> List[Author]:
        """All authors, ordered by last name then first name"""
        return self.session.query(Author).order_by(
            Author.last_name, Author.first_name
        ).all()

    def search_authors(self, name: str) -> List[Author]:
        """Search authors by name

        A name with a space inside it ("fred flint") is split into a first
        and last name segment; otherwise both segments are the whole name.
        Matches authors whose first name contains the first segment OR whose
        last name contains the last segment, ignoring case.
        """
        first_name = last_name = name
        index = name.find(" ")
        if 0 < index < len(name) - 1:
            first_name = name[:index].strip()
            last_name = name[index + 1:].strip()

        return self.session.query(Author).filter(
            or_(
                Author.first_name.icontains(first_name, autoescape=True),
                Author.last_name.icontains(last_name, autoescape=True)
            )
        ).order_by(
            Author.last_name, Author.first_name
        ).all()

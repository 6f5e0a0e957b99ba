# bookcase/sa/repositories/anthology.py
from typing import Optional, List
from sqlalchemy.orm import Session
from ..models import Anthology

class AnthologyRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, anthology_id: int) -> Optional[Anthology]:
        return self.session.get(Anthology, anthology_id)

    def list_anthologies(self) -> List[Anthology]:
        return self.session.query(Anthology).order_by(Anthology.title, Anthology.id).all()

    def search_anthologies(self, title: str) -> List[Anthology]:
        """Anthologies whose title contains the given text, ignoring case"""
        return (
            self.session.query(Anthology)
            .filter(Anthology.title.icontains(title, autoescape=True))
            .order_by(Anthology.title, Anthology.id)
            .all()
        )

    def get_anthologies_by_author(self, author_id: int) -> List[Anthology]:
        return (
            self.session.query(Anthology)
            .filter(Anthology.author_id == author_id)
            .order_by(Anthology.title, Anthology.id)
            .all()
        )

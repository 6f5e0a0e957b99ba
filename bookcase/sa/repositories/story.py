# bookcase/sa/repositories/story.py
from typing import Optional, List
from sqlalchemy.orm import Session
from ..models import Story

class StoryRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, story_id: int) -> Optional[Story]:
        return self.session.get(Story, story_id)

    def list_stories(self) -> List[Story]:
        """All stories, grouped by anthology and ordered within each"""
        return (
            self.session.query(Story)
            .order_by(Story.anthology_id, Story.ordinal, Story.id)
            .all()
        )

    def get_stories_by_anthology(self, anthology_id: int) -> List[Story]:
        """Contents of an anthology, in order"""
        return (
            self.session.query(Story)
            .filter(Story.anthology_id == anthology_id)
            .order_by(Story.ordinal, Story.id)
            .all()
        )

    def get_stories_by_book(self, book_id: int) -> List[Story]:
        """Every anthology appearance of a book"""
        return (
            self.session.query(Story)
            .filter(Story.book_id == book_id)
            .order_by(Story.anthology_id, Story.ordinal)
            .all()
        )

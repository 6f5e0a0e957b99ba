# bookcase/sa/repositories/series.py
from typing import Optional, List
from sqlalchemy.orm import Session
from ..models import Series, Member

class SeriesRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, series_id: int) -> Optional[Series]:
        """
        Fetch a series by its primary key.
        """
        return self.session.get(Series, series_id)

    def list_series(self) -> List[Series]:
        """
        Get all series, ordered by title.
        """
        return self.session.query(Series).order_by(Series.title, Series.id).all()

    def search_series(self, title: str) -> List[Series]:
        """
        Search for series whose titles match the given query (case-insensitive).
        """
        return (
            self.session.query(Series)
            .filter(Series.title.icontains(title, autoescape=True))
            .order_by(Series.title, Series.id)
            .all()
        )

    def get_series_by_author(self, author_id: int) -> List[Series]:
        """
        Get all series written by an author.
        """
        return (
            self.session.query(Series)
            .filter(Series.author_id == author_id)
            .order_by(Series.title, Series.id)
            .all()
        )


class MemberRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, member_id: int) -> Optional[Member]:
        return self.session.get(Member, member_id)

    def list_members(self) -> List[Member]:
        """
        Get all members, grouped by series and ordered within each series.
        """
        return (
            self.session.query(Member)
            .order_by(Member.series_id, Member.ordinal, Member.id)
            .all()
        )

    def get_members_by_series(self, series_id: int) -> List[Member]:
        """
        Get the books of a series in reading order.
        """
        return (
            self.session.query(Member)
            .filter(Member.series_id == series_id)
            .order_by(Member.ordinal, Member.id)
            .all()
        )

    def get_members_by_book(self, book_id: int) -> List[Member]:
        """
        Get every series membership of a book.
        """
        return (
            self.session.query(Member)
            .filter(Member.book_id == book_id)
            .order_by(Member.series_id, Member.ordinal)
            .all()
        )

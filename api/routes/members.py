# api/routes/members.py

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from bookcase.sa import models
from bookcase.services import MemberService
from api.dependencies import get_db
from api.schemas.series import Member, MemberCreate, MemberList

router = APIRouter(prefix="/members", tags=["members"])

@router.get("", response_model=MemberList)
def get_members(db: Session = Depends(get_db)):
    return MemberService(db).find_all()

@router.get("/series/{series_id}", response_model=MemberList)
def get_members_by_series(series_id: int, db: Session = Depends(get_db)):
    """Books of a series in reading order"""
    return MemberService(db).find_by_series_id(series_id)

@router.get("/book/{book_id}", response_model=MemberList)
def get_members_by_book(book_id: int, db: Session = Depends(get_db)):
    return MemberService(db).find_by_book_id(book_id)

@router.get("/{member_id}", response_model=Member)
def get_member(member_id: int, db: Session = Depends(get_db)):
    return MemberService(db).find(member_id)

@router.post("", response_model=Member, status_code=status.HTTP_201_CREATED)
def create_member(member: MemberCreate, request: Request, response: Response, db: Session = Depends(get_db)):
    created = MemberService(db).insert(member.to_model(models.Member))
    response.headers["Location"] = str(request.url_for("get_member", member_id=created.id))
    return created

@router.put("/{member_id}", response_model=Member)
def update_member(member_id: int, member: MemberCreate, db: Session = Depends(get_db)):
    return MemberService(db).update(member_id, member.to_model(models.Member))

@router.delete("/{member_id}", response_model=Member)
def delete_member(member_id: int, db: Session = Depends(get_db)):
    return MemberService(db).delete(member_id)

# api/routes/stories.py

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from bookcase.sa import models
from bookcase.services import StoryService
from api.dependencies import get_db
from api.schemas.book import Story, StoryCreate, StoryList

router = APIRouter(prefix="/stories", tags=["stories"])

@router.get("", response_model=StoryList)
def get_stories(db: Session = Depends(get_db)):
    return StoryService(db).find_all()

@router.get("/anthology/{anthology_id}", response_model=StoryList)
def get_stories_by_anthology(anthology_id: int, db: Session = Depends(get_db)):
    """Contents of an anthology, in order"""
    return StoryService(db).find_by_anthology_id(anthology_id)

@router.get("/book/{book_id}", response_model=StoryList)
def get_stories_by_book(book_id: int, db: Session = Depends(get_db)):
    return StoryService(db).find_by_book_id(book_id)

@router.get("/{story_id}", response_model=Story)
def get_story(story_id: int, db: Session = Depends(get_db)):
    return StoryService(db).find(story_id)

@router.post("", response_model=Story, status_code=status.HTTP_201_CREATED)
def create_story(story: StoryCreate, request: Request, response: Response, db: Session = Depends(get_db)):
    created = StoryService(db).insert(story.to_model(models.Story))
    response.headers["Location"] = str(request.url_for("get_story", story_id=created.id))
    return created

@router.put("/{story_id}", response_model=Story)
def update_story(story_id: int, story: StoryCreate, db: Session = Depends(get_db)):
    return StoryService(db).update(story_id, story.to_model(models.Story))

@router.delete("/{story_id}", response_model=Story)
def delete_story(story_id: int, db: Session = Depends(get_db)):
    return StoryService(db).delete(story_id)

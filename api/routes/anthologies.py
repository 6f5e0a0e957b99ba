# api/routes/anthologies.py

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from bookcase.sa import models
from bookcase.services import AnthologyService
from api.dependencies import get_db
from api.schemas.book import Anthology, AnthologyCreate, AnthologyList

router = APIRouter(prefix="/anthologies", tags=["anthologies"])

@router.get("", response_model=AnthologyList)
def get_anthologies(db: Session = Depends(get_db)):
    return AnthologyService(db).find_all()

@router.get("/title/{title}", response_model=AnthologyList)
def get_anthologies_by_title(title: str, db: Session = Depends(get_db)):
    return AnthologyService(db).find_by_title(title)

@router.get("/author/{author_id}", response_model=AnthologyList)
def get_anthologies_by_author(author_id: int, db: Session = Depends(get_db)):
    return AnthologyService(db).find_by_author_id(author_id)

@router.get("/{anthology_id}", response_model=Anthology)
def get_anthology(anthology_id: int, db: Session = Depends(get_db)):
    return AnthologyService(db).find(anthology_id)

@router.post("", response_model=Anthology, status_code=status.HTTP_201_CREATED)
def create_anthology(anthology: AnthologyCreate, request: Request, response: Response, db: Session = Depends(get_db)):
    created = AnthologyService(db).insert(anthology.to_model(models.Anthology))
    response.headers["Location"] = str(request.url_for("get_anthology", anthology_id=created.id))
    return created

@router.put("/{anthology_id}", response_model=Anthology)
def update_anthology(anthology_id: int, anthology: AnthologyCreate, db: Session = Depends(get_db)):
    return AnthologyService(db).update(anthology_id, anthology.to_model(models.Anthology))

@router.delete("/{anthology_id}", response_model=Anthology)
def delete_anthology(anthology_id: int, db: Session = Depends(get_db)):
    return AnthologyService(db).delete(anthology_id)

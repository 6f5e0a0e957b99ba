# api/routes/series.py

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from bookcase.sa import models
from bookcase.services import SeriesService
from api.dependencies import get_db
from api.schemas.series import Series, SeriesCreate, SeriesList

router = APIRouter(prefix="/series", tags=["series"])

@router.get("", response_model=SeriesList)
def get_all_series(db: Session = Depends(get_db)):
    return SeriesService(db).find_all()

@router.get("/title/{title}", response_model=SeriesList)
def get_series_by_title(title: str, db: Session = Depends(get_db)):
    return SeriesService(db).find_by_title(title)

@router.get("/author/{author_id}", response_model=SeriesList)
def get_series_by_author(author_id: int, db: Session = Depends(get_db)):
    return SeriesService(db).find_by_author_id(author_id)

@router.get("/{series_id}", response_model=Series)
def get_series(series_id: int, db: Session = Depends(get_db)):
    return SeriesService(db).find(series_id)

@router.post("", response_model=Series, status_code=status.HTTP_201_CREATED)
def create_series(series: SeriesCreate, request: Request, response: Response, db: Session = Depends(get_db)):
    created = SeriesService(db).insert(series.to_model(models.Series))
    response.headers["Location"] = str(request.url_for("get_series", series_id=created.id))
    return created

@router.put("/{series_id}", response_model=Series)
def update_series(series_id: int, series: SeriesCreate, db: Session = Depends(get_db)):
    return SeriesService(db).update(series_id, series.to_model(models.Series))

@router.delete("/{series_id}", response_model=Series)
def delete_series(series_id: int, db: Session = Depends(get_db)):
    """Delete a series and its members"""
    return SeriesService(db).delete(series_id)

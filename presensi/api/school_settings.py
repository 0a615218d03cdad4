from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from presensi.api.deps import get_db
from presensi.crud.school_settings import get_school_settings
from presensi.schemas.school_settings import SchoolSettingsOut

router = APIRouter()


# Read by the check-in form to decide which checks to show
@router.get("/settings", response_model=SchoolSettingsOut)
def read_school_settings(db: Session = Depends(get_db)):
    return get_school_settings(db) or SchoolSettingsOut()

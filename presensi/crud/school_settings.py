# presensi/crud/school_settings.py
from sqlalchemy.orm import Session

from presensi.db.models.school_settings import SchoolSettings

SETTINGS_ID = 1


def get_school_settings(db: Session):
    return db.query(SchoolSettings).filter(SchoolSettings.id == SETTINGS_ID).first()


def update_school_settings(db: Session, data: dict) -> SchoolSettings:
    school_settings = get_school_settings(db)
    if not school_settings:
        school_settings = SchoolSettings(id=SETTINGS_ID)
        db.add(school_settings)

    for field, value in data.items():
        setattr(school_settings, field, value)

    db.commit()
    db.refresh(school_settings)
    return school_settings

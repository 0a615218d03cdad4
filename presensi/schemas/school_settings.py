from pydantic import BaseModel, Field
from typing import Optional


class SchoolSettingsOut(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    radius_meters: Optional[float] = None
    require_location_verification: bool = False
    require_face_verification: bool = False
    require_rfid: bool = False

    class Config:
        from_attributes = True

class SchoolSettingsUpdate(BaseModel):
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    radius_meters: Optional[float] = Field(default=None, gt=0)
    require_location_verification: Optional[bool] = None
    require_face_verification: Optional[bool] = None
    require_rfid: Optional[bool] = None

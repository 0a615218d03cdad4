from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Dict, Literal, Optional

AttendanceStatus = Literal["present", "excused", "sick", "absent"]


class AttendanceBase(BaseModel):
    date: date
    status: AttendanceStatus
    notes: Optional[str] = None
    rfid_code: Optional[str] = None

class CheckInRequest(BaseModel):
    status: AttendanceStatus = "present"
    notes: Optional[str] = None
    rfid_code: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    # Message from the device when the geolocation read itself failed
    location_error: Optional[str] = None
    face_verified: bool = False

class AttendanceOut(AttendanceBase):
    id: int
    user_id: int
    time_in: Optional[datetime] = None
    time_out: Optional[datetime] = None
    device_id: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    face_verified: bool

    class Config:
        from_attributes = True

class LocationCheckRequest(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

class LocationCheckOut(BaseModel):
    status: str
    verified: bool
    distance_m: Optional[int] = None
    radius_m: Optional[float] = None
    message: str

class DailySummary(BaseModel):
    date: date
    today_present: int
    today_absent: int
    total_users: int
    attendance_rate: int
    by_status: Dict[str, int]

from pydantic import BaseModel
from typing import Optional


# Fields are optional on purpose: missing ones are reported as a 400 by name
class DeviceScanIn(BaseModel):
    rfid_code: Optional[str] = None
    device_id: Optional[str] = None
    timestamp: Optional[str] = None

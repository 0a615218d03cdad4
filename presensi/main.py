import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from presensi.api import auth, attendance, devices, faces, admin, admin_stats, school_settings
from presensi.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Presensi API")

# The device and face webhooks are called from anywhere
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(attendance.router, prefix="/api/attendance", tags=["attendance"])
app.include_router(devices.router, prefix="/api", tags=["devices"])
app.include_router(faces.router, prefix="/api", tags=["faces"])
app.include_router(school_settings.router, prefix="/api", tags=["settings"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
app.include_router(admin_stats.router, prefix="/api/admin", tags=["admin"])


@app.get("/health")
def health():
    return {"status": "ok"}

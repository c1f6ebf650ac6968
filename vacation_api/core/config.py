from pydantic import BaseModel
import os

class Settings(BaseModel):
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./vacation.db")
    jwt_secret: str = os.getenv("JWT_SECRET", "dev-secret")
    jwt_expires_min: int = int(os.getenv("JWT_EXPIRES_MIN", "120"))
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "12"))
    cors_origins: list[str] = [
        o.strip()
        for o in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173",
        ).split(",")
        if o.strip()
    ]

settings = Settings()

import logging
import os
import time

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

logger = logging.getLogger(__name__)

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./buckets.db")

def _connect_args(url: str) -> dict:
    # the sqlite driver refuses connections shared across FastAPI's threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}

engine = create_engine(DATABASE_URL, pool_pre_ping=True, connect_args=_connect_args(DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

def wait_for_db(max_attempts: int = 30, sleep_s: float = 1.0) -> None:
    last_exc = None
    for attempt in range(1, max_attempts + 1):
        try:
            with engine.connect() as conn:
                conn.exec_driver_sql("SELECT 1")
            logger.info("Database ready after %d attempt(s)", attempt)
            return
        except Exception as exc:
            last_exc = exc
            logger.warning("Database not ready (attempt %d/%d): %s", attempt, max_attempts, exc)
            time.sleep(sleep_s)
    raise RuntimeError(f"Database not ready after {max_attempts} attempts: {last_exc}")

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from typing import Generator
from dotenv import load_dotenv

load_dotenv()

# sqlite, local, rds
DB_TYPE = os.getenv("DB_TYPE", "sqlite")

def get_database_url():
    """Return the database URL for DB_TYPE"""

    if DB_TYPE == "sqlite":
        return os.getenv("SQLITE_URL", "sqlite:///./inventory.db")

    elif DB_TYPE == "local":
        user = os.getenv("POSTGRES_USER", "postgres")
        password = os.getenv("POSTGRES_PASSWORD", "password")
        host = os.getenv("POSTGRES_HOST", "localhost")
        port = os.getenv("POSTGRES_PORT", "5432")
        db_name = os.getenv("POSTGRES_DB", "inventory_db")
        return f"postgresql://{user}:{password}@{host}:{port}/{db_name}"

    elif DB_TYPE == "rds":
        user = os.getenv("RDS_USER")
        password = os.getenv("RDS_PASSWORD")
        host = os.getenv("RDS_HOST")
        port = os.getenv("RDS_PORT", "5432")
        db_name = os.getenv("RDS_DB")
        return f"postgresql://{user}:{password}@{host}:{port}/{db_name}"

    else:
        raise ValueError(f"Unknown DB_TYPE: {DB_TYPE}")

SQLALCHEMY_DATABASE_URL = get_database_url()

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    pool_pre_ping=True,  # drop dead connections
    echo=False
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def init_db():
    """Create all tables that do not exist yet"""
    from . import models  # noqa: F401  (registers the mappers)
    Base.metadata.create_all(bind=engine)

def get_db() -> Generator:
    """Session dependency for request handlers"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

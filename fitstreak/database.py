from sqlmodel import SQLModel, create_engine, Session
from fitstreak.config import settings

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    connect_args={"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
)

def create_db_and_tables():
    # Register table metadata before creating
    from fitstreak.models import Activity, UserGoals, UserProfile  # noqa: F401

    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session

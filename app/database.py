from sqlmodel import SQLModel, Session, create_engine

from app.core.config import DATABASE_URL, SQL_ECHO

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)  # SQL_ECHO=true imprime las queries

def create_db_and_tables():
    import app.models  # noqa: F401 registra todas las tablas
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session

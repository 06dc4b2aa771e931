from wordbank.db import models  # noqa: F401
from wordbank.db.base import Base
from wordbank.db.session import engine

if __name__ == "__main__":
    print("Creating tables...")
    Base.metadata.create_all(bind=engine)
    print("Tables created.")

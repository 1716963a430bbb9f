from popcornpick.db import engine, Base
from popcornpick import models  # noqa: F401  registers every table on Base

def main():
    """Create every database table"""
    Base.metadata.create_all(bind=engine)
    print("All tables created.")

if __name__ == "__main__":
    main()

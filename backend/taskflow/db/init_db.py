"""
Database initialization script.
"""
from taskflow.core.logging import setup_logging
from taskflow.db.session import init_db

if __name__ == "__main__":
    setup_logging()
    print("Initializing database...")
    init_db()
    print("Database initialized successfully!")

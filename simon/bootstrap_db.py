"""
Create tables if they don't exist.
Called at startup when the DB backend is selected.
"""

from .db import engine, Base
from . import models  # noqa: F401  (registers the tables on Base.metadata)

def create_all():
    Base.metadata.create_all(bind=engine)

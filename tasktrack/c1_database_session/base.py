"""Database base and declarative_base for tasktrack."""

from sqlalchemy.orm import declarative_base

Base = declarative_base()

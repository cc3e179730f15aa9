"""
Reference list models: customers, product types, parts and tests.
All four share the same shape and are referenced by id from projects.
"""

from sqlalchemy import Column, String, BigInteger

from kappaplan.db.base import Base


class ReferenceItemMixin:
    """Columns shared by every reference list table."""

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(BigInteger, nullable=False)


class Customer(ReferenceItemMixin, Base):
    """Customer a project is produced for."""

    __tablename__ = "customers"


class ProductType(ReferenceItemMixin, Base):
    """Product type (vehicle model / series)."""

    __tablename__ = "types"


class Part(ReferenceItemMixin, Base):
    """Part under test."""

    __tablename__ = "parts"


class Test(ReferenceItemMixin, Base):
    """Test procedure applied to a part."""

    __tablename__ = "tests"
    __test__ = False  # keep pytest from collecting the model

#!/usr/bin/env python
# -*- coding: utf-8 -*-
# @Date    : 2026-10-17
# @Author  : King Tire Shop & Auto Services
"""
Models
"""
# ========================================================
# IMPORTS
# ========================================================
import uuid
from datetime import datetime, timezone
from sqlalchemy.orm import declarative_base
from sqlalchemy import Column, Integer, String, DateTime, Text, Numeric


# ========================================================
# GLOBALS
# ========================================================
Base = declarative_base()


# ========================================================
# FUNCTIONS
# ========================================================
def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ========================================================
# CLASSES (MODELS from BASE)
# ========================================================
class Tire(Base):
    """
    Tire Class
    """
    __tablename__ = "tires"

    id = Column(String(36), primary_key=True,
                default=lambda: str(uuid.uuid4()))
    sku = Column(String(100), nullable=False, default="", index=True)
    brand = Column(String(200), nullable=False, default="", index=True)
    model = Column(String(200), nullable=False, default="", index=True)
    size = Column(String(50), nullable=False, default="", index=True)
    ply = Column(String(20), nullable=False, default="")
    price = Column(Numeric(10, 2, asdecimal=True), nullable=False, default=0)
    condition = Column(String(50), nullable=False, default="New")
    quantity = Column(Integer, nullable=False, default=1)
    notes = Column(Text, nullable=False, default="")
    image_path = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow,
                        nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow,
                        nullable=False)

    def as_row(self) -> dict:
        """Column values as a plain dict, timestamps in UTC."""
        row = {c.name: getattr(self, c.name) for c in self.__table__.columns}
        for key in ("created_at", "updated_at"):
            ts = row[key]
            if ts is not None and ts.tzinfo is None:
                row[key] = ts.replace(tzinfo=timezone.utc)
        return row

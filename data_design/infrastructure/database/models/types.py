"""Column types shared by the ORM models."""

from sqlalchemy import DateTime, LargeBinary
from sqlalchemy.dialects import mysql

# 16 raw bytes, not the 36-character canonical text
Identifier = LargeBinary(16).with_variant(mysql.BINARY(16), "mysql")

# Naive UTC with microsecond precision
Timestamp = DateTime(timezone=False).with_variant(mysql.DATETIME(fsp=6), "mysql")

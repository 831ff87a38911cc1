# src/emp_crud/models/emp.py
from __future__ import annotations

from datetime import date, datetime
from sqlalchemy import String, Date, DateTime, Integer, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from src.emp_crud.utils.database import Base
from src.emp_crud.utils.timezone import now_naive


class Emp(Base):
    __tablename__ = "emp"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(10), nullable=False)
    gender: Mapped[int] = mapped_column(SmallInteger, nullable=False)   # 1 male, 2 female
    image: Mapped[str | None] = mapped_column(String(300), nullable=True)
    job: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
    entrydate: Mapped[date | None] = mapped_column(Date, nullable=True)
    dept_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    create_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=now_naive)
    update_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=now_naive)

    def __repr__(self) -> str:
        return f"<Emp {self.id} {self.username}>"

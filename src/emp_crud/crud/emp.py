# src/emp_crud/crud/emp.py
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update, delete, inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from src.emp_crud.models.emp import Emp
from src.emp_crud.utils.timezone import now_naive

logger = logging.getLogger(__name__)

# columns a partial update may touch; id and create_time are immutable
UPDATABLE_FIELDS = ("username", "name", "gender", "image", "job", "entrydate", "dept_id")
# columns written by insert; id is generated by the database
INSERT_FIELDS = UPDATABLE_FIELDS + ("create_time", "update_time")


# -------------------------
# Dynamic SQL builders
# -------------------------
def build_list_filters(
    name: Optional[str] = None,
    gender: Optional[int] = None,
    begin: Optional[date] = None,
    end: Optional[date] = None,
) -> List[ColumnElement[bool]]:
    """
    WHERE clauses for list_emps(). A None argument contributes no clause,
    so it never excludes a row; the caller ANDs whatever is returned.
    """
    clauses: List[ColumnElement[bool]] = []

    if name is not None:
        # name LIKE '%' || :name || '%'
        clauses.append(Emp.name.contains(name))

    if gender is not None:
        clauses.append(Emp.gender == gender)

    if begin is not None and end is not None:
        clauses.append(Emp.entrydate.between(begin, end))
    elif begin is not None:
        clauses.append(Emp.entrydate >= begin)
    elif end is not None:
        clauses.append(Emp.entrydate <= end)

    return clauses


def build_update_values(data: Any) -> Dict[str, Any]:
    """
    SET list for update_emp(): only fields that are present (not None) on
    `data`, plus update_time which is always refreshed.
    `data` may be an EmpUpdate schema or a transient Emp.
    """
    values: Dict[str, Any] = {}
    for field in UPDATABLE_FIELDS:
        v = getattr(data, field, None)
        if v is not None:
            values[field] = v
    values["update_time"] = now_naive()
    return values


# -------------------------
# Single
# -------------------------
async def get_emp(db: AsyncSession, emp_id: int) -> Optional[Emp]:
    res = await db.execute(select(Emp).where(Emp.id == emp_id))
    return res.scalar_one_or_none()


# -------------------------
# Listing / Search
# -------------------------
async def list_emps(
    db: AsyncSession,
    name: Optional[str] = None,
    gender: Optional[int] = None,
    begin: Optional[date] = None,
    end: Optional[date] = None,
) -> List[Emp]:
    stmt = (
        select(Emp)
        .where(*build_list_filters(name, gender, begin, end))
        .order_by(Emp.update_time.desc())
    )
    res = await db.execute(stmt)
    return list(res.scalars().all())


# -------------------------
# Insert / Update / Delete
# -------------------------
async def insert_emp(db: AsyncSession, emp: Emp) -> int:
    """
    Insert every field of `emp` except id and return the key generated by
    the database. Any id already on `emp` is ignored; when `emp` is a
    transient record the new key and timestamps are written back to it.
    """
    now = now_naive()
    values = {f: getattr(emp, f, None) for f in INSERT_FIELDS}
    values["create_time"] = values["create_time"] or now
    values["update_time"] = values["update_time"] or now

    row = Emp(**values)
    db.add(row)
    try:
        await db.commit()
        await db.refresh(row)
    except IntegrityError:
        await db.rollback()
        logger.warning("insert emp rejected by constraint: username=%s", row.username)
        raise
    except Exception:
        await db.rollback()
        raise

    if inspect(emp).transient:
        emp.id = row.id
        emp.create_time = row.create_time
        emp.update_time = row.update_time

    logger.debug("inserted emp id=%s username=%s", row.id, row.username)
    return row.id


async def update_emp(db: AsyncSession, data: Any) -> int:
    """
    Partial update of the row identified by `data.id`.

    Returns the number of rows affected; 0 means no row has that id and is
    not treated as an error here.
    """
    emp_id = getattr(data, "id", None)
    if emp_id is None:
        raise ValueError("update_emp requires data.id")

    values = build_update_values(data)
    stmt = update(Emp).where(Emp.id == emp_id).values(**values)
    try:
        res = await db.execute(stmt)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise
    except Exception:
        await db.rollback()
        raise

    logger.debug("update emp id=%s set=%s rows=%s", emp_id, sorted(values), res.rowcount)
    return res.rowcount


async def delete_emp(db: AsyncSession, emp_id: int) -> int:
    """Delete by id; returns rows affected (0 when already absent)."""
    try:
        res = await db.execute(delete(Emp).where(Emp.id == emp_id))
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.debug("delete emp id=%s rows=%s", emp_id, res.rowcount)
    return res.rowcount

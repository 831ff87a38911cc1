# src/emp_crud/routes/emp_api.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError

from src.emp_crud.utils.database import get_db
from src.emp_crud.models.emp import Emp
from src.emp_crud.schemas.emp import EmpCreate, EmpUpdate, EmpOut
from src.emp_crud.crud.emp import (
    get_emp,
    list_emps,
    insert_emp,
    update_emp,
    delete_emp,
)

router = APIRouter(prefix="/api/emps", tags=["Employees"])


@router.get("", response_model=List[EmpOut])
async def api_list_emps(
    name: Optional[str] = Query(None),
    gender: Optional[int] = Query(None, ge=1, le=2),
    begin: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await list_emps(db, name=name, gender=gender, begin=begin, end=end)


@router.get("/{emp_id}", response_model=EmpOut)
async def api_get_emp(emp_id: int, db: AsyncSession = Depends(get_db)):
    row = await get_emp(db, emp_id)
    if not row:
        raise HTTPException(status_code=404, detail="Employee not found")
    return row


@router.post("", status_code=201)
async def api_create_emp(payload: EmpCreate, db: AsyncSession = Depends(get_db)):
    try:
        new_id = await insert_emp(db, Emp(**payload.model_dump()))
    except IntegrityError:
        raise HTTPException(status_code=400, detail="Username already exists")
    return {"message": "created", "id": new_id}


@router.patch("/{emp_id}")
async def api_update_emp(emp_id: int, payload: EmpUpdate, db: AsyncSession = Depends(get_db)):
    # path id wins over any id in the body
    payload.id = emp_id
    try:
        rows = await update_emp(db, payload)
    except IntegrityError:
        raise HTTPException(status_code=400, detail="Username already exists")
    if not rows:
        raise HTTPException(status_code=404, detail="Employee not found")
    return {"message": "updated", "id": emp_id}


@router.delete("/{emp_id}")
async def api_delete_emp(emp_id: int, db: AsyncSession = Depends(get_db)):
    rows = await delete_emp(db, emp_id)
    return {"message": "deleted", "id": emp_id, "rows": rows}

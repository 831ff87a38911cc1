# tests/conftest.py
from datetime import date, datetime

import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from src.emp_crud.utils.database import Base, init_db
from src.emp_crud.models.emp import Emp


@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(eng)
    yield eng
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


def make_emp(**kw) -> Emp:
    data = dict(
        username="zhangwuji",
        name="Zhang Wuji",
        gender=1,
        image="1.jpg",
        job=2,
        entrydate=date(2015, 1, 1),
        dept_id=2,
        create_time=datetime(2020, 1, 1, 9, 0, 0),
        update_time=datetime(2020, 1, 1, 9, 0, 0),
    )
    data.update(kw)
    return Emp(**data)


@pytest.fixture
async def seeded(session_factory):
    """Five rows with distinct update_time values; returns {username: id}."""
    rows = [
        make_emp(username="zhangwuji", name="Zhang Wuji", gender=1, entrydate=date(2015, 1, 1),
                 update_time=datetime(2021, 1, 1)),
        make_emp(username="zhangsanfeng", name="Zhang Sanfeng", gender=1, entrydate=date(2008, 5, 1),
                 update_time=datetime(2023, 1, 1)),
        make_emp(username="zhangmin", name="Zhang Min", gender=2, entrydate=date(2012, 3, 1),
                 update_time=datetime(2022, 1, 1)),
        make_emp(username="weiyixiao", name="Wei Yixiao", gender=1, entrydate=date(2007, 1, 1),
                 update_time=datetime(2020, 6, 1)),
        make_emp(username="xiaozhao", name="Xiao Zhao", gender=2, entrydate=date(2013, 9, 5),
                 update_time=datetime(2019, 1, 1)),
    ]
    async with session_factory() as s:
        s.add_all(rows)
        await s.commit()
        return {r.username: r.id for r in rows}


@pytest.fixture
def emp_factory():
    return make_emp

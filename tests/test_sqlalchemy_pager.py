"""Tests for the SQLAlchemy pager."""

from __future__ import annotations

import asyncio

import pytest
from sqlalchemy import Column, Integer, String, create_engine, select
from sqlalchemy.orm import Session, declarative_base

from fastapi_pagelinks.sqlalchemy import SQLAlchemyPager

Base = declarative_base()


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    status = Column(String, nullable=False)


@pytest.fixture
def session():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture
def seeded(session):
    session.add_all(
        Article(id=index, title=f"Article {index}", status="draft" if index % 3 else "published")
        for index in range(1, 46)
    )
    session.commit()
    return session


class TestSQLAlchemyPager:
    def test_paginate(self, seeded):
        pager = SQLAlchemyPager(session=seeded)
        page = asyncio.run(
            pager.paginate(select(Article).order_by(Article.id), page=2, per_page=20)
        )
        assert [article.id for article in page.items] == list(range(21, 41))
        assert page.total_entries == 45
        assert page.total_pages == 3
        assert page.current_page == 2

    def test_page_past_the_end_is_clamped(self, seeded):
        pager = SQLAlchemyPager(session=seeded)
        page = asyncio.run(
            pager.paginate(select(Article).order_by(Article.id), page=10, per_page=20)
        )
        assert page.current_page == 3
        assert [article.id for article in page.items] == [41, 42, 43, 44, 45]

    def test_count_respects_filters(self, seeded):
        pager = SQLAlchemyPager(session=seeded)
        statement = select(Article).where(Article.status == "published").order_by(Article.id)
        assert asyncio.run(pager.count(statement)) == 15

    def test_empty_table(self, session):
        pager = SQLAlchemyPager(session=session)
        page = asyncio.run(pager.paginate(select(Article), page=3, per_page=10))
        assert page.total_entries == 0
        assert page.total_pages == 0
        assert page.current_page == 1
        assert page.items == []

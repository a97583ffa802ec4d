import os
import sys
import tempfile
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the module-level engine and log files off the real data directory
os.environ.setdefault('COURSEHUB_DATABASE_URL', 'sqlite://')
os.environ.setdefault('COURSEHUB_DATA_DIR', tempfile.mkdtemp(prefix='coursehub-tests-'))

# Now import after path is set
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from models import Post, Link, CourseClass, Comment, Rating, Vote


@pytest.fixture
def engine():
    """In-memory database shared across threads (TestClient runs sync routes in a pool)"""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def seeded(db_session):
    """A small board: two posts with comments, a link, a class with ratings, and votes by u-1"""
    db_session.add_all([
        Post(id='p-1', title='Midterm prep', content='What to study?', author='u-2',
             timestamp=datetime(2024, 3, 1, 9, 0), net_votes=4, tags=['exam']),
        Post(id='p-2', title='Lab partners', content='Anyone?', author='u-3',
             timestamp=datetime(2024, 3, 2, 9, 0), net_votes=-1, tags=[]),
        Link(id='l-1', title='Lecture notes', summary='Week 1-6', link='https://example.edu/notes',
             added_by='u-2', net_votes=2, tags=['notes'], datetime=datetime(2024, 3, 3, 12, 0)),
        CourseClass(id='c-1', title='Operating Systems', course_code='CISC 324',
                    average_rating=4.5, added_by='u-4', summary='Processes and memory', tags=['core']),
        Comment(id='cm-1', author='u-3', content='Chapters 1-4', net_votes=1, parent_post='p-1',
                parent_comment=None, timestamp=datetime(2024, 3, 1, 10, 0)),
        Comment(id='cm-2', author='u-2', content='Thanks', net_votes=0, parent_post='p-1',
                parent_comment='cm-1', timestamp=datetime(2024, 3, 1, 11, 0)),
        Rating(id='r-1', parent='c-1', average_rating=5, author='u-5', content='Great',
               datetime=datetime(2024, 2, 1, 8, 0)),
        Rating(id='r-2', parent='c-1', average_rating=4, author='u-6', content='Hard but fair',
               datetime=datetime(2024, 2, 5, 8, 0)),
        Vote(voter='u-1', item_type='post', item_id='p-1', vote_value=1),
        Vote(voter='u-1', item_type='post', item_id='p-2', vote_value=0),
        Vote(voter='u-1', item_type='link', item_id='l-1', vote_value=1),
        Vote(voter='u-1', item_type='comment', item_id='cm-2', vote_value=0),
        Vote(voter='u-9', item_type='post', item_id='p-1', vote_value=0),
    ])
    db_session.commit()
    return db_session


@pytest.fixture
def client(engine, seeded):
    """API client bound to the seeded in-memory database"""
    from main import app

    SessionLocal = sessionmaker(bind=engine)

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

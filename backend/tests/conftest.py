import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest

from config.settings import Settings
from database import create_db_engine, create_session_factory, init_database
from dependencies import get_in_memory_repositories, get_sqlalchemy_repositories, get_use_cases
from domain.value_objects import UserStatus
from factories import TEST_BCRYPT_ROUNDS, make_admin, make_deliveryman, make_recipient


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = create_db_engine('sqlite:///:memory:')
    init_database(engine)
    session = create_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def settings():
    return Settings(bcrypt_rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def repos():
    """Fresh in-memory adapters"""
    return get_in_memory_repositories()


@pytest.fixture
def sql_repos(db_session):
    return get_sqlalchemy_repositories(db_session)


@pytest.fixture
def use_cases(repos, settings):
    return get_use_cases(repos, settings)


@pytest.fixture
def admin(repos):
    user = make_admin(id="admin-1")
    repos.users.store.put(user)
    return user


@pytest.fixture
def inactive_admin(repos):
    user = make_admin(id="admin-inactive", status=UserStatus.INACTIVE)
    repos.users.store.put(user)
    return user


@pytest.fixture
def deliveryman(repos):
    user = make_deliveryman(id="deliveryman-1")
    repos.users.store.put(user)
    return user


@pytest.fixture
def other_deliveryman(repos):
    user = make_deliveryman(id="deliveryman-2")
    repos.users.store.put(user)
    return user


@pytest.fixture
def inactive_deliveryman(repos):
    user = make_deliveryman(id="deliveryman-inactive", status=UserStatus.INACTIVE)
    repos.users.store.put(user)
    return user


@pytest.fixture
def recipient(repos):
    entity = make_recipient(id="recipient-1")
    repos.recipients.store.put(entity)
    return entity

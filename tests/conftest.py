import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("USERS_API_URL", "http://users-api.test")

import threading
import uuid

import pytest
from azure.cosmos.exceptions import (
    CosmosAccessConditionFailedError,
    CosmosResourceExistsError,
    CosmosResourceNotFoundError,
)
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api import create_app
from app.data.database import Base
from app.data.models import ProductModel  # noqa: F401
from app.domain.errors import UpstreamError
from app.services.cosmos_products import CosmosProductService
from app.services.postgres_products import PostgresProductService


class FakeContainer:
    """In-memory odpowiednik ContainerProxy, tylko metody uzywane przez repo."""

    def __init__(self):
        self.items = {}
        self._lock = threading.Lock()

    @staticmethod
    def _stamp(body):
        doc = dict(body)
        doc["_etag"] = f'"{uuid.uuid4()}"'
        return doc

    def create_item(self, body):
        key = (body["userId"], body["id"])
        with self._lock:
            if key in self.items:
                raise CosmosResourceExistsError(
                    status_code=409,
                    message="Entity with the specified id already exists in the system.",
                )
            self.items[key] = self._stamp(body)
            return dict(self.items[key])

    def read_item(self, item, partition_key):
        try:
            return dict(self.items[(partition_key, item)])
        except KeyError:
            raise CosmosResourceNotFoundError(
                status_code=404,
                message="Entity with the specified id does not exist in the system.",
            )

    def upsert_item(self, body, etag=None, match_condition=None):
        key = (body["userId"], body["id"])
        with self._lock:
            if etag is not None:
                current = self.items.get(key)
                if current is None or current["_etag"] != etag:
                    raise CosmosAccessConditionFailedError(
                        status_code=412,
                        message="Operation cannot be performed because one of the specified precondition is not met.",
                    )
            self.items[key] = self._stamp(body)
            return dict(self.items[key])

    def delete_item(self, item, partition_key):
        with self._lock:
            if self.items.pop((partition_key, item), None) is None:
                raise CosmosResourceNotFoundError(
                    status_code=404,
                    message="Entity with the specified id does not exist in the system.",
                )

    def query_items(self, query, parameters=None, partition_key=None, enable_cross_partition_query=None):
        if query.startswith("SELECT VALUE 1"):
            return iter([1])
        return iter([dict(doc) for (user_id, _), doc in self.items.items() if user_id == partition_key])


class StubUsersClient:
    def __init__(self, users=None, fail=False):
        self.users = users if users is not None else {}
        self.fail = fail
        self.calls = []

    def fetch_user(self, user_id):
        self.calls.append(user_id)
        if self.fail:
            raise UpstreamError("users-api error", detail="connection refused")
        return self.users.get(user_id)

    def user_exists(self, user_id):
        return self.fetch_user(user_id) is not None


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def users():
    return StubUsersClient(
        {
            "u1": {"id": "u1", "name": "Ada", "email": "ada@example.com"},
            "u2": {"id": "u2", "name": "Linus", "email": "linus@example.com"},
        }
    )


@pytest.fixture
def container():
    return FakeContainer()


@pytest.fixture
def backends(session_factory, users, container):
    return {
        "postgres": PostgresProductService(session_factory=session_factory, users_client=users),
        "cosmos": CosmosProductService(container_factory=lambda: container),
    }


@pytest.fixture
def postgres_client(backends):
    with TestClient(create_app(backends=backends, backend_name="postgres")) as client:
        yield client


@pytest.fixture
def cosmos_client(backends):
    with TestClient(create_app(backends=backends, backend_name="cosmos")) as client:
        yield client

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.database import get_connection


@pytest.fixture
def mock_conn():
    """DB 커넥션 mock (fetchrow 반환값은 테스트에서 지정)"""
    return AsyncMock()


@pytest.fixture
def client(mock_conn):
    """테스트용 FastAPI 클라이언트 (DB 커넥션 의존성 교체)"""
    async def override_get_connection():
        yield mock_conn

    app.dependency_overrides[get_connection] = override_get_connection
    yield TestClient(app)
    app.dependency_overrides.clear()

"""Tests for the /health API endpoint."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from playback import SoundPlayer
from src.api.config import Settings
from src.api.deps import AppContext
from src.api.main import create_app

from tests.fixtures import FakeService


@pytest.fixture
def test_settings(audio_dir: Path) -> Settings:
    """Create test settings."""
    return Settings(
        app_name="Audiobait Test Service",
        log_level="DEBUG",
        audio_dir=audio_dir,
    )


@pytest.fixture
def client(test_settings: Settings) -> TestClient:
    """Create a test client with the app."""
    context = AppContext(
        settings=test_settings,
        service=FakeService(),
        read_log=lambda: "",
        player=SoundPlayer(),
    )
    return TestClient(create_app(context=context))


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""
    
    def test_health_returns_ok(self, client: TestClient) -> None:
        """Test that /health returns status ok."""
        response = client.get("/health")
        
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
    
    def test_health_reports_audio_dir(self, client: TestClient, audio_dir: Path) -> None:
        """Test that /health reports the audio directory and its presence."""
        response = client.get("/health")
        
        data = response.json()
        assert data["audio_dir"] == str(audio_dir)
        assert data["audio_dir_exists"] is True
    
    def test_health_missing_audio_dir(self, tmp_path: Path) -> None:
        """Test that a missing audio directory is reported, not an error."""
        settings = Settings(audio_dir=tmp_path / "missing")
        context = AppContext(
            settings=settings,
            service=FakeService(),
            read_log=lambda: "",
            player=SoundPlayer(),
        )
        client = TestClient(create_app(context=context))
        
        response = client.get("/health")
        
        assert response.status_code == 200
        assert response.json()["audio_dir_exists"] is False
    
    def test_health_includes_version(self, client: TestClient, test_settings: Settings) -> None:
        """Test that /health includes the API version."""
        response = client.get("/health")
        
        assert response.json()["version"] == test_settings.app_version
    
    def test_health_has_request_id_header(self, client: TestClient) -> None:
        """Test that response includes X-Request-ID header."""
        response = client.get("/health")
        
        assert response.status_code == 200
        assert "X-Request-ID" in response.headers
        request_id = response.headers["X-Request-ID"]
        assert len(request_id) > 0
    
    def test_health_with_custom_request_id(self, client: TestClient) -> None:
        """Test that custom X-Request-ID is preserved."""
        custom_id = "test-request-123"
        response = client.get(
            "/health",
            headers={"X-Request-ID": custom_id},
        )
        
        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == custom_id
    
    def test_health_has_response_time_header(self, client: TestClient) -> None:
        """Test that the timing middleware reports the request duration."""
        response = client.get("/health")
        
        assert response.headers["X-Response-Time"].endswith("ms")

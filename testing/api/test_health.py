"""Tests for health check endpoints."""

import unittest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from src import __version__
from src.api.app import app


class TestHealthEndpoint(unittest.TestCase):
    """Tests for /health endpoint."""

    def setUp(self) -> None:
        """Set up test client."""
        self.app = app
        self.client = TestClient(self.app)

    @patch("src.api.health.endpoints.get_session")
    def test_health_check_returns_healthy_status(self, mock_get_session: MagicMock) -> None:
        """Test that health check reports healthy when the store answers."""
        mock_session = MagicMock()
        mock_get_session.return_value.__enter__ = MagicMock(return_value=mock_session)
        mock_get_session.return_value.__exit__ = MagicMock(return_value=False)

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "healthy")
        self.assertEqual(data["database"], "ok")
        mock_session.execute.assert_called_once()

    @patch("src.api.health.endpoints.get_session")
    def test_health_check_returns_version(self, mock_get_session: MagicMock) -> None:
        """Test that health check returns the package version."""
        mock_get_session.return_value.__enter__ = MagicMock(return_value=MagicMock())
        mock_get_session.return_value.__exit__ = MagicMock(return_value=False)

        response = self.client.get("/health")

        self.assertEqual(response.json()["version"], __version__)

    @patch("src.api.health.endpoints.get_session")
    def test_health_check_degraded_when_store_unavailable(
        self,
        mock_get_session: MagicMock,
    ) -> None:
        """Test that health check reports degraded when the store is down."""
        mock_get_session.return_value.__enter__ = MagicMock(
            side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))
        )
        mock_get_session.return_value.__exit__ = MagicMock(return_value=False)

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "degraded")
        self.assertEqual(data["database"], "unavailable")

    @patch("src.api.health.endpoints.get_session")
    def test_health_check_degraded_when_store_not_configured(
        self,
        mock_get_session: MagicMock,
    ) -> None:
        """Test that a missing DATABASE_URL reports degraded rather than failing."""
        mock_get_session.side_effect = KeyError("DATABASE_URL")

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "degraded")


if __name__ == "__main__":
    unittest.main()

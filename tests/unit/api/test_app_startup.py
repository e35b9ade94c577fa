"""Tests for logging setup and application wiring."""

import logging
from pathlib import Path

import pytest
from loguru import logger

from src.library_api.api.http.app import create_app
from src.library_api.api.utils.app_startup import configure_logging
from src.library_api.runtime.config.config_data import ConfigData, LoggingConfig


@pytest.fixture
def restore_logging():
    yield
    configure_logging()


class TestConfigureLogging:
    def test_file_sink_creates_directory(self, tmp_path: Path, restore_logging):
        log_file = tmp_path / "logs" / "app.log"

        configure_logging(ConfigData(logging=LoggingConfig(file=str(log_file), format="plain")))

        assert log_file.parent.is_dir()

    def test_stdlib_records_reach_loguru(self, restore_logging):
        configure_logging(ConfigData(logging=LoggingConfig(level="DEBUG")))
        messages: list[str] = []
        sink_id = logger.add(lambda message: messages.append(message.record["message"]))

        try:
            logging.getLogger("library.test").warning("forwarded from stdlib")
        finally:
            logger.remove(sink_id)

        assert "forwarded from stdlib" in messages

    def test_uvicorn_access_records_are_dropped(self, restore_logging):
        configure_logging()
        messages: list[str] = []
        sink_id = logger.add(lambda message: messages.append(message.record["message"]))

        try:
            logging.getLogger("uvicorn.access").critical("GET / 200")
        finally:
            logger.remove(sink_id)

        assert messages == []


class TestCreateApp:
    def test_registers_resource_routes(self):
        paths = create_app().openapi()["paths"]

        for resource in ("authors", "books", "users"):
            assert f"/{resource}" in paths
            assert f"/{resource}/{{record_id}}" in paths
        assert "/health" in paths
        assert "/health/ready" in paths

    def test_openapi_uses_camel_case_year(self):
        schemas = create_app().openapi()["components"]["schemas"]

        book_schemas = [schema for name, schema in schemas.items() if name.startswith("Book")]
        assert book_schemas
        for schema in book_schemas:
            assert "publicationYear" in schema["properties"]
            assert "publication_year" not in schema["properties"]

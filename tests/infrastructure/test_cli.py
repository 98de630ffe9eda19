"""End-to-end tests for the click CLI against a temporary data directory."""

import logging

import pytest
import structlog
from click.testing import CliRunner

from catalog.infrastructure.cli.main import cli
from catalog.infrastructure.config import get_settings


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("CATALOG_UPLOAD_DIR", str(tmp_path / "uploads"))
    monkeypatch.setenv("CATALOG_FILES_BASE_URL", "http://test/files")
    monkeypatch.setenv("CATALOG_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield CliRunner()

    root.handlers, root.level = handlers, level
    structlog.reset_defaults()
    get_settings.cache_clear()


def _invoke(runner, *args):
    return runner.invoke(cli, list(args))


class TestCategoryCommands:

    def test_add_and_list(self, runner):
        result = _invoke(runner, "category", "add", "--name", "Furniture")
        assert result.exit_code == 0, result.output
        assert "Category #1 'Furniture' added" in result.output

        result = _invoke(runner, "category", "list")
        assert "Furniture" in result.output

    def test_list_empty(self, runner):
        result = _invoke(runner, "category", "list")
        assert "No categories found." in result.output


class TestProductCommands:

    def test_list_empty(self, runner):
        result = _invoke(runner, "product", "list")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_add_show_edit_delete(self, runner):
        _invoke(runner, "category", "add", "--name", "Furniture")

        result = _invoke(
            runner, "product", "add", "--name", "Chair", "--price", "49.99", "--category", "1"
        )
        assert result.exit_code == 0, result.output
        assert "Product #1 'Chair' added at 49.99" in result.output

        result = _invoke(runner, "product", "show", "--id", "1")
        assert "Furniture" in result.output
        assert "Image:    -" in result.output

        result = _invoke(
            runner, "product", "edit", "--id", "1", "--name", "Armchair", "--price", "59"
        )
        assert result.exit_code == 0, result.output
        assert "'Armchair' at 59.00" in result.output

        result = _invoke(runner, "product", "delete", "--id", "1")
        assert result.exit_code == 0
        assert "Product #1 deleted." in result.output

        result = _invoke(runner, "product", "delete", "--id", "1")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_add_with_image(self, runner, tmp_path):
        image = tmp_path / "lamp.png"
        image.write_bytes(b"\x89PNG")
        _invoke(runner, "category", "add", "--name", "Lighting")

        result = _invoke(
            runner, "product", "add", "--name", "Lamp", "--price", "5",
            "--category", "1", "--image", str(image),
        )
        assert result.exit_code == 0, result.output
        assert "Image: http://test/files/" in result.output
        assert len(list((tmp_path / "uploads").iterdir())) == 1

    def test_add_with_unknown_category_fails(self, runner):
        result = _invoke(
            runner, "product", "add", "--name", "Chair", "--price", "1", "--category", "9"
        )
        assert result.exit_code == 1
        assert "No category exists with ID '9'" in result.output

    def test_edit_zero_price_fails(self, runner):
        _invoke(runner, "category", "add", "--name", "Lighting")
        _invoke(runner, "product", "add", "--name", "Lamp", "--price", "0", "--category", "1")

        result = _invoke(
            runner, "product", "edit", "--id", "1", "--name", "Lamp", "--price", "0"
        )
        assert result.exit_code == 1
        assert "greater than zero" in result.output

    def test_show_missing(self, runner):
        result = _invoke(runner, "product", "show", "--id", "3")
        assert result.exit_code == 1
        assert "Product with ID '3' not found" in result.output

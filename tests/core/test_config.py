from decimal import Decimal

import pytest

from pizzeria.core.config import read_config

YAML = """
name: pizzeria
version: 1.0.0
features: pizzeria.features
openapi:
  title: Pizzeria
  version: 1.0.0
  tags:
    pizzas:
      prefix: /pizzas
pricing:
  margin: "1.5"
production:
  openapi: false
  database:
    url: sqlite+aiosqlite:///./prod.db
testing:
  openapi: true
  log_level: DEBUG
  database:
    url: sqlite+aiosqlite://
    echo: true
"""


@pytest.fixture
def path(tmp_path):
    file = tmp_path / "config.yaml"
    file.write_text(YAML, encoding="utf-8")
    return file


def test_reads_selected_environment(path):
    config = read_config(path, "testing")
    assert config.name == "pizzeria"
    assert config.env.openapi is True
    assert config.env.log_level == "DEBUG"
    assert config.env.database.url == "sqlite+aiosqlite://"
    assert config.env.database.echo is True
    assert config.env.telemetry.enabled is False


def test_defaults(path):
    config = read_config(path, "production")
    assert config.port == 8080
    assert config.env.log_level == "INFO"
    assert config.env.database.echo is False


def test_margin_is_decimal(path):
    assert read_config(path, "production").pricing.margin == Decimal("1.5")


def test_tags_keep_prefixes(path):
    assert read_config(path, "testing").openapi.tags["pizzas"].prefix == "/pizzas"


def test_unknown_environment(path):
    with pytest.raises(RuntimeError, match="staging"):
        read_config(path, "staging")

"""Tests for the typer CLI."""
import json

import pytest
from pydantic import SecretStr
from sqlmodel import Session
from typer.testing import CliRunner

from postboard.cli import app
from postboard.config import settings
from postboard.models.core import Profile, ProfileTerritory, SocialGroup, Territory

runner = CliRunner()


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DATA_DIR", tmp_path)
    monkeypatch.setattr(settings, "DATABASE_URL", None)
    monkeypatch.setattr(settings, "TIMEZONE", None)
    return settings


def test_doctor_passes_with_complete_config(isolated_settings, monkeypatch):
    monkeypatch.setattr(settings, "AUTH_API_KEY", SecretStr("anon-key"))
    result = runner.invoke(app, ["doctor"])
    assert result.exit_code == 0, result.output
    assert "all good" in result.output


def test_doctor_fails_without_api_key(isolated_settings, monkeypatch):
    monkeypatch.setattr(settings, "AUTH_API_KEY", None)
    result = runner.invoke(app, ["doctor"])
    assert result.exit_code == 1
    assert "POSTBOARD_AUTH_API_KEY" in result.output


def test_db_init_creates_tables(isolated_settings, use_test_engine):
    result = runner.invoke(app, ["db", "init"])
    assert result.exit_code == 0, result.output
    assert "Database initialized" in result.output


def test_dashboard_show_prints_stats(use_test_engine):
    with Session(use_test_engine) as s:
        north = Territory(name="North")
        s.add(north)
        s.add(Profile(id="sales-a", email="a@example.com", full_name="Alex Sales", role="salesperson"))
        s.flush()
        s.add(ProfileTerritory(profile_id="sales-a", territory_id=north.id))
        s.add(SocialGroup(user_id="sales-a", name="Lakeside Buyers"))
        s.commit()

    result = runner.invoke(app, ["dashboard", "show", "sales-a"])
    assert result.exit_code == 0, result.output
    assert "Dashboard for Alex Sales" in result.output
    assert "Active groups:   1" in result.output
    assert "Territories:     1" in result.output
    assert "No upcoming posts." in result.output

    as_json = runner.invoke(app, ["dashboard", "show", "sales-a", "--json"])
    body = json.loads(as_json.output)
    assert body["stats"] == {"scheduledPosts": 0, "activeGroups": 1, "territories": 1, "postedToday": 0}


def test_dashboard_show_unknown_profile_exits_1(use_test_engine):
    result = runner.invoke(app, ["dashboard", "show", "nobody"])
    assert result.exit_code == 1
    assert "Profile nobody not found" in result.output

"""Tests for the command-line front end."""

import json
from types import SimpleNamespace

import pytest
from click.testing import CliRunner

from bubbles import cli
from bubbles.config import Config
from bubbles.core import entities

NOW = ["--now", "2025-01-15T12:00"]


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.setattr(cli, "load_config", lambda: Config())


@pytest.fixture
def runner():
    return CliRunner()


class TestToday:
    def test_seeded_today(self, runner):
        result = runner.invoke(cli.main, NOW + ["today"])
        assert result.exit_code == 0
        assert "Today, Wednesday, January 15" in result.output
        assert "You have 0 events and 0 reminders today" in result.output
        assert "Welcome to Bubble Life" in result.output
        assert "0/3 tasks done today - 33%" in result.output

    def test_json(self, runner):
        result = runner.invoke(cli.main, NOW + ["today", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["date"] == "2025-01-15"
        assert [t["kind"] for t in data["tasks"]] == ["note", "note", "note"]
        assert data["completed"] == []
        assert data["completion_rate"] == 33

    def test_empty_store(self, runner):
        result = runner.invoke(cli.main, NOW + ["--no-seed", "today"])
        assert result.exit_code == 0
        assert "Nothing left for today." in result.output
        assert "0/0 tasks done today - 0%" in result.output


class TestNotes:
    def test_list_empty(self, runner):
        result = runner.invoke(cli.main, ["--no-seed", "notes"])
        assert result.exit_code == 0
        assert "You don't have any notes yet" in result.output

    def test_list_json(self, runner):
        result = runner.invoke(cli.main, NOW + ["notes", "--json"])
        assert result.exit_code == 0
        assert [n["title"] for n in json.loads(result.output)][0] == "Welcome to Bubble Life"

    def test_toggle_missing(self, runner):
        result = runner.invoke(cli.main, NOW + ["note", "toggle", "missing"])
        assert result.exit_code == 1
        assert "Error: no note 'missing'" in result.output

    def test_delete_missing(self, runner):
        result = runner.invoke(cli.main, NOW + ["note", "delete", "missing"])
        assert result.exit_code == 1


class TestReminders:
    def test_sections(self, runner):
        result = runner.invoke(cli.main, NOW + ["reminders"])
        assert result.exit_code == 0
        assert "### Active" in result.output
        assert "### Completed" in result.output
        assert "Call mom (Due: 14/01/25)" in result.output

    def test_bad_date(self, runner):
        result = runner.invoke(cli.main, NOW + ["reminder", "add", "Call", "not-a-date"])
        assert result.exit_code == 2
        assert "is not a date" in result.output


class TestCalendarAndStats:
    def test_calendar(self, runner):
        result = runner.invoke(cli.main, NOW + ["calendar"])
        assert result.exit_code == 0
        assert "January 2025" in result.output
        assert "[15]" in result.output
        assert "No events yet" in result.output

    def test_calendar_other_month(self, runner):
        result = runner.invoke(cli.main, NOW + ["calendar", "--month", "2025-09"])
        assert result.exit_code == 0
        assert "September 2025" in result.output

    def test_events_empty_day(self, runner):
        result = runner.invoke(cli.main, NOW + ["events", "2025-01-20"])
        assert result.exit_code == 0
        assert "January 20, 2025" in result.output
        assert "No events on this day" in result.output

    def test_stats(self, runner):
        result = runner.invoke(cli.main, NOW + ["stats"])
        assert result.exit_code == 0
        assert "Bubble Statistics" in result.output
        assert "Completion: 33%" in result.output
        assert "[ ] Task Master" in result.output

    def test_profile(self, runner):
        result = runner.invoke(cli.main, NOW + ["profile"])
        assert result.exit_code == 0
        assert "Bubble Explorer" in result.output
        assert "Member since January 2024" in result.output
        assert "Current Streak: 12 days" in result.output


class TestShell:
    def test_changes_persist_within_session(self, runner):
        script = "\n".join(
            [
                'note add Groceries "Milk and eggs"',
                "reminder add 'Call doctor' today",
                "event add Party today",
                "today",
                "quit",
            ]
        )
        result = runner.invoke(cli.main, NOW + ["--no-seed", "shell"], input=script + "\n")
        assert result.exit_code == 0
        assert "Created note #" in result.output
        assert "You have 1 events and 1 reminders today" in result.output
        assert "Groceries" in result.output
        assert "Call doctor (15.01.2025)" in result.output
        assert "Party (15.01.2025)" in result.output

    def test_not_found_keeps_session_alive(self, runner):
        script = "note toggle missing\nnotes\n"
        result = runner.invoke(cli.main, NOW + ["shell"], input=script)
        assert result.exit_code == 0
        assert "Error: no note 'missing'" in result.output
        assert "Welcome to Bubble Life" in result.output

    def test_toggle_by_prefix(self, runner, monkeypatch):
        ids = iter(["abc123" + "0" * 26, "abd456" + "0" * 26])
        monkeypatch.setattr(entities.uuid, "uuid4", lambda: SimpleNamespace(hex=next(ids)))

        script = "note add Report\nnote add Slides\nnote toggle abc\nnote toggle ab\nquit\n"
        result = runner.invoke(cli.main, NOW + ["--no-seed", "shell"], input=script)

        assert result.exit_code == 0
        assert "Note #abc12300 done" in result.output
        assert "Error: id 'ab' is ambiguous" in result.output

    def test_nested_shell_refused(self, runner):
        result = runner.invoke(cli.main, NOW + ["shell"], input="shell\nquit\n")
        assert result.exit_code == 0
        assert "Already in the shell." in result.output

    def test_empty_id_matches_nothing(self, runner):
        script = 'note add Only\nnote delete ""\nnote toggle ""\nnotes\nquit\n'
        result = runner.invoke(cli.main, NOW + ["--no-seed", "shell"], input=script)

        assert result.exit_code == 0
        assert "Deleted note" not in result.output
        assert result.output.count("Error: no note ''") == 2
        assert "[ ] Only" in result.output

    def test_session_options_inside_shell_are_reported(self, runner):
        result = runner.invoke(cli.main, NOW + ["shell"], input="--no-seed notes\nquit\n")

        assert result.exit_code == 0
        assert "only apply when starting a session" in result.output
        assert "Welcome to Bubble Life" in result.output


class TestIds:
    def test_empty_id_deletes_nothing(self, runner):
        result = runner.invoke(cli.main, NOW + ["note", "delete", ""])
        assert result.exit_code == 1
        assert "Error: no note ''" in result.output


class TestAwareNow:
    def test_today_uses_local_day(self, runner, tokyo_tz):
        result = runner.invoke(cli.main, ["--now", "2025-01-15T20:00+00:00", "today", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["date"] == "2025-01-16"

    def test_reminder_due_shown_on_local_day(self, runner, tokyo_tz):
        script = "reminder add Late 2025-01-15T20:00+00:00\nreminders\nquit\n"
        result = runner.invoke(cli.main, NOW + ["--no-seed", "shell"], input=script)
        assert result.exit_code == 0
        assert "Late (Due: 16/01/25)" in result.output

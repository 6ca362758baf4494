"""
Tests para cli/__init__.py - Comandos screens, check y run.
"""

import json

import pytest
import typer
from typer.testing import CliRunner
from unittest.mock import patch

from formgate.cli import app, parse_assignment


runner = CliRunner()

# Ancho amplio para que rich no corte los mensajes en las tablas
WIDE = {"COLUMNS": "200"}


class TestParseAssignment:
    """Tests para parse_assignment."""

    def test_basic(self):
        assert parse_assignment("email=a@b.com") == ("email", "a@b.com")

    def test_empty_value(self):
        assert parse_assignment("email=") == ("email", "")

    def test_value_with_equals(self):
        assert parse_assignment("password=a=b") == ("password", "a=b")

    def test_missing_equals(self):
        with pytest.raises(typer.BadParameter):
            parse_assignment("email")

    def test_missing_name(self):
        with pytest.raises(typer.BadParameter):
            parse_assignment("=value")


class TestScreensCommand:
    """Tests para comando screens."""

    def test_lists_system_forms(self):
        result = runner.invoke(app, ["screens"], env=WIDE)

        assert result.exit_code == 0
        assert "sign_in" in result.output
        assert "sign_up" in result.output
        assert "employee_form" in result.output
        assert "Employee Information" in result.output

    def test_custom_definitions(self, tmp_path):
        path = tmp_path / "forms.json"
        path.write_text(json.dumps({
            "contact": {"title": "Contact Us", "fields": [{"name": "email"}]},
        }), encoding="utf-8")

        result = runner.invoke(app, ["screens", "--definitions", str(path)], env=WIDE)

        assert result.exit_code == 0
        assert "Contact Us" in result.output

    def test_missing_definitions_file(self, tmp_path):
        result = runner.invoke(app, ["screens", "-d", str(tmp_path / "none.json")], env=WIDE)
        assert result.exit_code == 2

    def test_unknown_theme(self):
        result = runner.invoke(app, ["--theme", "neon", "screens"], env=WIDE)
        assert result.exit_code == 2

    def test_other_theme(self):
        result = runner.invoke(app, ["--theme", "nord", "screens"], env=WIDE)
        assert result.exit_code == 0


class TestCheckCommand:
    """Tests para comando check."""

    def test_empty_sign_in_is_invalid(self):
        result = runner.invoke(app, ["check", "sign_in"], env=WIDE)

        assert result.exit_code == 1
        assert "Email is required" in result.output
        assert "Password is required" in result.output

    def test_valid_sign_in(self):
        result = runner.invoke(
            app,
            ["check", "sign_in", "-s", "email=a@b.com", "-s", "password=x"],
            env=WIDE,
        )

        assert result.exit_code == 0
        assert "válido" in result.output

    def test_password_masked(self):
        """Test los campos secretos no se muestran en claro."""
        result = runner.invoke(
            app,
            ["check", "sign_in", "-s", "email=a@b.com", "-s", "password=hunter22"],
            env=WIDE,
        )

        assert "hunter22" not in result.output
        assert "********" in result.output

    def test_employee_id_pattern(self):
        result = runner.invoke(app, ["check", "employee_form", "-s", "employeeId=dev123"], env=WIDE)

        assert result.exit_code == 1
        assert "Must be 5-10 alphanumeric characters" in result.output

    def test_sign_up_mismatch(self):
        result = runner.invoke(
            app,
            [
                "check", "sign_up",
                "-s", "fullName=Jane Doe",
                "-s", "email=jane@example.com",
                "-s", "password=Abcdefgh",
                "-s", "confirmPassword=Abcdefgx",
            ],
            env=WIDE,
        )

        assert result.exit_code == 1
        assert "Passwords must match" in result.output

    def test_unknown_screen(self):
        result = runner.invoke(app, ["check", "nope"], env=WIDE)
        assert result.exit_code == 2

    def test_unknown_field(self):
        result = runner.invoke(app, ["check", "sign_in", "-s", "phone=123"], env=WIDE)

        assert result.exit_code == 2
        assert "phone" in result.output

    def test_malformed_assignment(self):
        result = runner.invoke(app, ["check", "sign_in", "-s", "email"], env=WIDE)
        assert result.exit_code == 2


class TestRunCommand:
    """Tests para comando run."""

    def test_unknown_start_screen(self):
        result = runner.invoke(app, ["run", "--start", "nope"], env=WIDE)
        assert result.exit_code == 2

    def test_runs_router(self):
        """Test run delega en ScreenRouter desde la pantalla indicada."""
        with patch("formgate.cli.screens.ScreenRouter.run") as mock_run:
            result = runner.invoke(app, ["run", "--start", "employee_form"], env=WIDE)

        assert result.exit_code == 0
        mock_run.assert_called_once()
        assert "Goodbye" in result.output

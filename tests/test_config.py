"""Tests for Settings and the command-line entry point."""

import csv

import pytest

from shipit_client import LIVE_URL, PRODUCTION_URL, TEST_URL
from shipit_client import main as cli
from shipit_client.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("SHIPIT_API_TOKEN", "SHIPIT_MODE", "SHIPIT_BASE_URL", "SHIPIT_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_reads_environment(self, clean_env):
        clean_env.setenv("SHIPIT_API_TOKEN", "env-token")
        clean_env.setenv("SHIPIT_MODE", "LIVE")
        clean_env.setenv("SHIPIT_TIMEOUT", "7.5")

        settings = Settings.from_env()

        assert settings.api_token == "env-token"
        assert settings.mode == "live"
        assert settings.timeout == 7.5
        assert settings.resolved_base_url == LIVE_URL

    def test_arguments_override_environment(self, clean_env):
        clean_env.setenv("SHIPIT_API_TOKEN", "env-token")
        clean_env.setenv("SHIPIT_MODE", "live")

        settings = Settings.from_env(api_token="arg-token", mode="production")

        assert settings.api_token == "arg-token"
        assert settings.resolved_base_url == PRODUCTION_URL

    def test_defaults_to_test_mode(self, clean_env):
        settings = Settings.from_env(api_token="t")

        assert settings.mode == "test"
        assert settings.resolved_base_url == TEST_URL
        assert settings.timeout is None

    def test_base_url_overrides_mode(self, clean_env):
        clean_env.setenv("SHIPIT_BASE_URL", "http://localhost:9000")

        settings = Settings.from_env(api_token="t", mode="live")

        assert settings.resolved_base_url == "http://localhost:9000"

    def test_missing_token_raises(self, clean_env):
        with pytest.raises(ValueError, match="SHIPIT_API_TOKEN"):
            Settings.from_env()

    def test_unknown_mode_raises(self, clean_env):
        with pytest.raises(ValueError, match="Unsupported Shipit mode"):
            Settings.from_env(api_token="t", mode="staging")

    def test_bad_timeout_raises(self, clean_env):
        clean_env.setenv("SHIPIT_TIMEOUT", "soon")

        with pytest.raises(ValueError, match="SHIPIT_TIMEOUT"):
            Settings.from_env(api_token="t")

    def test_connector(self, clean_env):
        connector = Settings.from_env(api_token="t", timeout=3).connector()

        assert connector.base_url == TEST_URL
        assert connector.timeout == 3
        assert connector.session.headers["Authorization"] == "Bearer t"


class TestCli:
    @pytest.fixture
    def use_connector(self, monkeypatch, connector):
        monkeypatch.setattr(cli, "_build_connector", lambda args: connector)
        return connector

    def test_track(self, use_connector, session, capsys):
        session.queue(body={"trackingUrl": "https://t.example/JJFI1", "trackingNumber": "JJFI1"})

        cli.main(["track", "JJFI1"])

        assert "JJFI1: https://t.example/JJFI1" in capsys.readouterr().out

    def test_methods(self, use_connector, session, capsys):
        session.queue(body=[{"serviceId": "posti.po2103", "carrier": "Posti", "serviceName": "Postipaketti"}])

        cli.main(["methods"])

        out = capsys.readouterr().out
        assert "posti.po2103" in out
        assert "Postipaketti" in out

    def test_agents_export_csv(self, use_connector, session, tmp_path, capsys):
        session.queue(
            body={
                "status": 200,
                "locations": [
                    {"id": "b", "name": "Second", "address1": "Katu 2", "city": "Helsinki",
                     "zipcode": "00100", "countryCode": "FI", "distanceInKilometers": 0.4},
                    {"id": "a", "name": "First", "address1": "Katu 1", "city": "Helsinki",
                     "zipcode": "00100", "countryCode": "FI"},
                ],
            }
        )
        out_file = tmp_path / "agents.csv"

        cli.main([
            "agents", "--postcode", "00100", "--country", "FI",
            "--service-id", "posti.po2103", "--csv", str(out_file),
        ])

        assert session.last["json"] == {
            "postcode": "00100",
            "country": "FI",
            "serviceId": "posti.po2103",
        }
        with open(out_file, newline="") as f:
            rows = list(csv.reader(f))
        assert [row[1] for row in rows[1:]] == ["b", "a"]
        assert "Distance: 0.40 km" in capsys.readouterr().out

    def test_agents_with_several_service_ids_sends_a_list(self, use_connector, session):
        session.queue(body={"status": 200, "locations": []})

        cli.main([
            "agents", "--postcode", "00100", "--country", "FI",
            "--service-id", "posti.po2103", "--service-id", "mh.mh80",
        ])

        assert session.last["json"]["serviceId"] == ["posti.po2103", "mh.mh80"]

    def test_http_error_exits_with_status_one(self, use_connector, session, capsys):
        session.queue(404, {"code": 404, "message": "Not Found"}, reason="Not Found")

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["track", "nope"])

        assert exc_info.value.code == 1
        assert "Not Found" in capsys.readouterr().err

    def test_missing_token_exits_with_status_one(self, clean_env, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["me"])

        assert exc_info.value.code == 1
        assert "SHIPIT_API_TOKEN" in capsys.readouterr().err

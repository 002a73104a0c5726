from portal import logging_config as portal_logging
from relay.core import logging_config


def test_quiet_loggers_keep_handlers_but_raise_level(tmp_path) -> None:
    config = logging_config.build_logging_config(str(tmp_path / "relay.log"), "DEBUG", {"uvicorn.access": "WARNING"})

    assert config["handlers"]["rotating_file"]["filename"] == str(tmp_path / "relay.log")
    assert config["handlers"]["console"]["level"] == "DEBUG"
    assert config["loggers"][""]["level"] == "DEBUG"
    assert config["loggers"]["uvicorn.access"] == {
        "handlers": ["console", "rotating_file"],
        "level": "WARNING",
        "propagate": False,
    }


def test_portal_uses_the_shared_setup(tmp_path, monkeypatch) -> None:
    calls = []

    def _fake_configure(log_dir, file_name, quiet_loggers=None):
        calls.append((log_dir, file_name, quiet_loggers))
        return f"{log_dir}/{file_name}"

    monkeypatch.setattr(portal_logging, "configure_file_logging", _fake_configure)

    path = portal_logging.setup_logging(str(tmp_path))

    assert path == f"{tmp_path}/designflow_portal.log"
    assert calls == [(str(tmp_path), "designflow_portal.log", portal_logging.PORTAL_QUIET_LOGGERS)]

"""Tests for component wiring at startup."""

import json

import pytest

from naming_binder import main
from naming_binder.common.errors import ConfigError, ErrorCode
from naming_binder.domain.models.deployment import ComponentStatus


@pytest.fixture
def config_file(tmp_path, sample_config_dict):
    path = tmp_path / "deployment.json"
    path.write_text(json.dumps(sample_config_dict), encoding="utf-8")
    return path


class TestInitializeComponents:
    def test_activates_everything(self, config_file) -> None:
        manager, directory, _ = main.initialize_components(config_file)

        assert all(state.status is ComponentStatus.ACTIVE for state in manager.list_states())
        # OrderBean 6 + InvoiceBean 6 + PaymentBean 3
        assert directory.total_bindings() == 15

    def test_without_activation(self, config_file) -> None:
        manager, directory, _ = main.initialize_components(config_file, activate=False)

        assert manager.summary()["REGISTERED"] == 3
        assert directory.total_bindings() == 0

    def test_cross_validation_failure(self, tmp_path) -> None:
        path = tmp_path / "deployment.json"
        path.write_text(
            json.dumps(
                {
                    "applications": [
                        {
                            "name": "shop",
                            "modules": [
                                {"name": "m.jar", "components": [{"name": "Bean", "home": "a/b"}]}
                            ],
                        }
                    ]
                }
            ),
            encoding="utf-8",
        )

        with pytest.raises(ConfigError) as exc_info:
            main.initialize_components(path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID


class TestShutdown:
    def test_deactivates_registered_manager(self, config_file, monkeypatch) -> None:
        manager, directory, _ = main.initialize_components(config_file)
        monkeypatch.setattr(main, "_deployment_manager", manager)

        main.shutdown_components()

        assert directory.total_bindings() == 0
        assert main._deployment_manager is None

"""Tests for deployment configuration loading."""

import json

import pytest

from naming_binder.common.errors import ConfigError, ErrorCode
from naming_binder.infrastructure.naming.directory import NamingDirectory
from naming_binder.interface.config.loader import ConfigLoader


@pytest.fixture
def loader() -> ConfigLoader:
    return ConfigLoader()


class TestLoadFromFile:
    def test_load(self, loader, tmp_path, sample_config_dict) -> None:
        path = tmp_path / "deployment.json"
        path.write_text(json.dumps(sample_config_dict), encoding="utf-8")

        config = loader.load_from_file(path)

        assert [app.name for app in config.applications] == ["shop", "billing"]
        assert config.applications[0].multi_module is True
        assert config.applications[1].multi_module is False
        assert config.observability.log_level == "DEBUG"

    def test_missing_file(self, loader, tmp_path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            loader.load_from_file(tmp_path / "absent.json")

        assert exc_info.value.code == ErrorCode.CONFIG_NOT_FOUND

    def test_invalid_json(self, loader, tmp_path) -> None:
        path = tmp_path / "deployment.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            loader.load_from_file(path)

        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR
        assert exc_info.value.http_status == 400


class TestSchemaValidation:
    @pytest.mark.parametrize("bad_name", ["", "orders/jar", "Order!Bean"])
    def test_reserved_characters_in_names(self, loader, bad_name) -> None:
        data = {
            "applications": [
                {"name": "shop", "modules": [{"name": "m.jar", "components": [{"name": bad_name}]}]}
            ]
        }

        with pytest.raises(ConfigError) as exc_info:
            loader.load_from_dict(data)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID
        assert exc_info.value.details["errors"]

    def test_duplicate_component_names(self, loader) -> None:
        data = {
            "applications": [
                {
                    "name": "shop",
                    "modules": [
                        {"name": "m.jar", "components": [{"name": "Bean"}, {"name": "Bean"}]}
                    ],
                }
            ]
        }

        with pytest.raises(ConfigError):
            loader.load_from_dict(data)

    def test_duplicate_application_names(self, loader) -> None:
        with pytest.raises(ConfigError):
            loader.load_from_dict({"applications": [{"name": "shop"}, {"name": "shop"}]})

    def test_empty_interface_identifier(self, loader) -> None:
        data = {
            "applications": [
                {
                    "name": "shop",
                    "modules": [
                        {"name": "m.jar", "components": [{"name": "Bean", "business_locals": [""]}]}
                    ],
                }
            ]
        }

        with pytest.raises(ConfigError):
            loader.load_from_dict(data)

    def test_defaults(self, loader) -> None:
        config = loader.load_from_dict({})

        assert config.applications == []
        assert config.observability.log_writes is True


class TestCrossValidation:
    def test_valid_config(self, loader, sample_config_dict) -> None:
        config = loader.load_from_dict(sample_config_dict)

        assert loader.validate(config) == (True, [])

    def test_slash_in_interface_is_an_error(self, loader) -> None:
        config = loader.load_from_dict(
            {
                "applications": [
                    {
                        "name": "shop",
                        "modules": [
                            {"name": "m.jar", "components": [{"name": "Bean", "home": "com/acme/Home"}]}
                        ],
                    }
                ]
            }
        )

        ok, errors = loader.validate(config)

        assert not ok
        assert len(errors) == 1
        assert "shop/m.jar/Bean" in errors[0]

    def test_duplicates_and_viewless_components_are_warnings(self, loader) -> None:
        config = loader.load_from_dict(
            {
                "applications": [
                    {
                        "name": "shop",
                        "modules": [
                            {
                                "name": "m.jar",
                                "components": [
                                    {"name": "Dup", "business_locals": ["x.A", "x.A"]},
                                    {"name": "Nothing"},
                                ],
                            }
                        ],
                    }
                ]
            }
        )

        assert loader.validate(config) == (True, [])


class TestToComponents:
    def test_graph_is_wired_to_directory(self, loader, sample_config_dict) -> None:
        directory = NamingDirectory()
        config = loader.load_from_dict(sample_config_dict)

        components = loader.to_components(config, directory)

        assert [c.key for c in components] == [
            "shop/orders.jar/OrderBean",
            "shop/orders.jar/InvoiceBean",
            "billing/billing.jar/PaymentBean",
        ]
        order_bean = components[0]
        assert order_bean.application.multi_module is True
        assert order_bean.application.context is directory.application_context("shop")
        assert order_bean.module.context is directory.module_context("shop", "orders.jar")
        assert order_bean.business_locals == ("com.acme.OrderService",)
        assert components[2].local_bean is True

    def test_components_share_module_and_application(self, loader, sample_config_dict) -> None:
        components = loader.to_components(loader.load_from_dict(sample_config_dict), NamingDirectory())

        assert components[0].module is components[1].module
        assert components[0].application is components[1].application

"""Pytest fixtures for naming_binder tests."""

import os

os.environ.setdefault("NAMING_BINDER_SKIP_DEFAULT_LOGGING", "1")

import pytest

from naming_binder.domain.models.component import (
    Application,
    ComponentDescription,
    Module,
)
from naming_binder.infrastructure.naming.directory import NamingDirectory
from naming_binder.infrastructure.proxy.factory import CachingProxyFactory


class RecordingContext:
    """Naming context that records every write and delegates to a real context."""

    def __init__(self, delegate, log: list, label: str) -> None:
        self._delegate = delegate
        self._log = log
        self._label = label

    def bind(self, name, obj) -> None:
        self._log.append(("bind", self._label, name))
        self._delegate.bind(name, obj)

    def unbind(self, name) -> None:
        self._log.append(("unbind", self._label, name))
        self._delegate.unbind(name)


@pytest.fixture
def directory() -> NamingDirectory:
    return NamingDirectory()


@pytest.fixture
def proxy_factory() -> CachingProxyFactory:
    return CachingProxyFactory()


@pytest.fixture
def shop(directory: NamingDirectory) -> Application:
    """Single-module application 'shop'."""
    return Application("shop", multi_module=False, context=directory.application_context("shop"))


@pytest.fixture
def shop_ear(directory: NamingDirectory) -> Application:
    """Same application packaged as a multi-module archive."""
    return Application("shop", multi_module=True, context=directory.application_context("shop"))


@pytest.fixture
def orders(shop: Application, directory: NamingDirectory) -> Module:
    return Module("orders.jar", shop, context=directory.module_context("shop", "orders.jar"))


@pytest.fixture
def order_bean(orders: Module) -> ComponentDescription:
    """OrderBean exposing exactly one business-local view."""
    return ComponentDescription(
        name="OrderBean",
        module=orders,
        business_locals=["com.acme.OrderService"],
    )


@pytest.fixture
def invoice_bean(orders: Module) -> ComponentDescription:
    """InvoiceBean exposing three views (local, remote, no-interface)."""
    return ComponentDescription(
        name="InvoiceBean",
        module=orders,
        business_locals=["com.acme.InvoiceService"],
        business_remotes=["com.acme.InvoiceRemote"],
        local_bean=True,
    )


@pytest.fixture
def write_log() -> list:
    return []


@pytest.fixture
def recording_graph(directory: NamingDirectory, write_log: list):
    """Application/module wired to recording contexts. Returns (app, module, global_ctx)."""
    app = Application(
        "shop",
        context=RecordingContext(directory.application_context("shop"), write_log, "application"),
    )
    module = Module(
        "orders.jar",
        app,
        context=RecordingContext(
            directory.module_context("shop", "orders.jar"), write_log, "module"
        ),
    )
    global_ctx = RecordingContext(directory.global_context, write_log, "global")
    return app, module, global_ctx


@pytest.fixture
def sample_config_dict() -> dict:
    return {
        "applications": [
            {
                "name": "shop",
                "multi_module": True,
                "modules": [
                    {
                        "name": "orders.jar",
                        "components": [
                            {"name": "OrderBean", "business_locals": ["com.acme.OrderService"]},
                            {
                                "name": "InvoiceBean",
                                "business_locals": ["com.acme.InvoiceService"],
                                "business_remotes": ["com.acme.InvoiceRemote"],
                            },
                        ],
                    }
                ],
            },
            {
                "name": "billing",
                "modules": [
                    {
                        "name": "billing.jar",
                        "components": [{"name": "PaymentBean", "local_bean": True}],
                    }
                ],
            },
        ],
        "observability": {"log_level": "DEBUG"},
    }

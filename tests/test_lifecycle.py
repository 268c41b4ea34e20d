"""Tests for the deployment lifecycle manager."""

import pytest

from naming_binder.application.lifecycle.manager import DeploymentManager
from naming_binder.common.errors import (
    ComponentError,
    ErrorCode,
    NameCollisionError,
    NameNotFoundError,
)
from naming_binder.domain.models.component import ComponentDescription
from naming_binder.domain.models.deployment import ComponentStatus


@pytest.fixture
def manager(directory, proxy_factory) -> DeploymentManager:
    return DeploymentManager(
        global_context=directory.global_context,
        proxy_factory=proxy_factory,
    )


class TestRegistration:
    def test_register(self, manager, order_bean) -> None:
        state = manager.register(order_bean)

        assert state.key == "shop/orders.jar/OrderBean"
        assert state.status is ComponentStatus.REGISTERED
        assert manager.get_state(state.key) is state

    def test_duplicate_registration(self, manager, order_bean) -> None:
        manager.register(order_bean)

        with pytest.raises(ComponentError) as exc_info:
            manager.register(order_bean)

        assert exc_info.value.code == ErrorCode.COMPONENT_ALREADY_REGISTERED

    def test_unregister_active_is_rejected(self, manager, order_bean) -> None:
        manager.register(order_bean)
        manager.activate(order_bean.key)

        with pytest.raises(ComponentError) as exc_info:
            manager.unregister(order_bean.key)

        assert exc_info.value.code == ErrorCode.COMPONENT_ALREADY_ACTIVE

    def test_unknown_component(self, manager) -> None:
        with pytest.raises(ComponentError) as exc_info:
            manager.activate("shop/orders.jar/Missing")

        assert exc_info.value.code == ErrorCode.COMPONENT_NOT_FOUND
        assert exc_info.value.http_status == 404
        assert manager.get_state("shop/orders.jar/Missing") is None


class TestActivation:
    def test_activate_binds_all_names(self, manager, directory, order_bean) -> None:
        manager.register(order_bean)

        state = manager.activate(order_bean.key)

        assert state.status is ComponentStatus.ACTIVE
        assert state.bound_names == 6
        assert state.activated_ts is not None
        assert directory.total_bindings() == 6

    def test_activate_twice_is_rejected(self, manager, order_bean) -> None:
        manager.register(order_bean)
        manager.activate(order_bean.key)

        with pytest.raises(ComponentError) as exc_info:
            manager.activate(order_bean.key)

        assert exc_info.value.code == ErrorCode.COMPONENT_ALREADY_ACTIVE

    def test_failed_activation(self, manager, directory, order_bean) -> None:
        directory.global_context.bind("orders.jar/OrderBean!com.acme.OrderService", object())
        manager.register(order_bean)

        with pytest.raises(NameCollisionError):
            manager.activate(order_bean.key)

        state = manager.get_state(order_bean.key)
        assert state.status is ComponentStatus.FAILED
        assert "orders.jar/OrderBean!com.acme.OrderService" in state.last_error

    def test_deactivate_unbinds(self, manager, directory, order_bean) -> None:
        manager.register(order_bean)
        manager.activate(order_bean.key)

        state = manager.deactivate(order_bean.key)

        assert state.status is ComponentStatus.INACTIVE
        assert state.bound_names == 0
        assert directory.total_bindings() == 0

    def test_deactivate_requires_active(self, manager, order_bean) -> None:
        manager.register(order_bean)

        with pytest.raises(ComponentError) as exc_info:
            manager.deactivate(order_bean.key)

        assert exc_info.value.code == ErrorCode.COMPONENT_NOT_ACTIVE
        assert exc_info.value.details["status"] == "REGISTERED"

    def test_reactivate_after_deactivate(self, manager, directory, order_bean) -> None:
        manager.register(order_bean)
        manager.activate(order_bean.key)
        manager.deactivate(order_bean.key)

        state = manager.activate(order_bean.key)

        assert state.is_active
        assert directory.total_bindings() == 6

    def test_status_callback(self, manager, order_bean) -> None:
        changes = []
        manager.set_on_status_change(lambda key, status: changes.append((key, status)))
        manager.register(order_bean)

        manager.activate(order_bean.key)
        manager.deactivate(order_bean.key)

        assert changes == [
            (order_bean.key, ComponentStatus.ACTIVE),
            (order_bean.key, ComponentStatus.INACTIVE),
        ]

    def test_observers_are_passed_to_binders(self, manager, order_bean) -> None:
        class CountingObserver:
            def __init__(self) -> None:
                self.after_calls = 0

            def before(self, operation) -> None:
                pass

            def after(self, operation) -> None:
                self.after_calls += 1

        observer = CountingObserver()
        manager.add_observer(observer)
        manager.register(order_bean)

        manager.activate(order_bean.key)

        assert observer.after_calls == 6


class TestFailureRecovery:
    def _block_module_alias(self, directory) -> object:
        blocker = object()
        directory.module_context("shop", "orders.jar").bind("OrderBean", blocker)
        return blocker

    def test_failed_activation_records_written_names(self, manager, directory, order_bean) -> None:
        self._block_module_alias(directory)
        manager.register(order_bean)

        with pytest.raises(NameCollisionError):
            manager.activate(order_bean.key)

        state = manager.get_state(order_bean.key)
        assert state.status is ComponentStatus.FAILED
        assert state.bound_names == 5
        assert directory.total_bindings() == 6

    def test_deactivate_then_reactivate_after_failed_activation(
        self, manager, directory, order_bean
    ) -> None:
        self._block_module_alias(directory)
        manager.register(order_bean)
        with pytest.raises(NameCollisionError):
            manager.activate(order_bean.key)
        directory.module_context("shop", "orders.jar").unbind("OrderBean")

        state = manager.deactivate(order_bean.key)

        assert state.status is ComponentStatus.INACTIVE
        assert state.bound_names == 0
        assert directory.total_bindings() == 0

        state = manager.activate(order_bean.key)

        assert state.status is ComponentStatus.ACTIVE
        assert directory.total_bindings() == 6

    def test_cleanup_keeps_names_owned_by_others(self, manager, directory, order_bean) -> None:
        blocker = self._block_module_alias(directory)
        manager.register(order_bean)
        with pytest.raises(NameCollisionError):
            manager.activate(order_bean.key)

        manager.deactivate(order_bean.key)

        module_context = directory.module_context("shop", "orders.jar")
        assert module_context.list_names() == ["OrderBean"]
        assert module_context.lookup("OrderBean") is blocker
        assert directory.total_bindings() == 1

    def test_activate_with_leftovers_is_rejected(self, manager, directory, order_bean) -> None:
        self._block_module_alias(directory)
        manager.register(order_bean)
        with pytest.raises(NameCollisionError):
            manager.activate(order_bean.key)
        directory.module_context("shop", "orders.jar").unbind("OrderBean")

        with pytest.raises(ComponentError) as exc_info:
            manager.activate(order_bean.key)

        assert exc_info.value.code == ErrorCode.COMPONENT_NAMES_LEFT
        assert exc_info.value.http_status == 409
        assert len(exc_info.value.details["names"]) == 5
        assert directory.total_bindings() == 5

    def test_failed_deactivate_can_be_retried(self, manager, directory, order_bean) -> None:
        manager.register(order_bean)
        manager.activate(order_bean.key)
        directory.module_context("shop", "orders.jar").unbind("OrderBean")

        with pytest.raises(NameNotFoundError):
            manager.deactivate(order_bean.key)

        state = manager.get_state(order_bean.key)
        assert state.status is ComponentStatus.FAILED
        assert state.bound_names == 5

        state = manager.deactivate(order_bean.key)

        assert state.status is ComponentStatus.INACTIVE
        assert directory.total_bindings() == 0

    def test_nothing_left_when_first_write_fails(self, manager, directory, order_bean) -> None:
        directory.global_context.bind("orders.jar/OrderBean!com.acme.OrderService", object())
        manager.register(order_bean)
        with pytest.raises(NameCollisionError):
            manager.activate(order_bean.key)

        assert manager.get_state(order_bean.key).bound_names == 0
        with pytest.raises(ComponentError) as exc_info:
            manager.deactivate(order_bean.key)

        assert exc_info.value.code == ErrorCode.COMPONENT_NOT_ACTIVE
        assert exc_info.value.details["status"] == "FAILED"

    def test_deactivate_all_cleans_failed_components(
        self, manager, directory, order_bean, invoice_bean
    ) -> None:
        self._block_module_alias(directory)
        manager.register_all([order_bean, invoice_bean])
        with pytest.raises(NameCollisionError):
            manager.activate(order_bean.key)
        manager.activate(invoice_bean.key)

        results = manager.deactivate_all()

        assert [s.key for s in results] == [invoice_bean.key, order_bean.key]
        assert manager.summary()["INACTIVE"] == 2
        assert directory.total_bindings() == 1

    def test_unregister_failed_component(self, manager, directory, order_bean) -> None:
        self._block_module_alias(directory)
        manager.register(order_bean)
        with pytest.raises(NameCollisionError):
            manager.activate(order_bean.key)

        manager.unregister(order_bean.key)

        assert manager.get_state(order_bean.key) is None
        assert manager.deactivate_all() == []


class TestBulkOperations:
    def test_activate_all_and_deactivate_all(self, manager, directory, order_bean, invoice_bean) -> None:
        manager.register_all([order_bean, invoice_bean])

        activated = manager.activate_all()

        assert [s.key for s in activated] == [order_bean.key, invoice_bean.key]
        assert directory.total_bindings() == 6 + 9
        assert manager.summary()["ACTIVE"] == 2

        deactivated = manager.deactivate_all()

        assert [s.key for s in deactivated] == [invoice_bean.key, order_bean.key]
        assert directory.total_bindings() == 0
        assert manager.summary() == {"REGISTERED": 0, "ACTIVE": 0, "FAILED": 0, "INACTIVE": 2}

    def test_activate_all_stops_at_first_failure(self, manager, directory, orders) -> None:
        clash = ComponentDescription("ClashBean", orders, business_locals=["x.A"])
        later = ComponentDescription("LaterBean", orders, home="x.Home")
        directory.module_context("shop", "orders.jar").bind("ClashBean", object())
        manager.register_all([clash, later])

        with pytest.raises(NameCollisionError):
            manager.activate_all()

        assert manager.get_state(clash.key).status is ComponentStatus.FAILED
        assert manager.get_state(later.key).status is ComponentStatus.REGISTERED

    def test_deactivate_all_continues_past_failures(
        self, manager, directory, order_bean, invoice_bean
    ) -> None:
        manager.register_all([order_bean, invoice_bean])
        manager.activate_all()
        directory.module_context("shop", "orders.jar").unbind("InvoiceBean")

        results = manager.deactivate_all()

        assert len(results) == 2
        assert manager.get_state(invoice_bean.key).status is ComponentStatus.FAILED
        assert manager.get_state(order_bean.key).status is ComponentStatus.INACTIVE


class TestPreview:
    def test_preview_lists_planned_names(self, manager, directory, order_bean) -> None:
        manager.register(order_bean)

        preview = manager.preview(order_bean.key)

        assert [entry["name"] for entry in preview if entry["scope"] == "module"] == [
            "OrderBean!com.acme.OrderService",
            "OrderBean",
        ]
        assert [entry["alias"] for entry in preview] == [False, True] * 3
        assert directory.total_bindings() == 0

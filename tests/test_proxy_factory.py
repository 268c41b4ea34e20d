"""Tests for the caching proxy factory."""

import pytest

from naming_binder.common.errors import ErrorCode, ProxyError
from naming_binder.domain.models.view import enumerate_views
from naming_binder.infrastructure.proxy.factory import CachingProxyFactory, ViewProxy


class OrderServiceImpl:
    def place_order(self, order_id: str) -> str:
        return f"placed:{order_id}"

    def __call__(self, value: int) -> int:
        return value * 2


class TestViewProxy:
    def test_resolves_lazily_and_once(self, order_bean) -> None:
        calls = []

        def resolver(view):
            calls.append(view)
            return OrderServiceImpl()

        (view,) = enumerate_views(order_bean)
        proxy = ViewProxy(view, resolver)

        assert not proxy.resolved
        assert calls == []

        assert proxy.place_order("A-1") == "placed:A-1"
        assert proxy.place_order("A-2") == "placed:A-2"
        assert proxy.resolved
        assert len(calls) == 1

    def test_forwards_calls(self, order_bean) -> None:
        (view,) = enumerate_views(order_bean)
        proxy = ViewProxy(view, lambda v: OrderServiceImpl())

        assert proxy(21) == 42

    def test_resolver_failure_becomes_proxy_error(self, order_bean) -> None:
        def resolver(view):
            raise LookupError("no implementation")

        (view,) = enumerate_views(order_bean)
        proxy = ViewProxy(view, resolver)

        with pytest.raises(ProxyError) as exc_info:
            proxy.place_order("A-1")

        assert exc_info.value.code == ErrorCode.PROXY_FAILED
        assert exc_info.value.view_type == "BUSINESS_LOCAL"
        assert not proxy.resolved

    def test_private_attributes_are_not_forwarded(self, order_bean) -> None:
        (view,) = enumerate_views(order_bean)
        proxy = ViewProxy(view, lambda v: OrderServiceImpl())

        with pytest.raises(AttributeError):
            proxy._missing

        assert not proxy.resolved

    def test_default_resolver_describes_view(self, order_bean) -> None:
        (view,) = enumerate_views(order_bean)

        proxy = CachingProxyFactory().produce(view)

        assert proxy.resolve() == {
            "interface": "com.acme.OrderService",
            "type": "BUSINESS_LOCAL",
            "component": "shop/orders.jar/OrderBean",
        }


class TestCachingProxyFactory:
    def test_one_proxy_per_view(self, invoice_bean) -> None:
        factory = CachingProxyFactory(lambda v: OrderServiceImpl())
        views = enumerate_views(invoice_bean)

        first = [factory.produce(view) for view in views]
        second = [factory.produce(view) for view in views]

        assert all(a is b for a, b in zip(first, second))
        assert factory.produced_count == 3
        assert len(factory.proxies()) == 3

    def test_clear(self, order_bean) -> None:
        factory = CachingProxyFactory()
        (view,) = enumerate_views(order_bean)
        proxy = factory.produce(view)

        factory.clear()

        assert factory.produce(view) is not proxy
        assert factory.produced_count == 2

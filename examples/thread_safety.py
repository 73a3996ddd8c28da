"""Thread Safety Example - Sharing Bundles Across Threads.

Thread Safety:
    MessageBundle is immutable and safe to share. Lazily loading providers
    synchronize internally and invoke their loader at most once per locale.
    MessageBundleBuilder is NOT thread-safe: build on one thread, freeze,
    then share the bundle.

Demonstrates:
1. Build once, share everywhere (recommended)
2. Concurrent first use of a lazily loading tier
3. Deriving per-request bundles with thaw()

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

from msgbundle import LoadingMessageSourceProvider, MapMessageSource, MessageBundle
from msgbundle.source import MessageSource


def example_1_recommended_pattern() -> None:
    """Example 1: Freeze during startup, then share the bundle for reads."""
    print("=" * 60)
    print("Example 1: Recommended Pattern - Freeze, Then Share")
    print("=" * 60)

    bundle = (
        MessageBundle.builder()
        .append_source(MapMessageSource({"hello": "Hello, %s!", "items": "%d item(s)"}))
        .freeze()
    )
    print("[STARTUP] Bundle frozen (single-threaded)")

    def handle(request_id: int) -> str:
        greeting = bundle.printf("hello", f"user-{request_id}")
        return f"{greeting} {bundle.printf('items', request_id)}"

    with ThreadPoolExecutor(max_workers=4) as executor:
        futures = [executor.submit(handle, i) for i in range(8)]
        for future in as_completed(futures):
            print(f"  {future.result()}")


def example_2_lazy_loading() -> None:
    """Example 2: Concurrent first requests share one load per locale."""
    print("\n" + "=" * 60)
    print("Example 2: Lazy Loading Under Concurrency")
    print("=" * 60)

    loads: list[str] = []
    lock = threading.Lock()

    def slow_load(locale: str) -> MessageSource | None:
        with lock:
            loads.append(locale)
        time.sleep(0.1)  # Simulates I/O
        if locale == "de":
            return MapMessageSource({"hello": "Hallo, %s!"})
        return None

    bundle = (
        MessageBundle.builder()
        .append_provider(LoadingMessageSourceProvider(slow_load))
        .append_source(MapMessageSource({"hello": "Hello, %s!"}))
        .freeze()
    )

    with ThreadPoolExecutor(max_workers=10) as executor:
        results = list(
            executor.map(lambda i: bundle.printf("hello", i, locale="de"), range(10))
        )

    print(f"  Results: {results[:3]} ...")
    print(f"  Loader calls: {loads}")  # ['de'] - exactly one


def example_3_per_request_bundles() -> None:
    """Example 3: Derive bundles per tenant without touching the shared one."""
    print("\n" + "=" * 60)
    print("Example 3: Per-Tenant Bundles with thaw()")
    print("=" * 60)

    shared = (
        MessageBundle.builder()
        .append_source(MapMessageSource({"title": "Dashboard", "logout": "Log out"}))
        .freeze()
    )
    tenants = {"acme": "ACME Console", "globex": "Globex Portal"}

    def tenant_bundle(name: str) -> MessageBundle:
        branding = MapMessageSource({"title": tenants[name]})
        return shared.thaw().prepend_source(branding).freeze()

    with ThreadPoolExecutor(max_workers=2) as executor:
        for name, bundle in zip(tenants, executor.map(tenant_bundle, tenants), strict=True):
            print(f"  {name}: {bundle.get_message('title')} / {bundle.get_message('logout')}")

    print(f"  shared: {shared.get_message('title')}")


if __name__ == "__main__":
    example_1_recommended_pattern()
    example_2_lazy_loading()
    example_3_per_request_bundles()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples completed successfully!")
    print("=" * 60)

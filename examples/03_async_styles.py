from __future__ import annotations

import asyncio
import time

from _infra import banner, run

from kungfu import Error, Ok

from lessons import MockSource, load_all, load_all_result
from lessons.asyncflow import callback, promise, suspend


async def main() -> None:
    banner("03_async_styles: callback / promise / async-await")

    source = MockSource(delay_seconds=0.2)

    print("\n[callback]")
    await callback.load_data(source=source)

    print("\n[promise: then / catch]")
    await promise.load_data(source=source)

    print("\n[async / await]")
    await suspend.load_data(source=source)

    print("\n[the loop keeps running while a timer is pending]")
    pending = asyncio.ensure_future(suspend.fetch_data(source))
    print("  doing other work...")
    print(f"  {await pending}")

    print("\n[failure, each style in its own idiom]")
    broken = MockSource(delay_seconds=0.05, failure="backend unavailable")
    await callback.load_data(source=broken)
    await promise.load_data(source=broken)
    await suspend.load_data(source=broken)

    print("\n[all: three sources at once]")
    started = time.perf_counter()
    print(f"  {await load_all([source, source, source])}")
    print(f"  took ~{time.perf_counter() - started:.1f}s, not 0.6s")

    match await load_all_result([source, broken])():
        case Ok(values):
            print(f"  {values}")
        case Error(err):
            print(f"  first failure: {err.reason}")


if __name__ == "__main__":
    run(main)

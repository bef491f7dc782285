from __future__ import annotations

from _infra import Probe, banner, run

from deferred import lift as L


def main() -> None:
    banner("02_call_by_need: suspend re-runs, cache runs once")

    probe = Probe("answer")
    answer = L.up.suspend(probe.wrap(lambda: 6 * 7))
    answer()
    answer()
    print(f"suspend: {probe.runs} runs")  # 2

    probe = Probe("answer")
    cached = L.up.suspend(probe.wrap(lambda: 6 * 7)).cache()
    cached()
    cached()
    print(f"cache: {probe.runs} runs")  # 1

    banner("failures stay in the force")
    broken = L.up.suspend(lambda: 1 // 0).map(str)
    print(L.down.to_result(broken))
    print(L.down.or_else(broken, "n/a"))


if __name__ == "__main__":
    run(main)

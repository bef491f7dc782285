from __future__ import annotations

from _infra import banner, run

from deferred import (
    by_subtraction,
    counting,
    map_sequence,
    partition_sort,
    partition_sort_writer,
    to_concrete_sequence,
    to_deferred_sequence,
)


def main() -> None:
    banner("01_partition_sort: sort, then map, without forcing elements")

    unsorted = to_deferred_sequence([2, 4, 1, 3])
    comparator, counter = counting(by_subtraction)

    ordered = partition_sort(unsorted, comparator)
    print(to_concrete_sequence(ordered))  # [1, 2, 3, 4]
    print(f"comparisons forced: {counter.forced}")

    doubled = map_sequence(ordered, lambda x: x * 2)
    print(to_concrete_sequence(doubled))  # [2, 4, 6, 8]

    banner("partition trace")
    wr = partition_sort_writer(to_deferred_sequence([3, 1, 2]))()
    for entry in wr.log:
        print(entry)
    print(to_concrete_sequence(wr.value))


if __name__ == "__main__":
    run(main)

"""
Demonstration driver for the binary heap.

Prints a sample run of every public heap operation, followed by a randomized
heap-sort run with a sortedness check.

Usage:
    python -m indexed_heap.Demo.demo --keys 5 23 3 9 6 15 19 --num_random 25 --seed 51 --log_path runs/demo.txt
"""

import argparse
from typing import Any, Callable, List, Optional

import numpy as np

from indexed_heap.Binary_Heap import (
    BinaryHeap,
    HeapElement,
    HeapError,
    heap_sort,
    heap_sort_keys
)
from indexed_heap.utils import tee_stdout


DEFAULT_KEYS = [5, 23, 3, 9, 6, 15, 19]
DEFAULT_NUM_RANDOM = 25
DEFAULT_SEED = 51
MAX_RANDOM_KEY = 100


class HeapDemo:
    def __init__(self, argv: Optional[List[str]] = None):
        parser = argparse.ArgumentParser(description="Sample runs of the indexed binary max-heap")

        # -----------------------
        # Sample run config
        # -----------------------
        parser.add_argument("--keys", type=int, nargs="+", default=DEFAULT_KEYS, help="Keys for the sample run")

        # -----------------------
        # Randomized sort config
        # -----------------------
        parser.add_argument("--num_random", type=int, default=DEFAULT_NUM_RANDOM, help="Number of random keys to heap-sort")
        parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed")

        # -----------------------
        # Logging
        # -----------------------
        parser.add_argument("--log_path", type=str, default=None, help="Tee all output to this file")

        self.args = parser.parse_args(argv)

        if self.args.num_random < 0:
            parser.error(f"--num_random must be non-negative, got {self.args.num_random}")

    def run(self) -> None:
        with tee_stdout(self.args.log_path):
            print("\n========== Demo Config ==========")
            for k, v in sorted(vars(self.args).items()):
                print(f"{k:15s}: {v}")
            print("=================================\n")

            self.sample_run()
            self.random_sort_run()

    def sample_run(self) -> None:
        print("[sample_run]")
        elements = [HeapElement(key, "data") for key in self.args.keys]

        sorted_elements = heap_sort(elements)
        print(f"Sort array using heap_sort(): {' '.join(str(e.key) for e in sorted_elements)}")

        heap = BinaryHeap.build_heap(elements)
        print(f"Build heap: {heap}")

        self._step("Delete top 3 elements", lambda: [heap.delete_max().key for _ in range(min(3, heap.size))])
        print(f"Heap after deletion: {heap}")

        self._step("Insert 20", lambda: heap.insert(HeapElement(20, "Some data")))
        self._step("Insert 30", lambda: heap.insert(HeapElement(30, "More data")))
        print(f"Heap after insertion: {heap}")

        self._step("Top data", lambda: heap.find_max().data)

        self._step("Increase key at index 4 by 20", lambda: heap.increase_key(4, 20))
        print(f"Heap: {heap}")
        self._step("Decrease key at index 3 by 18", lambda: heap.decrease_key(3, 18))
        print(f"Heap: {heap}")
        self._step("Delete index 2", lambda: heap.delete(2))
        print(f"Heap: {heap}\n")

    def random_sort_run(self) -> None:
        print("[random_sort_run]")
        rng = np.random.default_rng(self.args.seed)
        keys = rng.integers(0, MAX_RANDOM_KEY, size=self.args.num_random)

        print(f"Array before sort: {', '.join(str(k) for k in keys.tolist())}")
        sorted_keys = heap_sort_keys(keys)
        print(f"Array after sort: {', '.join(str(k) for k in sorted_keys.tolist())}")

        is_sorted = bool(np.all(sorted_keys[:-1] <= sorted_keys[1:])) if len(sorted_keys) > 1 else True
        print(f"Sorted: {is_sorted}\n")

    @staticmethod
    def _step(label: str, op: Callable[[], Any]) -> Any:
        """Run one heap operation, printing its result or the heap error it raised."""
        try:
            result = op()
        except HeapError as err:
            print(f"{label}: [{err.kind.value}] {err.message}")
            return None

        if result is None:
            print(f"{label}: ok")
        else:
            print(f"{label}: {result}")
        return result


def main(argv: Optional[List[str]] = None) -> None:
    HeapDemo(argv).run()


if __name__ == "__main__":
    main()

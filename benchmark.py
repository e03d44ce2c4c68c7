import random
import statistics
import time
import tracemalloc

from synchronous_heap import Heap, MaxHeap, SynchronousHeap


def numeric_compare(a, b):
    return a - b


class PerformanceBenchmark:
    def __init__(self, seed: int = 42):
        self.latencies = []
        self.rng = random.Random(seed)

    def _timed(self, fn, *args):
        start_time = time.perf_counter()
        result = fn(*args)
        self.latencies.append((time.perf_counter() - start_time) * 1_000_000)
        return result

    def _report_metrics(self, test_name: str, duration: float, num_ops: int):
        throughput = num_ops / duration
        avg_latency = statistics.mean(self.latencies)
        p50 = statistics.median(self.latencies)
        p99 = statistics.quantiles(self.latencies, n=100)[98] if len(self.latencies) >= 100 else max(self.latencies)

        print(f"\n{'=' * 60}")
        print(f"  {test_name}")
        print(f"{'=' * 60}")
        print(f"  Operations:  {num_ops}")
        print(f"  Duration:    {duration:.3f}s")
        print(f"  Throughput:  {throughput:,.0f} ops/s")
        print(f"  Avg Latency: {avg_latency:.2f}us")
        print(f"  p50 Latency: {p50:.2f}us")
        print(f"  p99 Latency: {p99:.2f}us")
        print(f"{'=' * 60}")

        return {
            "throughput": throughput,
            "avg_latency": avg_latency,
            "p50": p50,
            "p99": p99,
        }

    def _reset(self):
        self.latencies.clear()

    def run_insert_extract_test(self, num_items: int = 10000):
        self._reset()
        heap = Heap(numeric_compare)
        values = [self.rng.randint(0, num_items) for _ in range(num_items)]

        start_time = time.perf_counter()
        for value in values:
            self._timed(heap.insert, value)
        while not heap.is_empty():
            self._timed(heap.extract_root)
        duration = time.perf_counter() - start_time

        return self._report_metrics(f"Insert + Extract ({num_items} items)", duration, num_items * 2)

    def run_heapify_sort_test(self, num_items: int = 10000, rounds: int = 20):
        self._reset()

        start_time = time.perf_counter()
        for _ in range(rounds):
            values = [self.rng.randint(0, 100) for _ in range(num_items)]
            heap = self._timed(Heap.heapify, values, numeric_compare)
            self._timed(heap.sort)
        duration = time.perf_counter() - start_time

        return self._report_metrics(f"Heapify + Sort ({rounds} x {num_items} items)", duration, rounds * 2)

    def run_max_heap_test(self, num_items: int = 10000):
        self._reset()
        heap = MaxHeap(lambda item: item["score"])

        start_time = time.perf_counter()
        for i in range(num_items):
            self._timed(heap.push, {"id": i, "score": self.rng.random()})
        while not heap.is_empty():
            self._timed(heap.pop)
        duration = time.perf_counter() - start_time

        return self._report_metrics(f"MaxHeap Push + Pop ({num_items} items)", duration, num_items * 2)

    def run_synchronous_test(self, num_items: int = 10000):
        self._reset()
        heap = SynchronousHeap()

        start_time = time.perf_counter()
        for i in range(num_items):
            self._timed(heap.push, i)
        duration = time.perf_counter() - start_time

        print(f"\n  Top after {num_items} pushes: {heap.top()}")
        return self._report_metrics(f"SynchronousHeap Push ({num_items} items)", duration, num_items)

    def run_all_benchmarks(self):
        print("\n" + "#" * 60)
        print("  SYNCHRONOUS HEAP - PERFORMANCE BENCHMARK")
        print("#" * 60)

        tracemalloc.start()

        results = {}
        results["insert_extract"] = self.run_insert_extract_test()
        results["heapify_sort"] = self.run_heapify_sort_test()
        results["max_heap"] = self.run_max_heap_test()
        results["synchronous"] = self.run_synchronous_test()

        peak_memory = tracemalloc.get_traced_memory()[1]
        tracemalloc.stop()

        print(f"\n{'=' * 60}")
        print(f"  MEMORY")
        print(f"{'=' * 60}")
        print(f"  Peak Memory Usage: {peak_memory / 1024:.1f} KB ({peak_memory / (1024*1024):.2f} MB)")
        print(f"{'=' * 60}")

        print(f"\n{'#' * 60}")
        print(f"  SUMMARY")
        print(f"{'#' * 60}")
        ie = results["insert_extract"]
        print(f"  Insert/Extract: {ie['throughput']:,.0f} ops/s")
        print(f"  p99 Latency:    {ie['p99']:.2f}us")
        print(f"  Peak Memory:    {peak_memory / 1024:.1f} KB")
        print(f"{'#' * 60}\n")

        return results


def main():
    benchmark = PerformanceBenchmark()
    benchmark.run_all_benchmarks()


if __name__ == "__main__":
    main()

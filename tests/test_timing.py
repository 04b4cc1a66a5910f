import time

from parallab.timing import bench_traverse


def test_calls_function_exactly_once():
    calls = []
    bench_traverse(lambda: calls.append(1))
    assert calls == [1]


def test_result_is_non_negative_integer_text():
    result = bench_traverse(lambda: None)
    assert result.isdigit()
    assert int(result) >= 0


def test_measures_sleep_duration():
    result = bench_traverse(lambda: time.sleep(0.03))
    assert int(result) >= 20


def test_fast_call_measures_less_than_slow_call():
    fast = int(bench_traverse(lambda: None))
    slow = int(bench_traverse(lambda: time.sleep(0.05)))
    assert fast < slow
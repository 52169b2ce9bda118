#!/usr/bin/env python3
"""
Benchmark script for Easter computation and the BYEASTER transform.
"""

import timeit
import datetime
from easterrule.easter import easter_sunday
from easterrule.rrule import byeaster, DAILY

# Test data setup
yearly_dates = [datetime.date(year, 1, 1) for year in range(1900, 2100)]
daily_dates = [datetime.datetime(2024, 1, 1, 12) + datetime.timedelta(days=n)
               for n in range(366)]

# Holy week and Pentecost
offsets = (-7, -3, -2, 0, 1, 39, 49, 50)
expand_rule = byeaster(offsets)
limit_rule = byeaster(offsets, DAILY)

test_cases = [
    ("easter_sunday", "easter_sunday(2024)", {"easter_sunday": easter_sunday}),
    ("easter_sunday_julian", "easter_sunday(1500)", {"easter_sunday": easter_sunday}),
    ("expand_200_years", "rule.transform(dates)",
     {"rule": expand_rule, "dates": yearly_dates}),
    ("limit_one_year", "rule.transform(dates)",
     {"rule": limit_rule, "dates": daily_dates}),
]


def benchmark_operation(name, expression, globals_dict, iterations=2000):
    """Benchmark a single operation."""
    time_taken = timeit.timeit(expression, globals=globals_dict, number=iterations)
    return {
        'name': name,
        'expression': expression,
        'time': time_taken,
        'ops_per_sec': iterations / time_taken,
        'iterations': iterations
    }


def run_benchmarks():
    """Run all benchmark tests."""
    print("Easter / BYEASTER Performance Benchmark")
    print("=" * 60)

    for name, expression, globals_dict in test_cases:
        result = benchmark_operation(name, expression, globals_dict)
        print(f"{result['name']:<24} {result['time']:8.4f}s "
              f"{result['ops_per_sec']:12.1f} ops/sec")


if __name__ == "__main__":
    run_benchmarks()

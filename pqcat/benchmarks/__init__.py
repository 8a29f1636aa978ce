"""Benchmark configurations, repeated runs and result statistics."""
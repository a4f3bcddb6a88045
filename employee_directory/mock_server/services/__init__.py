"""
Service layer of the mock employee store.

``EmployeeStore`` owns the records; ``SlidingWindowRateLimiter``
decides when callers receive HTTP 429.
"""

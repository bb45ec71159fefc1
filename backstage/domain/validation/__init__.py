"""
VALIDATION - Error primitives and validation strategies

- error.py       → Error (a single validation message)
- handler.py     → ValidationHandler (strategy interface), Validation[T]
- notification.py → Notification (collects every error before reporting)
- fail_fast.py   → FailFast (raises on the first error)
- result.py      → ValidationResult (value or ordered list of errors)

Import from the submodules directly; domain.exceptions depends on error.py.
"""

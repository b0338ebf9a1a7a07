"""
Custom exceptions for the testing-technique catalogue.
"""

from typing import Any, Iterable

# canonical catalogue-level exception

class TestlabError(Exception):
    """
    Base exception for technique and self-check errors.

    - message: human-friendly message (safe to print on the console)
    - fields: optional list of argument names related to the error (e.g., ['n'])
    - error_code: canonical short code (e.g., 'invalid_input', 'self_check_failed')
    """

    # Keep pytest from collecting this class when imported into a test module.
    __test__ = False

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields) if fields else None
        self.error_code = error_code

    def __str__(self) -> str:
        base = self.message
        parts = []
        if self.fields:
            parts.append(f"fields: {', '.join(self.fields)}")
        if self.error_code:
            parts.append(f"code: {self.error_code}")
        if parts:
            return f"{base} ({'; '.join(parts)})"
        return base

    def to_payload(self) -> dict[str, Any]:
        """
        Return a JSON-serializable dict describing the error.
        Standard shape:
            {
                "detail": "A human-friendly message",
                "code": "invalid_input",       # optional canonical code
                "fields": ["n"],               # optional list of argument names
            }
        The CLI passes this dict as `extra=` so the JSON formatter emits it as fields.
        """
        payload: dict[str, Any] = {"detail": self.message}
        if self.error_code:
            payload["code"] = self.error_code
        if self.fields:
            payload["fields"] = list(self.fields)
        return payload


class InvalidInputError(TestlabError, ValueError):
    """Raised when a computational function receives an argument outside its mathematical domain."""

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="invalid_input")


class SelfCheckError(TestlabError, AssertionError):
    """
    Raised by the self-check helpers when a technique does not behave as its case table says.

    Carries the `subject` (the call under check, e.g. "check_range(0)"), the expected
    value and the actual value so the failure can be reported without a traceback.
    """

    def __init__(self, subject: str, *, expected: Any, actual: Any):
        super().__init__(
            f"{subject}: expected {expected!r}, got {actual!r}",
            error_code="self_check_failed",
        )
        self.subject = subject
        self.expected = expected
        self.actual = actual

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["subject"] = self.subject
        payload["expected"] = repr(self.expected)
        payload["actual"] = repr(self.actual)
        return payload


class UnknownLocaleError(TestlabError, LookupError):
    def __init__(self, locale: str, *, available: Iterable[str] = ()):
        available = sorted(available)
        message = f"Unknown locale {locale!r}"
        if available:
            message += f"; available: {', '.join(available)}"
        super().__init__(message, fields=["locale"], error_code="unknown_locale")
        self.locale = locale


__all__ = [
    "TestlabError",
    "InvalidInputError",
    "SelfCheckError",
    "UnknownLocaleError",
]


r"""
# =================================================================================================================
# Two Error Policies
# =================================================================================================================

1. Returned status (validation-style functions)
```
    check_range(0)             -> Status.FAILURE
    evaluate_combination(2, False) -> Status.FAILURE
```
An input that is "wrong" for a validator is still a perfectly normal input: answering FAILURE is the
function's job, so nothing is raised.

2. Raised exception (computational functions)
```
    factorial(-1)  -> raises InvalidInputError
    fibonacci(-1)  -> raises InvalidInputError
```
A negative n is outside the mathematical domain of n! and F(n); there is no sensible value to return.
`InvalidInputError` also subclasses `ValueError`, so callers that only know the builtin still catch it:
```
    try:
        factorial(-1)
    except ValueError:
        ...
```

| Exception            | Also a           | error_code          | Raised by                          |
| -------------------- | ---------------- | ------------------- | ---------------------------------- |
| `InvalidInputError`  | `ValueError`     | `invalid_input`     | `factorial`, `fibonacci`           |
| `SelfCheckError`     | `AssertionError` | `self_check_failed` | `expect_equal`, `expect_raises`    |
| `UnknownLocaleError` | `LookupError`    | `unknown_locale`    | `get_catalog`, `classify_number`   |

`SelfCheckError` is an `AssertionError` because it plays the role `assert` plays in a
hand-written test, but it is raised explicitly so it still fires under `python -O`.
"""

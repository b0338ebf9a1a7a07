"""
Elementary numeric algorithms used as test subjects.
"""

from ..exceptions import InvalidInputError


def factorial(n: int) -> int:
    """
    Compute n! iteratively.

    Args:
        n: integer >= 0.

    Returns:
        n!, with 0! == 1! == 1. Python ints are unbounded, so large n does not overflow.

    Raises:
        InvalidInputError: if n < 0 (also a ValueError, like math.factorial).
    """
    if n < 0:
        raise InvalidInputError("factorial() not defined for negative values", fields=["n"])
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def fibonacci(n: int) -> int:
    """
    Compute the n-th Fibonacci number iteratively, with F(0) = 0 and F(1) = 1.

    O(n) time, O(1) space.

    Raises:
        InvalidInputError: if n < 0.
    """
    if n < 0:
        raise InvalidInputError("fibonacci() not defined for negative values", fields=["n"])
    if n == 0:
        return 0
    if n == 1:
        return 1
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def is_prime(n: int) -> bool:
    # Multiples of 2 and 3 are ruled out first; every remaining candidate
    # divisor up to sqrt(n) has the form 6k - 1 or 6k + 1.
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True

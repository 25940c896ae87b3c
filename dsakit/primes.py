"""Prime generation by the Sieve of Eratosthenes."""


def sieve(limit: int) -> list[int]:
    """Return all primes less than or equal to ``limit``."""
    if limit < 2:
        return []
    is_prime = [True] * (limit + 1)
    is_prime[0] = is_prime[1] = False
    candidate = 2
    while candidate * candidate <= limit:
        if is_prime[candidate]:
            is_prime[candidate * candidate :: candidate] = [False] * len(
                range(candidate * candidate, limit + 1, candidate)
            )
        candidate += 1
    return [number for number, prime in enumerate(is_prime) if prime]
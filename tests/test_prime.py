from aclib.prime import factorization, fast_primes


def test_fast_sieve0():
    assert fast_primes(0) == []


def test_fast_sieve1():
    assert fast_primes(1) == []


def test_fast_sieve2():
    assert fast_primes(2) == [2]


def test_fast_sieve30():
    assert fast_primes(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_fast_sieve100():
    assert fast_primes(100) == [
        2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79,
        83, 89, 97,
    ]


def test_factorization_bound1():
    assert factorization(0) == {0: 1}
    assert factorization(1) == {1: 1}


def test_factorization_bound2():
    assert factorization(2) == {2: 1}
    assert factorization(4) == {2: 2}
    assert factorization(8) == {2: 3}
    assert factorization(16) == {2: 4}
    assert factorization(15) == {3: 1, 5: 1}
    assert factorization(60) == {2: 2, 3: 1, 5: 1}
    assert factorization(300) == {2: 2, 3: 1, 5: 2}


def test_factorization_large_prime():
    assert factorization(97) == {97: 1}
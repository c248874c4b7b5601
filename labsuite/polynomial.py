"""Polynomial multiplication, evaluation and differentiation over several number types."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Callable, Iterable, Iterator, Sequence

_BASE_CASE = 4


@dataclass(frozen=True)
class GaussianInt:
    """Complex number with integer real and imaginary parts."""

    real: int = 0
    imag: int = 0

    @staticmethod
    def _coerce(value: object) -> GaussianInt | None:
        if isinstance(value, GaussianInt):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return GaussianInt(value)
        return None

    def __add__(self, other: object) -> GaussianInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return GaussianInt(self.real + o.real, self.imag + o.imag)

    __radd__ = __add__

    def __sub__(self, other: object) -> GaussianInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return GaussianInt(self.real - o.real, self.imag - o.imag)

    def __rsub__(self, other: object) -> GaussianInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: object) -> GaussianInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return GaussianInt(
            self.real * o.real - self.imag * o.imag,
            self.real * o.imag + self.imag * o.real,
        )

    __rmul__ = __mul__

    def __neg__(self) -> GaussianInt:
        return GaussianInt(-self.real, -self.imag)

    def __str__(self) -> str:
        return f"{self.real} {self.imag}"


def _zero_like(values: Sequence[Any]) -> Any:
    return type(values[0])()


def multiply(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Product of two coefficient lists (lowest degree first) by direct convolution."""
    if not a and not b:
        raise ValueError("cannot multiply two empty polynomials")
    zero = _zero_like(a or b)
    result = [zero] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            result[i + j] = result[i + j] + x * y
    return result


def _padded_sum(low: Sequence[Any], high: Sequence[Any], zero: Any) -> list[Any]:
    return [x + y for x, y in zip_longest(low, high, fillvalue=zero)]


def karatsuba(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Product of two coefficient lists using Karatsuba's divide and conquer."""
    n, m = len(a), len(b)
    if n <= _BASE_CASE or m <= _BASE_CASE:
        return multiply(a, b)

    zero = _zero_like(a)
    half = n // 2
    split = min(half, m)
    a_low, a_high = list(a[:half]), list(a[half:])
    b_low, b_high = list(b[:split]), list(b[split:])

    z0 = karatsuba(a_low, b_low)
    z2 = karatsuba(a_high, b_high)
    z1 = karatsuba(_padded_sum(a_low, a_high, zero), _padded_sum(b_low, b_high, zero))

    result = [zero] * (n + m - 1)
    for i, c in enumerate(z0):
        result[i] = result[i] + c
        if i < len(z1):
            z1[i] = z1[i] - c
    for i, c in enumerate(z2):
        # When b has no high half, z2 is all zeros and may reach past the end.
        if i + 2 * half < len(result):
            result[i + 2 * half] = result[i + 2 * half] + c
        if i < len(z1):
            z1[i] = z1[i] - c
    for i, c in enumerate(z1):
        result[i + half] = result[i + half] + c
    return result


def evaluate(coefficients: Sequence[Any], x: Any) -> Any:
    """Value of the polynomial at x by Horner's rule; 0 for no coefficients."""
    value = _zero_like(coefficients) if coefficients else 0
    for c in reversed(coefficients):
        value = value * x + c
    return value


def repeat_evaluate(coefficients: Sequence[str], x: int) -> str:
    """String 'evaluation': each word repeated x**i times, highest degree first."""
    parts = []
    power = 1
    for word in coefficients:
        parts.append(word * power)
        power *= x
    return "".join(reversed(parts))


def differentiate(coefficients: Sequence[Any]) -> list[Any]:
    """Coefficients of the derivative, lowest degree first."""
    return [c * power for power, c in enumerate(coefficients) if power]


def _format(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)


class _Exhausted(Exception):
    """Raised when the token stream runs out."""


def _run(words: Iterable[str]) -> Iterator[str]:
    tokens = iter(words)

    def take() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise _Exhausted from None

    def read_int() -> int:
        return int(take())

    def read_float() -> float:
        return float(take())

    def read_gaussian() -> GaussianInt:
        return GaussianInt(read_int(), read_int())

    def read_poly(read: Callable[[], Any]) -> list[Any]:
        return [read() for _ in range(read_int())]

    try:
        for _ in range(read_int()):
            op, datatype = read_int(), take()
            if op == 1:
                read = {"integer": read_int, "float": read_float}.get(datatype, read_gaussian)
                first, second = read_poly(read), read_poly(read)
                yield " ".join(_format(c) for c in karatsuba(first, second))
            elif op == 2:
                if datatype == "integer":
                    coefficients = read_poly(read_int)
                    yield _format(evaluate(coefficients, read_int()))
                elif datatype == "float":
                    coefficients = read_poly(read_float)
                    yield _format(float(evaluate(coefficients, read_int())))
                else:
                    coefficients = read_poly(take)
                    yield repeat_evaluate(coefficients, read_int())
            else:
                read = read_int if datatype == "integer" else read_float
                yield "".join(f"{_format(c)} " for c in differentiate(read_poly(read)))
    except _Exhausted:
        return


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Answer polynomial queries read from standard input.")
    parser.parse_args(argv)
    for line in _run(sys.stdin.read().split()):
        print(line)


if __name__ == "__main__":
    main()
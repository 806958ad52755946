"""Quantile functions and CDFs of common distributions, for test data."""

from __future__ import annotations

import math
from collections.abc import Callable
from statistics import NormalDist

__all__ = [
    "QuantileFunction",
    "CDF",
    "uniform_q",
    "u_quadratic_q",
    "truncate_q",
    "truncate_cdf",
    "exponential_cdf",
    "exponential_q",
    "normal_cdf",
    "normal_q",
]

QuantileFunction = Callable[[float], float]
CDF = Callable[[float], float]

_STANDARD_NORMAL = NormalDist()


def _div(numerator: float, denominator: float) -> float:
    """IEEE division: infinities and NaN instead of ZeroDivisionError."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _log(x: float) -> float:
    if x == 0:
        return -math.inf
    if x < 0 or math.isnan(x):
        return math.nan
    return math.log(x)


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def uniform_q(a: float, b: float) -> QuantileFunction:
    """Quantile function of the uniform distribution on [a, b]."""
    return lambda q: (b - a) * q + a


def u_quadratic_q(a: float, b: float) -> QuantileFunction:
    """Quantile function of the U-quadratic distribution on [a, b]."""

    def quantile(q: float) -> float:
        alpha = _div(12.0, math.pow(b - a, 3))
        beta = (b + a) / 2.0
        t = _div(3.0, alpha) * q - math.pow(beta - a, 3)
        sign = -1.0 if t < 0 else 1.0
        return beta + sign * math.pow(sign * t, 1.0 / 3.0)

    return quantile


def truncate_q(a: float, b: float, quantile: QuantileFunction, cdf: CDF) -> QuantileFunction:
    """Truncate a quantile function to [a, b], given its CDF."""

    def h(cdfx: float) -> float:
        return (cdf(b) - cdf(a)) * cdfx + cdf(a)

    def truncated(q: float) -> float:
        if q == 0:
            return a
        if q == 1:
            return b
        return quantile(h(q))

    return truncated


def truncate_cdf(a: float, b: float, cdf: CDF) -> CDF:
    """Truncate a CDF to (a, b)."""
    return lambda x: _div(cdf(x) - cdf(a), cdf(b) - cdf(a))


def exponential_cdf(lam: float) -> CDF:
    """CDF of the exponential distribution with rate lam."""

    def cdf(x: float) -> float:
        if x < 0:
            return 0.0
        return 1 - _exp(-lam * x)

    return cdf


def exponential_q(lam: float) -> QuantileFunction:
    """Quantile function of the exponential distribution with rate lam."""
    return lambda q: _div(-_log(1 - q), lam)


def normal_cdf(mu: float, sigma: float) -> CDF:
    """CDF of the normal distribution with mean mu and deviation sigma."""
    return lambda x: 0.5 * (1 + math.erf(_div(x - mu, sigma * math.sqrt(2))))


def normal_q(mu: float, sigma: float) -> QuantileFunction:
    """Quantile function of the normal distribution with mean mu and deviation sigma."""

    def quantile(q: float) -> float:
        if math.isnan(q) or q < 0 or q > 1:
            return math.nan
        if q == 0:
            z = -math.inf
        elif q == 1:
            z = math.inf
        else:
            z = _STANDARD_NORMAL.inv_cdf(q)
        return mu + sigma * z

    return quantile
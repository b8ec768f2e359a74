"""Arithmetic on the alt_bn128 curve and its optimal ate pairing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Union

FIELD_MODULUS = 21888242871839275222246405745257275088696311157297823662689037894645226208583
CURVE_ORDER = 21888242871839275222246405745257275088548364400416034343698204186575808495617

P = FIELD_MODULUS
N = CURVE_ORDER

_ATE_LOOP_COUNT = 29793968203157093288
_LOG_ATE_LOOP_COUNT = 63


def _deg(poly: Sequence[int]) -> int:
    d = len(poly) - 1
    while d and poly[d] == 0:
        d -= 1
    return d


def _poly_rounded_div(a: Sequence[int], b: Sequence[int]) -> list[int]:
    dega, degb = _deg(a), _deg(b)
    temp = list(a)
    out = [0] * len(a)
    lead_inv = pow(b[degb], -1, P)
    for i in range(dega - degb, -1, -1):
        out[i] = (out[i] + temp[degb + i] * lead_inv) % P
        for c, bc in enumerate(b[: degb + 1]):
            temp[c + i] -= bc * out[i]
    return [x % P for x in out[: _deg(out) + 1]]


class _FQP:
    """An element of a polynomial extension of the base field."""

    degree: int = 0
    modulus_coeffs: tuple[int, ...] = ()

    __slots__ = ("coeffs",)

    def __init__(self, coeffs: Iterable[int]) -> None:
        values = tuple(c % P for c in coeffs)
        if len(values) != self.degree:
            raise ValueError(f"expected {self.degree} coefficients")
        self.coeffs = values

    @classmethod
    def one(cls):
        return cls([1] + [0] * (cls.degree - 1))

    @classmethod
    def zero(cls):
        return cls([0] * cls.degree)

    def is_zero(self) -> bool:
        return not any(self.coeffs)

    def __add__(self, other):
        if isinstance(other, int):
            return type(self)([self.coeffs[0] + other, *self.coeffs[1:]])
        return type(self)(a + b for a, b in zip(self.coeffs, other.coeffs))

    __radd__ = __add__

    def __neg__(self):
        return type(self)(-c for c in self.coeffs)

    def __sub__(self, other):
        return self + (-other)

    def __rsub__(self, other):
        return (-self) + other

    def __mul__(self, other):
        if isinstance(other, int):
            return type(self)(c * other for c in self.coeffs)
        d = self.degree
        prod = [0] * (2 * d - 1)
        for i, a in enumerate(self.coeffs):
            if a:
                for j, b in enumerate(other.coeffs):
                    prod[i + j] += a * b
        while len(prod) > d:
            exp = len(prod) - d - 1
            top = prod.pop()
            if top:
                for i, mc in enumerate(self.modulus_coeffs):
                    prod[exp + i] -= top * mc
        return type(self)(prod)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, int):
            return self * pow(other, -1, P)
        return self * other.inverse()

    def __pow__(self, exponent: int):
        result = type(self).one()
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    def _euclid_inverse(self):
        if self.is_zero():
            raise ZeroDivisionError("zero has no inverse")
        d = self.degree
        lm, hm = [1] + [0] * d, [0] * (d + 1)
        low = list(self.coeffs) + [0]
        high = list(self.modulus_coeffs) + [1]
        while _deg(low):
            r = _poly_rounded_div(high, low)
            r += [0] * (d + 1 - len(r))
            nm = list(hm)
            new = list(high)
            for i in range(d + 1):
                for j in range(d + 1 - i):
                    nm[i + j] -= lm[i] * r[j]
                    new[i + j] -= low[i] * r[j]
            nm = [x % P for x in nm]
            new = [x % P for x in new]
            lm, low, hm, high = nm, new, lm, low
        return type(self)(lm[:d]) / low[0]

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.coeffs == other.coeffs

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.coeffs))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.coeffs)})"


class Fq2(_FQP):
    """Quadratic extension: a + b*u with u^2 = -1."""

    degree = 2
    modulus_coeffs = (1, 0)
    __slots__ = ()

    def inverse(self) -> Fq2:
        """Return the multiplicative inverse; raises ZeroDivisionError for zero."""
        if self.is_zero():
            raise ZeroDivisionError("zero has no inverse")
        a, b = self.coeffs
        norm_inv = pow(a * a + b * b, -1, P)
        return Fq2([a * norm_inv, -b * norm_inv])


class Fq12(_FQP):
    """Degree-12 extension with w^12 = 18*w^6 - 82."""

    degree = 12
    modulus_coeffs = (82, 0, 0, 0, 0, 0, -18, 0, 0, 0, 0, 0)
    __slots__ = ()

    def inverse(self) -> Fq12:
        """Return the multiplicative inverse; raises ZeroDivisionError for zero."""
        return self._euclid_inverse()


G1Point = Union[tuple[int, int], None]
G2Point = Union[tuple[Fq2, Fq2], None]

B = 3
B2 = Fq2([3, 0]) / Fq2([9, 1])
B12 = Fq12([3] + [0] * 11)

G1 = (1, 2)
G2 = (
    Fq2([
        10857046999023057135944570762232829481370756359578518086990519993285655852781,
        11559732032986387107991004021392285783925812861821192530917403151452391805634,
    ]),
    Fq2([
        8495653923123431417604973247489272438418190587263600148770280649306958101930,
        4082367875863433681332203403145435568316851327593401208105741076214120093531,
    ]),
)

_W = Fq12([0, 1] + [0] * 10)


def g1_is_on_curve(p: G1Point) -> bool:
    """Whether ``p`` (affine, ``None`` for infinity) lies on y^2 = x^3 + 3."""
    if p is None:
        return True
    x, y = p
    return (y * y - x * x * x - B) % P == 0


def g1_add(p: G1Point, q: G1Point) -> G1Point:
    """Add two G1 points."""
    if p is None:
        return q
    if q is None:
        return p
    x1, y1 = p
    x2, y2 = q
    if x1 == x2:
        if (y1 + y2) % P == 0:
            return None
        m = 3 * x1 * x1 * pow(2 * y1, -1, P) % P
    else:
        m = (y2 - y1) * pow(x2 - x1, -1, P) % P
    x3 = (m * m - x1 - x2) % P
    return x3, (m * (x1 - x3) - y1) % P


def g1_mul(p: G1Point, n: int) -> G1Point:
    """Multiply a G1 point by a non-negative scalar."""
    result: G1Point = None
    addend = p
    while n:
        if n & 1:
            result = g1_add(result, addend)
        addend = g1_add(addend, addend)
        n >>= 1
    return result


def _ext_add(p, q):
    if p is None:
        return q
    if q is None:
        return p
    x1, y1 = p
    x2, y2 = q
    if x1 == x2:
        if (y1 + y2).is_zero():
            return None
        m = 3 * x1 * x1 / (2 * y1)
    else:
        m = (y2 - y1) / (x2 - x1)
    x3 = m * m - x1 - x2
    return x3, m * (x1 - x3) - y1


def _ext_mul(p, n: int):
    result = None
    addend = p
    while n:
        if n & 1:
            result = _ext_add(result, addend)
        addend = _ext_add(addend, addend)
        n >>= 1
    return result


def g2_is_on_curve(p: G2Point) -> bool:
    """Whether ``p`` lies on the twisted curve y^2 = x^3 + 3/(9+u)."""
    if p is None:
        return True
    x, y = p
    return y * y - x * x * x == B2


def g2_add(p: G2Point, q: G2Point) -> G2Point:
    """Add two G2 points."""
    return _ext_add(p, q)


def g2_mul(p: G2Point, n: int) -> G2Point:
    """Multiply a G2 point by a non-negative scalar."""
    return _ext_mul(p, n)


def g2_in_subgroup(p: G2Point) -> bool:
    """Whether ``p`` lies in the prime-order subgroup."""
    return g2_mul(p, N) is None


def _twist(p: tuple[Fq2, Fq2]) -> tuple[Fq12, Fq12]:
    x, y = p
    xc = (x.coeffs[0] - 9 * x.coeffs[1], x.coeffs[1])
    yc = (y.coeffs[0] - 9 * y.coeffs[1], y.coeffs[1])
    nx = Fq12([xc[0], 0, 0, 0, 0, 0, xc[1], 0, 0, 0, 0, 0])
    ny = Fq12([yc[0], 0, 0, 0, 0, 0, yc[1], 0, 0, 0, 0, 0])
    return nx * _W**2, ny * _W**3


def _linefunc(p1, p2, t) -> Fq12:
    x1, y1 = p1
    x2, y2 = p2
    xt, yt = t
    if x1 != x2:
        m = (y2 - y1) / (x2 - x1)
    elif y1 == y2:
        m = 3 * x1 * x1 / (2 * y1)
    else:
        return xt - x1
    return m * (xt - x1) - (yt - y1)


def _miller_loop(q: G2Point, p: G1Point) -> Fq12:
    if q is None or p is None:
        return Fq12.one()
    tq = _twist(q)
    tp = (Fq12([p[0]] + [0] * 11), Fq12([p[1]] + [0] * 11))
    r = tq
    f = Fq12.one()
    for i in range(_LOG_ATE_LOOP_COUNT, -1, -1):
        f = f * f * _linefunc(r, r, tp)
        r = _ext_add(r, r)
        if _ATE_LOOP_COUNT >> i & 1:
            f = f * _linefunc(r, tq, tp)
            r = _ext_add(r, tq)
    q1 = (tq[0] ** P, tq[1] ** P)
    nq2 = (q1[0] ** P, -(q1[1] ** P))
    f = f * _linefunc(r, q1, tp)
    r = _ext_add(r, q1)
    return f * _linefunc(r, nq2, tp)


def _final_exponentiate(f: Fq12) -> Fq12:
    return f ** ((P**12 - 1) // N)


def _check_pair(q: G2Point, p: G1Point) -> None:
    if not g1_is_on_curve(p):
        raise ValueError("G1 point is not on the curve")
    if not g2_is_on_curve(q):
        raise ValueError("G2 point is not on the curve")


def pairing(q: G2Point, p: G1Point) -> Fq12:
    """The optimal ate pairing e(p, q) with ``q`` in G2 and ``p`` in G1."""
    _check_pair(q, p)
    return _final_exponentiate(_miller_loop(q, p))


def pairing_check(pairs: Iterable[tuple[G1Point, G2Point]]) -> bool:
    """Whether the product of e(a, b) over ``(a, b)`` pairs equals one."""
    acc = Fq12.one()
    for a, b in pairs:
        _check_pair(b, a)
        acc = acc * _miller_loop(b, a)
    return _final_exponentiate(acc) == Fq12.one()
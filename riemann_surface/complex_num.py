import math


class Complex:
    """Minimal complex value: add, sub, mul, integer powers and principal sqrt."""

    __slots__ = ('re', 'im')

    def __init__(self, re=0.0, im=0.0):
        self.re = float(re)
        self.im = float(im)

    def add(self, other):
        return Complex(self.re + other.re, self.im + other.im)

    def sub(self, other):
        return Complex(self.re - other.re, self.im - other.im)

    def mul(self, other):
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def pow(self, n):
        # n is a non-negative integer; pow(0) is the multiplicative identity
        result = Complex(1.0, 0.0)
        for _ in range(n):
            result = result.mul(self)
        return result

    def sqrt(self):
        """Principal square root (the root with non-negative real part)."""
        r = math.hypot(self.re, self.im)
        mag = math.sqrt(r)
        half = math.atan2(self.im, self.re) / 2.0
        return Complex(mag * math.cos(half), mag * math.sin(half))

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __pow__ = pow

    def __eq__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.re == other.re and self.im == other.im

    def __repr__(self):
        return f"Complex({self.re!r}, {self.im!r})"

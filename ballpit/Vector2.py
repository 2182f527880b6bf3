import math


class Vector2:
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    def set(self, x, y):
        # the only in-place operation; used for the pointer slot
        self.x = float(x)
        self.y = float(y)
        return self

    def copy(self):
        return Vector2(self.x, self.y)

    def add(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def multiply(self, scalar):
        return Vector2(self.x * scalar, self.y * scalar)

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def cross(self, other):
        """Scalar z-component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def magnitude(self):
        return math.hypot(self.x, self.y)

    def magnitude_sq(self):
        return self.x * self.x + self.y * self.y

    def normalize(self):
        """Unit vector in the same direction; the zero vector stays zero."""
        l = self.magnitude()
        if l > 0.0:
            return Vector2(self.x / l, self.y / l)
        return Vector2(0.0, 0.0)

    def is_finite(self):
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, scalar):
        return self.multiply(scalar)

    def __rmul__(self, scalar):
        return self.multiply(scalar)

    def __truediv__(self, scalar):
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self):
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if other is None or not isinstance(other, Vector2):
            return False
        return self.x == other.x and self.y == other.y

    __hash__ = None

    def __repr__(self):
        return f"Vector2({self.x}, {self.y})"

    def __str__(self):
        return f"({self.x}, {self.y})"

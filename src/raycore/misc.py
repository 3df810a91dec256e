# -*- encoding: utf-8 -*-


def are_close(num1: float, num2: float, epsilon: float = 1e-6) -> bool:
    """Tell whether two floating-point numbers are equal within `epsilon`

    This is the building block of the ``is_close`` methods of points, vectors,
    colors and transformations. A NaN is never close to anything."""
    return abs(num1 - num2) < epsilon

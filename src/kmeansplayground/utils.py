def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation from start towards stop by the given fraction."""
    return start + (stop - start) * amount

def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp value into the closed interval [lower, upper]."""
    return max(lower, min(value, upper))

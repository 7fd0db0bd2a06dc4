import math

Point = tuple[float, float]

TAU = math.pi * 2.0


def deg_to_rad(deg: float) -> float:
    return math.pi * deg / 180.0


def rad_to_deg(rad: float) -> float:
    return rad * (180.0 / math.pi)


def dist(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def angle_point_point(start: Point, end: Point) -> float:
    """Angle of the ray start -> end, as returned by atan2 (in [-pi, pi])."""
    return math.atan2(end[1] - start[1], end[0] - start[0])


def normalize_angle(theta: float) -> float:
    """
    Map any radian angle into [0, 2pi].

    Boundary behavior the arc logic relies on:
      - exactly 0 and exactly 2pi are returned unchanged (2pi is *not* folded to 0,
        so a band spanning 0 -> 2pi keeps a full sweep)
      - exactly -2pi maps to +2pi
    """
    if theta == 0.0 or theta == TAU:
        return theta
    if theta == -TAU:
        return -theta

    n_theta = theta
    if abs(n_theta) > TAU:
        # fmod keeps the sign of the dividend
        n_theta = math.fmod(n_theta, TAU)
    if n_theta < 0.0:
        n_theta += TAU
    return n_theta


def arc_sweep(start: float, end: float) -> float:
    """
    Counter-clockwise sweep from start to end, in [0, 2pi].
    When start is ahead of end the sweep goes around through 0.
    """
    ts = normalize_angle(start)
    te = normalize_angle(end)
    if ts > te:
        return TAU - ts + te
    return te - ts


def world_to_polar(center: Point, point: Point) -> tuple[float, float]:
    """
    Returns (distance, theta) of point around center, theta in [0, 2pi).
    """
    theta = angle_point_point(center, point)
    if theta < 0.0:
        theta += TAU
    return dist(center, point), theta


def polar_point(center: Point, distance: float, theta: float) -> Point:
    return (
        center[0] + distance * math.cos(theta),
        center[1] + distance * math.sin(theta),
    )


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def round_half_up(x: float) -> int:
    # round() would use banker's rounding on exact halves
    return int(math.floor(x + 0.5))

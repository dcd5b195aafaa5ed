from __future__ import annotations

from _infra import banner, run

from kungfu import Error, Ok

from lessons import Circle, Rectangle, area, area_of, parse_shape


async def main() -> None:
    banner("02_shape_area: closed union + exhaustive match")

    print(area(Circle(5)))
    print(area(Rectangle(4, 6)))

    # Untyped boundary: raw mappings go through parse_shape first
    print(area_of({"shape": "circle", "radius": 5}))
    print(area_of({"shape": "triangle", "base": 3}))

    match parse_shape({"shape": "rectangle", "width": 4}):
        case Ok(shape):
            print(f"parsed: {shape}")
        case Error(err):
            print(f"rejected: {err.reason}")


if __name__ == "__main__":
    run(main)

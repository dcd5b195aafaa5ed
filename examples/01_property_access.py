from __future__ import annotations

from _infra import banner, run

from lessons import ALICE, PERSON_AGE, PERSON_NAME, get_property, pick


async def main() -> None:
    banner("01_property_access: get_property + lenses")

    print(get_property(ALICE, "name"))
    print(get_property(ALICE, "age"))

    # Lens keeps the value type of the field
    older = PERSON_AGE.set(ALICE, PERSON_AGE(ALICE) + 1)
    print(f"{PERSON_NAME(older)} next year: {PERSON_AGE(older)}")
    print(f"unchanged: {ALICE}")

    print(pick(ALICE, "age", "name"))


if __name__ == "__main__":
    run(main)

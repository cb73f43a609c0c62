"""
Basic options: construction, chaining, resolution and the unsafe boundary.

Run: python examples/basic_options.py
"""
from optionpy import Option, some, none, from_nullable, Result, ok, err
from optionpy.unsafe import value_or_default, value_or_failure_with, to_sequence


USERS = {1: {"name": "ada", "manager": 2}, 2: {"name": "grace"}}


def find_user(uid: int) -> Option[dict]:
    return from_nullable(USERS.get(uid))


def manager_of(user: dict) -> Option[int]:
    return from_nullable(user.get("manager"))


def main():
    # Chain optional lookups without manual None checks
    boss = find_user(1).flat_map(manager_of).flat_map(find_user).map(lambda u: u["name"])
    print("boss of 1:", boss.match(lambda n: n, lambda: "<nobody>"))
    print("boss of 2:", find_user(2).flat_map(manager_of).match(str, lambda: "<nobody>"))

    # Attach a reason once absence needs explaining
    why: Result[dict, str] = find_user(9).with_reason(lambda: "user 9 does not exist")
    print(why.match(lambda u: u["name"], lambda r: f"error: {r}"))

    # Reasons can be reshaped independently of values
    coded = err("timeout").map_reason(lambda r: {"code": 504, "detail": r})
    print(coded)

    # Boundary: finally need a concrete value
    print("count:", value_or_default(none().map(lambda x: x + 1), int))
    print("name:", value_or_failure_with(ok("ada"), lambda r: f"no name: {r}"))
    print("as list:", list(to_sequence(some(3).filter(lambda x: x > 2).map(str))))


if __name__ == "__main__":
    main()

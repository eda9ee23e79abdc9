import sys

from argbox import ArgBox, ArgumentResolutionError
from argbox.validators import int_range, starts_with

box = ArgBox()
box.register(
    "Name",
    "-nm",
    "--name",
    "Who to greet. Must start with a B.",
    mandatory=True,
    validator=starts_with("B"),
)
box.register("Times", "-t", "--times", "How many greetings.", validator=int_range(1, 5))
box.register("Shout", "-sh", "--shout", "Greet loudly.", value_not_required=True)


def main() -> int:
    tokens = sys.argv[1:]
    if box.is_help_requested(tokens):
        print(box.render_help())
        return 0

    try:
        result = box.resolve(tokens)
    except ArgumentResolutionError as error:
        print(error, file=sys.stderr)
        return 1

    greeting = f"Hello {result.value('Name')}"
    if "Shout" in result:
        greeting = greeting.upper() + "!"
    for _ in range(int(result.value("Times", "1"))):
        print(greeting)
    return 0


if __name__ == "__main__":
    sys.exit(main())

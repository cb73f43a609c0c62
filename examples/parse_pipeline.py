"""
Parsing raw text into options, with explicit locale and style records.

Run: python examples/parse_pipeline.py
"""
from optionpy import parse, NumberStyle, INVARIANT
from optionpy.unsafe import to_sequence

GERMAN = INVARIANT.with_(name="de", decimal_separator=",", group_separator=".")


def main():
    rows = ["42", "  7 ", "abc", "300", "-3"]
    ports = [p for row in rows for p in to_sequence(parse.to_ushort(row).filter(lambda n: n > 0))]
    print("valid ports:", ports)

    for row in ["255", "256", "ff"]:
        print(row, "->", parse.to_byte.with_reason(row).match(str, lambda f: f"rejected ({f.detail})"))

    print("hex:", parse.to_sbyte("FF", NumberStyle.HEX_NUMBER))
    print("german:", parse.to_float("1.234,5", locale=GERMAN))

    parse.logger.set_level("DEBUG")
    parse.to_timedelta("25:00")  # logged to stderr


if __name__ == "__main__":
    main()

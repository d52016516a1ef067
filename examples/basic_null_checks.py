"""
Basic null checks: defaults, branching callbacks, and typed defaults.

Run: NULLKIT_LOG_LEVEL=DEBUG python examples/basic_null_checks.py
"""
from nullkit import (
    value_or,
    when_present,
    when_absent,
    when_first_present,
    is_present_and_non_empty,
    or_empty_string,
    or_zero,
    or_false,
    InvalidArgument,
)


def main():
    # Defaults
    name = value_or(None, "anonymous")
    print("name =>", name)                      # anonymous

    # Present branch runs now, absent branch is attached afterwards
    when_present("Hello", lambda v: print("present =>", v)) \
        .when_absent(lambda: print("never printed"))

    when_absent(None, lambda: print("absent => no value")) \
        .when_present(lambda v: print("never printed", v))

    # First element of a collection
    for coll in (["first", "second"], [], None):
        when_first_present(coll, lambda v: print("first =>", v)) \
            .when_absent(lambda: print("first => missing"))
    print("non-empty =>", is_present_and_non_empty([1]))

    # Typed defaults
    print("typed =>", repr(or_empty_string(None)), or_zero(None), or_false(None))

    # A missing fallback is a programming error
    try:
        value_or("x", None)
    except InvalidArgument as e:
        print("error =>", e)


if __name__ == "__main__":
    main()

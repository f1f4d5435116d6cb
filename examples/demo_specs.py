"""Demonstration specs.

Run with ``specbench run examples/demo_specs.py`` or ``python examples/demo_specs.py``.
The second spec fails on purpose, so the process exits with status 1.
"""

from specbench import (
    EPSILON,
    after_each,
    before_each,
    describe,
    expect_double,
    expect_int,
    expect_string,
    it,
    not_to_be,
    not_to_be_like,
    require_int,
    spec,
    suite_main,
    to_be,
    to_be_like,
)


@spec("SpecbenchDemo")
def specbench_demo():
    @describe("specbench's expect()")
    def _():
        @it("should work well with integers and floating point numbers")
        def _():
            demo_int = 42
            expect_int(demo_int, to_be(42))
            # *_like on integers does exactly the same thing
            expect_int(demo_int, to_be_like(42))
            expect_int(demo_int, not_to_be(90))
            expect_int(demo_int, not_to_be_like(90))

            demo_double = 38.121
            expect_double(demo_double, to_be(38.121))
            # *_like on doubles checks abs(a - b) <= EPSILON
            expect_double(demo_double, to_be_like(demo_double + EPSILON))
            expect_double(demo_double, to_be_like(demo_double - EPSILON))
            expect_double(demo_double, not_to_be_like(demo_double + EPSILON * 2))
            expect_double(demo_double, not_to_be(0.444444))

    @describe("specbench's expect()")
    def _():
        @it("should work well with strings as well")
        def _():
            demo_str = "i am a demo string"
            expect_string(demo_str, to_be("i am a demo string"))
            # *_like on strings ignores case
            expect_string(demo_str, to_be_like("i Am a DEmO strING"))
            expect_string(demo_str, not_to_be_like("another string"))
            # None is welcome too
            expect_string(demo_str, not_to_be(None))
            expect_string(None, to_be(None))
            expect_string(None, not_to_be(demo_str))


@spec("HooksDemo")
def hooks_demo():
    log = []

    def body():
        before_each(lambda label: log.append(f"setup {label}"))
        after_each(lambda label: log.append(f"teardown {label}"))

        def guarded():
            # a failed require skips the rest of this it body
            require_int(len(log), to_be(1))
            expect_int(log.count("setup guarded"), to_be(1))

        it("guarded", guarded)

    describe("hooks", body)


@spec("AnotherSpecbenchDemo")
def another_specbench_demo():
    describe("This one", lambda: it("may actually fail", lambda: expect_int(1, to_be(9))))


if __name__ == "__main__":
    suite_main()

"""Tests for describe/it blocks, hooks and the require gate."""

import pytest

from specbench import (
    after_each,
    before_each,
    describe,
    expect_int,
    it,
    require_int,
    require_string,
    to_be,
)
from specbench.errors import SpecUsageError


# --- it blocks ---


def test_passing_it_prints_pass_glyph(run_body, capsys):
    def body():
        describe("group", lambda: it("passes", lambda: expect_int(42, to_be(42))))

    tally = run_body(body)
    assert (tally.seen, tally.passed) == (1, 1)
    assert "\t✓ group passes\n" in capsys.readouterr().out


def test_failing_it_prints_fail_glyph(run_body, capsys):
    def body():
        describe("group", lambda: it("fails", lambda: expect_int(1, to_be(9))))

    tally = run_body(body)
    assert (tally.seen, tally.passed) == (1, 0)
    assert "\t𝙓 group fails\n" in capsys.readouterr().out


def test_it_without_assertions_passes(run_body, capsys):
    def body():
        describe("group", lambda: it("empty", lambda: None))

    tally = run_body(body)
    assert (tally.seen, tally.passed) == (0, 0)
    assert "\t✓ group empty" in capsys.readouterr().out


def test_it_tallies_fold_into_spec(run_body):
    def body():
        def cases():
            def first():
                expect_int(1, to_be(1))
                expect_int(2, to_be(3))

            def second():
                expect_int(5, to_be(5))

            it("first", first)
            it("second", second)

        describe("fold", cases)

    tally = run_body(body)
    assert (tally.seen, tally.passed) == (3, 2)


def test_it_outside_describe_uses_spec_name(run_body, capsys):
    run_body(lambda: it("bare", lambda: expect_int(1, to_be(1))), name="Loose")
    assert "\t✓ Loose bare" in capsys.readouterr().out


def test_it_outside_spec_raises():
    with pytest.raises(SpecUsageError):
        it("orphan", lambda: None)


def test_nested_it_raises(run_body):
    def body():
        describe("outer", lambda: it("a", lambda: it("b", lambda: None)))

    with pytest.raises(SpecUsageError, match="nested"):
        run_body(body)


def test_decorator_forms_run_immediately(run_body, capsys):
    calls = []

    def body():
        @describe("decorated")
        def _():
            @it("runs")
            def _():
                calls.append("it")
                expect_int(1, to_be(1))

    tally = run_body(body)
    assert calls == ["it"]
    assert tally.seen == 1
    assert "\t✓ decorated runs" in capsys.readouterr().out


# --- require gate ---


def test_require_failure_skips_rest_of_body(run_body):
    reached = []

    def body():
        def cases():
            def case():
                require_int(1, to_be(9))
                reached.append(True)
                expect_int(0, to_be(90))

            it("aborts", case)

        describe("require", cases)

    tally = run_body(body)
    assert reached == []
    assert (tally.seen, tally.passed) == (1, 0)


def test_require_abort_passes_through_broad_except(run_body):
    reached = []

    def body():
        def case():
            try:
                require_int(1, to_be(9))
            except Exception:
                pass
            reached.append(True)
            expect_int(0, to_be(90))

        describe("require", lambda: it("guarded", case))

    tally = run_body(body)
    assert reached == []
    assert (tally.seen, tally.passed) == (1, 0)


def test_require_keeps_passes_before_abort(run_body):
    def body():
        def cases():
            def case():
                expect_int(1, to_be(1))
                require_string("a", to_be("b"))
                expect_int(2, to_be(2))

            it("partial", case)

        describe("require", cases)

    tally = run_body(body)
    assert (tally.seen, tally.passed) == (2, 1)


def test_require_success_returns_true_and_continues(run_body):
    results = []

    def body():
        def case():
            results.append(require_int(3, to_be(3)))
            expect_int(4, to_be(4))

        describe("require", lambda: it("ok", case))

    tally = run_body(body)
    assert results == [True]
    assert (tally.seen, tally.passed) == (2, 2)


def test_require_abort_does_not_stop_siblings(run_body, capsys):
    def body():
        def cases():
            it("first", lambda: require_int(1, to_be(2)))
            it("second", lambda: expect_int(2, to_be(2)))

        describe("siblings", cases)
        describe("next", lambda: it("third", lambda: expect_int(3, to_be(3))))

    tally = run_body(body)
    out = capsys.readouterr().out
    assert "\t𝙓 siblings first" in out
    assert "\t✓ siblings second" in out
    assert "\t✓ next third" in out
    assert (tally.seen, tally.passed) == (3, 2)


# --- hooks ---


def test_hooks_run_once_per_it_in_order_even_after_abort(run_body):
    events = []

    def body():
        def cases():
            before_each(lambda label: events.append(("before", label)))
            after_each(lambda label: events.append(("after", label)))

            def first():
                events.append(("body", "first"))
                require_int(1, to_be(9))
                events.append(("unreachable", "first"))

            it("first", first)
            it("second", lambda: events.append(("body", "second")))

        describe("hooks", cases)

    run_body(body)
    assert events == [
        ("before", "first"),
        ("body", "first"),
        ("after", "first"),
        ("before", "second"),
        ("body", "second"),
        ("after", "second"),
    ]


def test_hooks_do_not_apply_retroactively(run_body):
    labels = []

    def body():
        def cases():
            it("early", lambda: None)
            before_each(labels.append)
            it("late", lambda: None)

        describe("order", cases)

    run_body(body)
    assert labels == ["late"]


def test_hook_registration_replaces_previous(run_body):
    calls = []

    def body():
        def cases():
            before_each(lambda label: calls.append(("old", label)))
            before_each(lambda label: calls.append(("new", label)))
            it("case", lambda: None)

        describe("replace", cases)

    run_body(body)
    assert calls == [("new", "case")]


def test_hooks_do_not_leak_to_sibling_or_nested_scopes(run_body):
    calls = []

    def body():
        def outer():
            before_each(lambda label: calls.append(label))
            describe("nested", lambda: it("inner", lambda: None))
            it("outer-case", lambda: None)

        describe("outer", outer)
        describe("sibling", lambda: it("sibling-case", lambda: None))

    run_body(body)
    assert calls == ["outer-case"]


def test_nested_describe_restores_label(run_body, capsys):
    def body():
        def outer():
            describe("inner", lambda: it("a", lambda: None))
            it("b", lambda: None)

        describe("outer", outer)

    run_body(body)
    out = capsys.readouterr().out
    assert "\t✓ inner a" in out
    assert "\t✓ outer b" in out


def test_hook_decorator_form(run_body):
    labels = []

    def body():
        @describe("decorated hooks")
        def _():
            @before_each
            def setup(label):
                labels.append(label)

            it("case", lambda: None)

    run_body(body)
    assert labels == ["case"]


def test_hook_outside_describe_raises(run_body):
    with pytest.raises(SpecUsageError, match="describe"):
        run_body(lambda: before_each(lambda label: None))


def test_expectation_in_hook_raises(run_body):
    def body():
        def cases():
            before_each(lambda label: expect_int(1, to_be(1)))
            it("case", lambda: None)

        describe("hook assertion", cases)

    with pytest.raises(SpecUsageError):
        run_body(body)


# --- unexpected errors ---


def test_body_exception_counts_as_one_failure(run_body, capsys):
    after = []

    def body():
        def cases():
            after_each(after.append)

            def broken():
                expect_int(1, to_be(1))
                raise KeyError("boom")

            it("broken", broken)
            it("fine", lambda: expect_int(2, to_be(2)))

        describe("errors", cases)

    tally = run_body(body)
    out = capsys.readouterr().out
    assert (tally.seen, tally.passed) == (3, 2)
    assert "raised KeyError" in out
    assert "\t𝙓 errors broken" in out
    assert "\t✓ errors fine" in out
    assert after == ["broken", "fine"]


def test_before_hook_exception_skips_body_but_runs_after(run_body):
    events = []

    def body():
        def cases():
            def explode(label):
                raise RuntimeError("setup failed")

            before_each(explode)
            after_each(lambda label: events.append(("after", label)))
            it("case", lambda: events.append(("body", "case")))

        describe("setup", cases)

    tally = run_body(body)
    assert events == [("after", "case")]
    assert (tally.seen, tally.passed) == (1, 0)


def test_bad_operand_counts_once(run_body):
    def body():
        describe("types", lambda: it("float to int", lambda: expect_int(1.5, to_be(1))))

    tally = run_body(body)
    assert (tally.seen, tally.passed) == (1, 0)

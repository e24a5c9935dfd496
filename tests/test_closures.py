import pytest

from lispy.errors import LispyUnboundSymbol
from lispy.types.cons import ConsList
from lispy.types.lambda_fn import Lambda
from lispy.types.symbol import Symbol


def L(*items):
    return ConsList.from_iterable(items)


def test_closure_does_not_see_later_outer_definitions(run):
    run("(define x 1)")
    run("(define f (lambda () x))")
    run("(define x 2)")
    assert run("(f)") == 1
    assert run("x") == 2


def test_closure_does_not_see_names_defined_after_it(run):
    run("(define g (lambda () later))")
    run("(define later 5)")
    with pytest.raises(LispyUnboundSymbol):
        run("(g)")


def test_closure_captures_enclosing_parameters(run):
    run("(define make-adder (lambda (n) (lambda (m) (+ n m))))")
    run("(define add5 (make-adder 5))")
    run("(define add7 (make-adder 7))")
    assert isinstance(run("add5"), Lambda)
    assert run("(add5 1)") == 6
    assert run("(add7 1)") == 8


def test_closure_state_is_private_to_the_closure(run):
    run("(define count 0)")
    run("(define tick (lambda () (set! count (+ count 1))))")
    assert run("(tick)") == 1
    assert run("(tick)") == 2
    assert run("count") == 0


def test_captured_lists_are_copies(run):
    run("(define xs (list 1 2))")
    run("(define get (lambda () xs))")
    run("(define xs (append xs (list 3)))")
    assert run("(length (get))") == 2
    assert run("(length xs)") == 3


def test_parameters_shadow_captured_names(run):
    run("(define x 1)")
    run("(define f (lambda (x) (* x 10)))")
    assert run("(f 4)") == 40
    assert run("x") == 1


def test_arguments_are_bound_as_written(run):
    run("(define f (lambda (x) x))")
    assert run("(f (+ 2 3))") == L(Symbol("+"), 2, 3)
    assert run("(f y)") == Symbol("y")


def test_unused_argument_is_never_evaluated(run):
    run("(define const (lambda (x) 1))")
    assert run("(const undefined)") == 1
    assert run("(const (car 5))") == 1


def test_body_can_evaluate_an_argument_form(run):
    run("(define inc (lambda (x) (+ (eval x) 1)))")
    assert run("(inc (+ 2 3))") == 6
    assert run("(inc 4)") == 5


def test_lambda_passed_by_name(run):
    run("(define inc (lambda (n) (+ n 1)))")
    run("(define call-with-3 (lambda (fn) (progn (define g (eval fn)) (g 3))))")
    assert run("(call-with-3 inc)") == 4

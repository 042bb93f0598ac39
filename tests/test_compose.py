"""Tests for compose."""

from reducks import compose


def double(x):
    return x * 2


def square(x):
    return x * x


class TestCompose:
    def test_right_to_left(self):
        assert compose(square, double)(3) == 36
        assert compose(double, square)(3) == 18

    def test_three_functions(self):
        def add_one(x):
            return x + 1

        assert compose(double, square, add_one)(2) == 18

    def test_no_functions_is_identity(self):
        marker = object()
        assert compose()(marker) is marker

    def test_single_function_returned_as_is(self):
        assert compose(double) is double

    def test_rightmost_takes_any_arguments(self):
        def add(a, b, *, c=0):
            return a + b + c

        assert compose(double, add)(1, 2, c=3) == 12

    def test_order_of_application(self):
        log = []

        def tag(name):
            def fn(x):
                log.append(name)
                return x

            return fn

        compose(tag("f"), tag("g"), tag("h"))(None)
        assert log == ["h", "g", "f"]

"""Tests for the expression evaluator."""

import pytest

from dslkit.interpret import MISSING, DataContext, ExpressionEvaluator


def _evaluate(node, data=None):
    return ExpressionEvaluator(DataContext(data)).evaluate(node)


# ---------------------------------------------------------------------------
# Interpolation
# ---------------------------------------------------------------------------

class TestInterpolation:
    def test_single_token(self):
        assert _evaluate("Hello $user.name!", {"user": {"name": "Ana"}}) == "Hello Ana!"

    def test_absent_token_is_empty(self):
        assert _evaluate("Hello $user.name!", {"user": {}}) == "Hello !"

    def test_multiple_tokens(self):
        data = {"a": "x", "b": {"c": "y"}}
        assert _evaluate("$a-$b.c-$a", data) == "x-y-x"

    def test_non_string_value_is_empty(self):
        assert _evaluate("count: $n", {"n": 3}) == "count: "

    def test_no_dollar_unchanged(self):
        assert _evaluate("plain text") == "plain text"

    def test_dollar_without_path_unchanged(self):
        assert _evaluate("costs $ 5 or $!") == "costs $ 5 or $!"

    def test_trailing_dot_is_part_of_token(self):
        assert _evaluate("Bye $user.name.", {"user": {"name": "Ana"}}) == "Bye Ana"

    def test_does_not_reinterpolate_values(self):
        assert _evaluate("$a", {"a": "$b", "b": "no"}) == "$b"


# ---------------------------------------------------------------------------
# var / concat
# ---------------------------------------------------------------------------

class TestVar:
    def test_lookup(self):
        data = {"x": {"y": [1, 2]}}
        ctx = DataContext(data)
        assert ExpressionEvaluator(ctx).evaluate({"var": "x.y"}) == ctx.resolve("x.y")

    def test_absent_is_none(self):
        assert _evaluate({"var": "missing"}) is None

    def test_eval_reports_missing(self):
        evaluator = ExpressionEvaluator(DataContext())
        assert evaluator.eval_node({"var": "missing"}) is MISSING

    def test_non_string_var_is_structural(self):
        assert _evaluate({"var": 3}) == {"var": 3}


class TestConcat:
    def test_joins_in_order(self):
        data = {"first": "Ana", "last": "Lima"}
        node = {"concat": [{"var": "first"}, " ", {"var": "last"}]}
        assert _evaluate(node, data) == "Ana Lima"

    def test_non_strings_are_empty(self):
        node = {"concat": ["a", 1, {"var": "missing"}, None, "b"]}
        assert _evaluate(node) == "ab"

    def test_nested_interpolation(self):
        node = {"concat": ["Hi ", "$name", {"concat": ["!", "!"]}]}
        assert _evaluate(node, {"name": "Bia"}) == "Hi Bia!!"

    def test_empty(self):
        assert _evaluate({"concat": []}) == ""

    def test_var_wins_over_concat(self):
        assert _evaluate({"var": "a", "concat": ["x"]}, {"a": 1}) == 1


# ---------------------------------------------------------------------------
# Structural evaluation
# ---------------------------------------------------------------------------

class TestStructural:
    def test_mapping(self):
        node = {"nome": {"var": "form.nome"}, "fixed": 1}
        assert _evaluate(node, {"form": {"nome": "Ana"}}) == {"nome": "Ana", "fixed": 1}

    def test_mapping_drops_missing(self):
        assert _evaluate({"a": {"var": "missing"}, "b": 2}) == {"b": 2}

    def test_mapping_keeps_null(self):
        assert _evaluate({"a": None, "b": {"var": "n"}}, {"n": None}) == {"a": None, "b": None}

    def test_list_drops_missing(self):
        assert _evaluate([1, {"var": "missing"}, "$x"], {"x": "y"}) == [1, "y"]

    def test_nested(self):
        node = {"rows": [{"label": "$a"}, {"label": {"var": "b"}}]}
        assert _evaluate(node, {"a": "A", "b": "B"}) == {"rows": [{"label": "A"}, {"label": "B"}]}

    def test_key_order_preserved(self):
        result = _evaluate({"z": 1, "a": 2, "m": 3})
        assert list(result) == ["z", "a", "m"]

    @pytest.mark.parametrize("value", [0, 3.5, True, False, None])
    def test_scalars_identity(self, value):
        assert _evaluate(value) is value

    def test_does_not_mutate_context(self):
        ctx = DataContext({"a": {"b": 1}})
        ExpressionEvaluator(ctx).evaluate({"x": {"var": "a"}, "y": "$a.b"})
        assert ctx.data == {"a": {"b": 1}}

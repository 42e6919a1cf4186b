"""Tests for action node classification."""

from dslkit.model.actions import (
    AppendAction,
    CommandAction,
    SequenceAction,
    SetAction,
    UnrecognizedAction,
    parse_action,
)


class TestShapes:
    def test_set(self):
        action = parse_action({"set": {"var": "form.nome", "value": "Ana"}})
        assert action == SetAction(var="form.nome", value="Ana")

    def test_set_null_value(self):
        action = parse_action({"set": {"var": "a", "value": None}})
        assert isinstance(action, SetAction)
        assert action.value is None

    def test_append(self):
        action = parse_action({"append": {"var": "list", "value": {"id": 1}}})
        assert action == AppendAction(var="list", value={"id": 1})

    def test_sequence_parses_steps(self):
        action = parse_action({"sequence": [
            {"set": {"var": "a", "value": 1}},
            {"action": "navigateBack"},
        ]})
        assert isinstance(action, SequenceAction)
        assert [step.kind for step in action.steps] == ["set", "command"]

    def test_command(self):
        action = parse_action({"action": "navigate", "params": {"screen": "telaB"}})
        assert action == CommandAction(name="navigate", params={"screen": "telaB"})

    def test_command_without_params(self):
        assert parse_action({"action": "navigateBack"}).params == {}

    def test_command_non_mapping_params(self):
        assert parse_action({"action": "showAlert", "params": "oops"}).params == {}

    def test_unknown_command_name_kept(self):
        assert parse_action({"action": "vibrate"}).name == "vibrate"


class TestPriority:
    def test_append_before_sequence(self):
        action = parse_action({
            "sequence": [],
            "append": {"var": "l", "value": {}},
        })
        assert action.kind == "append"

    def test_sequence_before_set(self):
        action = parse_action({
            "set": {"var": "a", "value": 1},
            "sequence": [],
        })
        assert action.kind == "sequence"

    def test_set_before_action(self):
        action = parse_action({
            "action": "navigateBack",
            "set": {"var": "a", "value": 1},
        })
        assert action.kind == "set"

    def test_malformed_append_falls_through(self):
        action = parse_action({
            "append": {"value": {}},
            "set": {"var": "a", "value": 1},
        })
        assert action.kind == "set"


class TestUnrecognized:
    def test_non_mapping(self):
        action = parse_action("navigate")
        assert isinstance(action, UnrecognizedAction)
        assert "mapping" in action.reason

    def test_empty_mapping(self):
        assert parse_action({}).kind == "unrecognized"

    def test_set_without_var(self):
        action = parse_action({"set": {"value": 1}})
        assert isinstance(action, UnrecognizedAction)
        assert "malformed" in action.reason

    def test_set_without_value(self):
        assert parse_action({"set": {"var": "a"}}).kind == "unrecognized"

    def test_sequence_not_list(self):
        assert parse_action({"sequence": {"set": {}}}).kind == "unrecognized"

    def test_nested_unrecognized_kept_in_sequence(self):
        action = parse_action({"sequence": [42, {"set": {"var": "a", "value": 1}}]})
        assert [step.kind for step in action.steps] == ["unrecognized", "set"]


class TestParsedPassThrough:
    def test_model_returned_as_is(self):
        action = SetAction(var="a", value=1)
        assert parse_action(action) is action

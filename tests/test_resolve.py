"""Tests for uttermatch.core.resolve: end-to-end utterance resolution."""

from __future__ import annotations

import pytest

from uttermatch.core.errors import SchemaError
from uttermatch.core.model import InteractionModel, ModelBuilder
from uttermatch.core.resolve import Resolution, resolve


class TestSimplePhrases:
    def test_matches_simple_phrase(self, model: InteractionModel) -> None:
        result = resolve(model, "play")
        assert result.matched
        assert result.intent_name == "Play"

    def test_ignores_case(self, model: InteractionModel) -> None:
        assert resolve(model, "Play").intent_name == "Play"
        assert resolve(model, "PLAY NOW").intent_name == "Play"

    def test_ignores_special_characters(self, model: InteractionModel) -> None:
        result = resolve(model, "play?")
        assert result.matched
        assert result.intent_name == "Play"

    def test_symbols_in_phrase(self, model: InteractionModel) -> None:
        result = resolve(model, "good? #%.morning")
        assert result.matched
        assert result.intent_name == "Hello"

    def test_punctuation_in_phrase(self, model: InteractionModel) -> None:
        result = resolve(model, "good, -morning:")
        assert result.matched
        assert result.intent_name == "Hello"

    def test_builtin_intent_utterance(self, model: InteractionModel) -> None:
        result = resolve(model, "help")
        assert result.matched
        assert result.intent_name == "AMAZON.HelpIntent"

    def test_literal_beats_enumerated_slot(self, model: InteractionModel) -> None:
        result = resolve(model, "hi")
        assert result.matched
        assert result.intent_name == "Hello"


class TestPunctuatedTemplates:
    @pytest.fixture
    def punctuated(self) -> InteractionModel:
        builder = ModelBuilder(include_builtins=False)
        builder.add_intent("Greeting")
        builder.add_intent("News")
        builder.add_sample("Greeting", "what's up?")
        builder.add_sample("News", "U.S. news")
        return builder.build()

    def test_question_mark_in_template(self, punctuated: InteractionModel) -> None:
        result = resolve(punctuated, "what's up?")
        assert result.matched
        assert result.intent_name == "Greeting"
        assert resolve(punctuated, "what's up").intent_name == "Greeting"

    def test_periods_in_template(self, punctuated: InteractionModel) -> None:
        result = resolve(punctuated, "U.S. news")
        assert result.matched
        assert result.intent_name == "News"
        assert resolve(punctuated, "us news").intent_name == "News"


class TestAnchoring:
    def test_trailing_newline_does_not_match(self, model: InteractionModel) -> None:
        assert not resolve(model, "play\n").matched

    def test_embedded_newline_does_not_match(self, model: InteractionModel) -> None:
        assert not resolve(model, "play\nnow").matched


class TestSlots:
    def test_slotted_phrase(self, model: InteractionModel) -> None:
        result = resolve(model, "slot value")
        assert result.matched
        assert result.intent_name == "SlottedIntent"
        assert result.slot(0) == "value"
        assert result.slot_by_name("SlotName") == "value"

    def test_slotted_phrase_without_value(self, model: InteractionModel) -> None:
        result = resolve(model, "slot")
        assert result.matched
        assert result.intent_name == "SlottedIntent"
        assert result.slot(0) == ""

    def test_multiple_slots(self, model: InteractionModel) -> None:
        result = resolve(model, "multiple a and b")
        assert result.intent_name == "MultipleSlots"
        assert result.slot(0) == "a"
        assert result.slot(1) == "b"
        assert result.slot_by_name("SlotA") == "a"
        assert result.slot_by_name("SlotB") == "b"

    def test_multiple_slots_reversed(self, model: InteractionModel) -> None:
        result = resolve(model, "reversed a then b")
        assert result.intent_name == "MultipleSlots"
        assert result.slot(0) == "a"
        assert result.slot(1) == "b"
        assert result.slot_by_name("SlotA") == "b"
        assert result.slot_by_name("SlotB") == "a"

    def test_slot_by_name_is_case_insensitive(self, model: InteractionModel) -> None:
        result = resolve(model, "slot value")
        assert result.slot_by_name("slotname") == "value"

    def test_missing_slot_index_and_name(self, model: InteractionModel) -> None:
        result = resolve(model, "slot value")
        assert result.slot(5) is None
        assert result.slot_by_name("Nope") is None

    def test_slots_mapping(self, model: InteractionModel) -> None:
        result = resolve(model, "multiple a and b")
        assert result.slots() == {"SlotA": "a", "SlotB": "b"}


class TestTypedSlots:
    def test_enumerated_value(self, model: InteractionModel) -> None:
        result = resolve(model, "US")
        assert result.matched
        assert result.intent_name == "CustomSlot"
        assert result.slot(0) == "US"
        assert result.slot_by_name("country") == "US"

    def test_enumerated_synonym(self, model: InteractionModel) -> None:
        result = resolve(model, "usa")
        assert result.intent_name == "CustomSlot"
        assert result.slot_by_name("country") == "usa"
        slot_match = result.evaluation.slot_matches[0]
        assert slot_match.slot_value is not None
        assert slot_match.slot_value.value == "US"
        assert slot_match.synonym == "USA"

    def test_enumerated_rejects_unknown_value(self, model: InteractionModel) -> None:
        result = resolve(model, "France")
        assert result.intent_name != "CustomSlot"

    def test_number_value(self, model: InteractionModel) -> None:
        result = resolve(model, "19801")
        assert result.matched
        assert result.intent_name == "NumberSlot"
        assert result.slot(0) == "19801"
        assert result.slot_by_name("number") == "19801"

    def test_long_form_number_value(self, model: InteractionModel) -> None:
        result = resolve(model, "one")
        assert result.intent_name == "NumberSlot"
        assert result.slot(0) == "1"
        assert resolve(model, "Thirteen").slot_by_name("number") == "13"
        assert resolve(model, " ten ").slot_by_name("number") == "10"

    def test_invalid_number_falls_through(self, model: InteractionModel) -> None:
        result = resolve(model, "19801a test")
        assert result.intent_name == "MultipleSlots"

    def test_more_specific_phrase_wins(self, model: InteractionModel) -> None:
        result = resolve(model, "1900 test")
        assert result.matched
        assert result.intent_name == "NumberSlot"
        assert result.evaluation.phrase.template == "{number} test"


class TestRanking:
    def _builder(self) -> ModelBuilder:
        builder = ModelBuilder(include_builtins=False)
        builder.add_intent("First", slots=[("thing", "UNDECLARED")])
        builder.add_intent("Second", slots=[("thing", "UNDECLARED")])
        return builder

    def test_earliest_intent_wins_ties(self) -> None:
        builder = self._builder()
        builder.add_sample("Second", "{thing}")
        builder.add_sample("First", "{thing}")
        result = resolve(builder.build(), "anything")
        assert result.intent_name == "First"

    def test_earliest_phrase_wins_ties(self) -> None:
        builder = self._builder()
        builder.add_samples("First", ["{thing} x", "y {thing}"])
        result = resolve(builder.build(), "y x")
        assert result.evaluation.phrase.template == "{thing} x"

    def test_closed_empty_type_never_matches(self) -> None:
        builder = ModelBuilder(include_builtins=False)
        builder.add_intent("Loose", slots=[("value", "UNDECLARED")])
        builder.add_intent("Strict", slots=[("value", "COLOR")])
        builder.add_slot_type("COLOR", [])
        builder.add_sample("Loose", "{value}")
        builder.add_sample("Strict", "{value}")
        model = builder.build()
        # COLOR is a closed empty type, so Strict cannot match.
        assert resolve(model, "red").intent_name == "Loose"

    def test_typed_open_slot_outranks_untyped(self) -> None:
        builder = ModelBuilder(include_builtins=False)
        builder.add_intent("Loose", slots=[("value", "UNDECLARED")])
        builder.add_intent("Typed", slots=[("value", "AMAZON.Color")])
        builder.add_slot_type("AMAZON.Color", [])
        builder.add_sample("Loose", "{value}")
        builder.add_sample("Typed", "{value}")
        assert resolve(builder.build(), "red").intent_name == "Typed"


class TestNoMatch:
    def test_no_match_returns_unmatched(self) -> None:
        builder = ModelBuilder(include_builtins=False)
        builder.add_intent("Play")
        builder.add_sample("Play", "play")
        result = resolve(builder.build(), "stop the music")
        assert isinstance(result, Resolution)
        assert not result.matched
        assert result.intent_name is None
        assert result.slot_values == ()
        assert result.evaluation is None

    def test_empty_model(self) -> None:
        result = resolve(ModelBuilder().build(), "hello")
        assert not result.matched


class TestSchemaErrors:
    def test_undeclared_slot_raises_for_any_utterance(self) -> None:
        builder = ModelBuilder(include_builtins=False)
        builder.add_intent("Broken")
        builder.add_sample("Broken", "broken {Missing}")
        model = builder.build()
        for utterance in ("broken thing", "completely unrelated", ""):
            with pytest.raises(SchemaError, match="Missing"):
                resolve(model, utterance)


class TestModelShortcut:
    def test_model_resolve(self, model: InteractionModel) -> None:
        assert model.resolve("hello").intent_name == "Hello"

    def test_frozen(self, model: InteractionModel) -> None:
        result = resolve(model, "play")
        with pytest.raises(AttributeError):
            result.intent_name = "Other"

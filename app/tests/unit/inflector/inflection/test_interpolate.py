"""Tests for inflector.inflection.interpolate module."""

import pytest

from inflector.inflection import (
    InflectionOptionIncorrect,
    InflectionOptionNotFound,
    InflectionOptions,
    InvalidInflectionToken,
    Interpolator,
    MisplacedInflectionToken,
)
from inflector.inflection.interpolate import TokenGroup
from tests.factories.inflection import make_inflections, make_inflector, make_registry

GREETING = "@{f:Lady|m:Sir|n:You|All}"


@pytest.fixture
def no_default_inflector():
    """Inflector whose loose gender kind has no default token."""
    return make_inflector(inflections=make_inflections(with_default=False))


class TestTokenGroup:
    """Tests for TokenGroup.matches()."""

    def test_positive_tokens(self):
        """Without negatives the option must be one of the tokens."""
        group = TokenGroup(source="f,m", value="x", tokens={"f", "m"})
        assert group.matches("m")
        assert not group.matches("n")
        assert not group.matches(None)

    def test_single_negative(self):
        """With one negative any other option matches, even a missing one."""
        group = TokenGroup(source="!m", value="x", negatives={"m"})
        assert group.matches("n")
        assert group.matches(None)
        assert not group.matches("m")

    def test_many_negatives_always_match(self):
        """With two or more negatives the group always matches."""
        group = TokenGroup(source="!m,!f", value="x", negatives={"m", "f"})
        assert group.matches("m")
        assert group.matches("f")


class TestInterpolator:
    """Tests for Interpolator.interpolate()."""

    def test_defaults_come_from_settings(self, registry):
        """Without explicit defaults the settings are used."""
        interpolator = Interpolator(registry)
        assert interpolator.defaults == InflectionOptions.from_settings()

    def test_text_without_patterns(self, inflector):
        """Text without patterns is returned untouched."""
        assert inflector.interpolate("Hello there", options={"gender": "f"}) == (
            "Hello there"
        )
        assert inflector.interpolate("") == ""
        assert inflector.interpolate("mail me @ home") == "mail me @ home"

    @pytest.mark.parametrize(
        "option,expected",
        [("f", "Lady"), ("m", "Sir"), ("n", "You")],
    )
    def test_basic_selection(self, inflector, option, expected):
        """The group matching the option is rendered."""
        assert inflector.interpolate(GREETING, options={"gender": option}) == expected

    def test_surrounding_text_is_kept(self, inflector):
        """Text around a pattern, including the character before it, stays."""
        result = inflector.interpolate(
            "Dear @{f:Lady|m:Sir}, and @{f:her|m:his} friends",
            options={"gender": "f"},
        )
        assert result == "Dear Lady, and her friends"

    @pytest.mark.parametrize("text", ["@@{f:A|m:B}", "\\@{f:A|m:B}"])
    @pytest.mark.parametrize("options", [None, {"gender": "f"}, {"gender": "zz"}])
    def test_escaped_patterns(self, inflector, text, options):
        """Escaped patterns render literally regardless of options."""
        assert inflector.interpolate(text, options=options) == "@{f:A|m:B}"

    def test_escaped_pattern_mid_text(self, inflector):
        """Only the escape character is dropped."""
        result = inflector.interpolate("Say @@{f:A|m:B} now", options={"gender": "f"})
        assert result == "Say @{f:A|m:B} now"

    @pytest.mark.parametrize(
        "option,expected",
        [("f", "Dear Lady!"), ("m", "Dear %{test}!"), ("n", "Dear !")],
    )
    def test_placeholder_in_last_value(self, inflector, option, expected):
        """Placeholders inside values are left for the variable pass."""
        result = inflector.interpolate(
            "Dear @{f:Lady|m:%{test}}!", options={"gender": option}
        )
        assert result == expected

    @pytest.mark.parametrize(
        "option,expected",
        [("m", "%{name} here"), ("f", "Lady here"), ("n", "{{who}} here")],
    )
    def test_placeholders_before_other_groups(self, inflector, option, expected):
        """A braced value does not end the pattern early."""
        result = inflector.interpolate(
            "@{m:%{name}|f:Lady|n:{{who}}|{who}} here", options={"gender": option}
        )
        assert result == expected

    def test_placeholder_in_free_text(self, inflector):
        """Free text may hold a placeholder too."""
        result = inflector.interpolate(
            "@{m:Sir|f:Lady|{who}}", options={"gender": "n"}
        )
        assert result == "{who}"

    def test_placeholder_after_pattern_is_kept(self, inflector):
        """Braces following a pattern are not part of it."""
        result = inflector.interpolate(
            "@{f:Lady|m:Sir}{name}", options={"gender": "m"}
        )
        assert result == "Sir{name}"

    def test_alias_as_option(self, inflector):
        """An alias given as option selects its true token's group."""
        assert inflector.interpolate(GREETING, options={"gender": "feminine"}) == "Lady"

    def test_comma_groups(self, inflector):
        """A group lists several tokens separated with commas."""
        text = "@{f,m:Someone|n:You|All}"
        assert inflector.interpolate(text, options={"gender": "m"}) == "Someone"
        assert inflector.interpolate(text, options={"gender": "f"}) == "Someone"

    def test_negation(self, inflector):
        """A negated token matches every other option."""
        text = "@{!m:Lady|m:Sir|n:You|All}"
        assert inflector.interpolate(text, options={"gender": "n"}) == "Lady"
        assert inflector.interpolate(text, options={"gender": "m"}) == "Sir"

    def test_negation_without_option_or_default(self, no_default_inflector):
        """A single negation matches when no option can be worked out."""
        text = "@{!m:Lady|m:Sir|n:You|All}"
        assert no_default_inflector.interpolate(text) == "Lady"

    def test_many_negatives(self, inflector):
        """A group with two negated tokens always matches."""
        text = "@{!m,!f:Other|m:Sir}"
        assert inflector.interpolate(text, options={"gender": "m"}) == "Other"

    def test_missing_option_uses_default(self, inflector):
        """A missing option falls back to the default token."""
        assert inflector.interpolate(GREETING) == "You"
        assert (
            inflector.interpolate(
                GREETING, options={"inflector_unknown_defaults": False}
            )
            == "You"
        )

    @pytest.mark.parametrize("option", ["zz", "", None, "you"])
    def test_unknown_option_uses_default(self, inflector, option):
        """Unknown, empty or foreign-kind options fall back to the default."""
        assert inflector.interpolate(GREETING, options={"gender": option}) == "You"

    def test_unknown_option_without_unknown_defaults(self, inflector):
        """With unknown_defaults off an unknown option selects the free text."""
        result = inflector.interpolate(
            GREETING,
            options={"gender": "zz", "inflector_unknown_defaults": False},
        )
        assert result == "All"

    def test_invalid_option_without_free_text(self, no_default_inflector):
        """No matching group and no free text renders an empty string."""
        assert (
            no_default_inflector.interpolate(
                "Hi @{f:Lady|m:Sir}!", options={"gender": "zz"}
            )
            == "Hi !"
        )

    def test_free_text_only(self, inflector):
        """A pattern with free text only renders it."""
        assert inflector.interpolate("@{All}", options={"gender": "f"}) == "All"

    def test_free_text_must_be_last(self, inflector):
        """Free text followed by groups is not used."""
        result = inflector.interpolate("@{All|f:Lady}", options={"gender": "m"})
        assert result == ""

    def test_loud_marker_renders_description(self, inflector):
        """A value of ~ renders the description of the selected token."""
        text = "@{m,f:~|n:none}"
        assert inflector.interpolate(text, options={"gender": "f"}) == "female"
        assert inflector.interpolate(text, options={"gender": "masculine"}) == "male"

    def test_escaped_value(self, inflector):
        """A backslash escapes a leading special character of a value."""
        text = "@{m:\\~|f:\\@home}"
        assert inflector.interpolate(text, options={"gender": "m"}) == "~"
        assert inflector.interpolate(text, options={"gender": "f"}) == "@home"

    def test_invalid_token_is_skipped(self, inflector):
        """Unknown tokens in a pattern are ignored without raising."""
        text = "@{zz:Foo|m:Sir|All}"
        assert inflector.interpolate(text, options={"gender": "m"}) == "Sir"
        assert inflector.interpolate(text, options={"gender": "f"}) == "All"

    def test_invalid_token_raises(self, raising_inflector):
        """Unknown tokens raise InvalidInflectionToken with raises on."""
        with pytest.raises(InvalidInflectionToken) as exc_info:
            raising_inflector.interpolate("@{zz:Foo|m:Sir}", options={"gender": "m"})
        assert exc_info.value.token == "zz"
        assert exc_info.value.pattern == "@{zz:Foo|m:Sir}"

    def test_empty_token_raises(self, raising_inflector):
        """An empty token in a comma list is invalid."""
        with pytest.raises(InvalidInflectionToken):
            raising_inflector.interpolate("@{m,:Sir|All}", options={"gender": "m"})

    def test_raises_per_call_override(self, inflector):
        """inflector_raises switches raising on for a single call."""
        with pytest.raises(InvalidInflectionToken):
            inflector.interpolate(
                "@{zz:Foo|m:Sir}", options={"gender": "m", "inflector_raises": True}
            )
        assert inflector.interpolate("@{zz:Foo|m:Sir}", options={"gender": "m"}) == (
            "Sir"
        )

    def test_misplaced_token_is_skipped(self, inflector):
        """Tokens of another kind are ignored in an unnamed pattern."""
        text = "@{m:Sir|you:You|Other}"
        assert inflector.interpolate(text, options={"gender": "m"}) == "Sir"
        assert inflector.interpolate(text, options={"gender": "f", "you": "x"}) == (
            "Other"
        )

    def test_misplaced_token_raises(self, raising_inflector):
        """Tokens of another kind raise MisplacedInflectionToken with raises on."""
        with pytest.raises(MisplacedInflectionToken) as exc_info:
            raising_inflector.interpolate("@{m:Sir|you:You}", options={"gender": "f"})
        assert exc_info.value.token == "you"
        assert exc_info.value.kind == "gender"

    def test_option_incorrect_raises(self, raising_inflector):
        """An unusable option raises InflectionOptionIncorrect."""
        with pytest.raises(InflectionOptionIncorrect) as exc_info:
            raising_inflector.interpolate(
                GREETING,
                options={"gender": "zz", "inflector_unknown_defaults": False},
            )
        assert exc_info.value.kind == "gender"
        assert exc_info.value.option == "zz"

    def test_none_option_counts_as_given(self, raising_inflector):
        """An option set to None is a given but incorrect option."""
        with pytest.raises(InflectionOptionIncorrect):
            raising_inflector.interpolate(
                GREETING,
                options={"gender": None, "inflector_unknown_defaults": False},
            )

    def test_unknown_option_with_default_does_not_raise(self, raising_inflector):
        """With unknown_defaults the default token rescues an unknown option."""
        assert raising_inflector.interpolate(GREETING, options={"gender": "zz"}) == (
            "You"
        )

    def test_option_not_found_raises(self):
        """A missing option without default raises InflectionOptionNotFound."""
        inflector = make_inflector(
            inflections=make_inflections(with_default=False), raises=True
        )
        with pytest.raises(InflectionOptionNotFound) as exc_info:
            inflector.interpolate(GREETING)
        assert exc_info.value.kind == "gender"

    def test_unknown_locale(self, inflector):
        """Patterns of an unknown locale render their free text."""
        assert inflector.interpolate(GREETING, "xx-XX", {"gender": "f"}) == "All"
        with pytest.raises(InvalidInflectionToken):
            inflector.interpolate(
                GREETING, "xx-XX", {"gender": "f", "inflector_raises": True}
            )


class TestExcludedDefaults:
    """Tests for the excluded_defaults switch."""

    TEXT = "@{f:Lady|n:You|All}"

    def test_valid_option_without_group_uses_free_text(self, inflector):
        """By default a valid option with no group selects the free text."""
        assert inflector.interpolate(self.TEXT, options={"gender": "m"}) == "All"

    def test_valid_option_without_group_uses_default_group(self, inflector):
        """With excluded_defaults the default token's group is used."""
        result = inflector.interpolate(
            self.TEXT,
            options={"gender": "m", "inflector_excluded_defaults": True},
        )
        assert result == "You"

    def test_first_group_matching_default_wins(self, inflector):
        """The first group that matches the default token is rendered."""
        result = inflector.interpolate(
            "@{f:Lady|!m:Neutral|n:You}",
            options={"gender": "m", "inflector_excluded_defaults": True},
        )
        assert result == "Neutral"

    def test_invalid_option_is_not_rescued(self, inflector):
        """excluded_defaults only applies to valid options."""
        result = inflector.interpolate(
            self.TEXT,
            options={
                "gender": "zz",
                "inflector_excluded_defaults": True,
                "inflector_unknown_defaults": False,
            },
        )
        assert result == "All"

    def test_missing_option_is_not_rescued(self, no_default_inflector):
        """excluded_defaults needs an option given by the caller."""
        result = no_default_inflector.interpolate(
            self.TEXT, options={"inflector_excluded_defaults": True}
        )
        assert result == "All"


class TestAliasedPatterns:
    """Tests for aliases used inside patterns."""

    TEXT = "@{masculine:Sir|f:Lady|All}"

    def test_aliases_are_literal_by_default(self, inflector):
        """Without aliased_patterns an alias token never matches an option."""
        assert inflector.interpolate(self.TEXT, options={"gender": "m"}) == "All"

    def test_aliases_resolved_when_enabled(self, inflector):
        """With aliased_patterns an alias token stands for its target."""
        result = inflector.interpolate(
            self.TEXT, options={"gender": "m", "inflector_aliased_patterns": True}
        )
        assert result == "Sir"

    def test_aliased_patterns_default(self):
        """The switch can be enabled as a default."""
        inflector = make_inflector(aliased_patterns=True)
        assert inflector.interpolate(self.TEXT, options={"gender": "masculine"}) == (
            "Sir"
        )


class TestNamedPatterns:
    """Tests for @kind{...} patterns using the strict database."""

    def test_named_pattern(self, inflector):
        """A named pattern reads the plain kind option."""
        text = "@gender{f:Lady|m:Sir|n:You|All}"
        assert inflector.interpolate(text, options={"gender": "f"}) == "Lady"

    def test_strict_option_wins(self, inflector):
        """The @-prefixed option wins over the plain one."""
        text = "@gender{f:Lady|m:Sir|n:You|All}"
        result = inflector.interpolate(text, options={"gender": "f", "@gender": "m"})
        assert result == "Sir"
        result = inflector.interpolate(text, options={"@gender": "m", "gender": "f"})
        assert result == "Sir"

    def test_strict_option_ignored_by_unnamed_pattern(self, inflector):
        """Unnamed patterns only read the plain kind option."""
        result = inflector.interpolate(GREETING, options={"@gender": "m"})
        assert result == "You"

    def test_named_pattern_uses_strict_default(self, inflector):
        """The strict default of the kind is used for a missing option."""
        assert inflector.interpolate("@gender{f:Lady|m:Sir|n:You}") == "Sir"

    def test_named_pattern_alias_option(self, inflector):
        """Strict aliases work as option values."""
        result = inflector.interpolate(
            "@gender{f:Lady|m:Sir}", options={"@gender": "masculine"}
        )
        assert result == "Sir"

    def test_token_shared_between_strict_kinds(self, inflector):
        """The same token name resolves within the named kind."""
        text = "@tense{m:meanwhile|past:before|now:today}"
        assert inflector.interpolate(text, options={"tense": "m"}) == "meanwhile"
        assert inflector.interpolate(text, options={"tense": "past"}) == "before"

    def test_loud_marker_in_named_pattern(self, inflector):
        """Descriptions are read from the named kind."""
        text = "@tense{m,now:~}"
        assert inflector.interpolate(text, options={"tense": "now"}) == "present"
        assert inflector.interpolate(text, options={"tense": "m"}) == "medium"

    def test_unknown_kind(self, inflector):
        """A named pattern of an unknown kind renders its free text."""
        assert inflector.interpolate("@animal{cat:Meow|Bark}") == "Bark"

    def test_loose_kind_is_not_visible(self):
        """Named patterns do not see loose-only kinds."""
        inflector = make_inflector(inflections={"person": {"i": "first person"}})
        assert inflector.interpolate("@person{i:Me|Them}", options={"person": "i"}) == (
            "Them"
        )

    def test_interpolator_without_inflector(self):
        """Interpolator works directly on a registry."""
        interpolator = Interpolator(make_registry(), InflectionOptions())
        assert interpolator.interpolate(GREETING, "en-US", {"gender": "m"}) == "Sir"

"""Tests for directive dispatch and parameter substitution.

Covers the directive grammar (recode, lookup, escape, verbatim), locale maps,
inline |-arguments with **name** variables, missing key visibility and the
helper functions behind them.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from propl10n.enums import DirectiveKind
from propl10n.runtime.directives import (
    ByLocale,
    DirectiveRenderer,
    Literal,
    MissingKeyInfo,
    classify,
    expand_variables,
    html_entities,
    missing_key_text,
    recode,
    substitute_params,
    to_directive,
)

_CATALOG = {
    "month.jan": "January",
    "greet": "Hello {0}, you have {1} items",
    "umlaut": "Jänner",
}


@pytest.fixture
def renderer() -> DirectiveRenderer:
    """Renderer over a small English catalog."""
    return DirectiveRenderer(_CATALOG, "en")


class TestSubstituteParams:
    """{n} placeholder replacement."""

    def test_positional_replacement(self) -> None:
        """Each {i} is replaced by params[i]."""
        assert (
            substitute_params("Hello {0}, you have {1} items", ["Ann", "3"])
            == "Hello Ann, you have 3 items"
        )

    def test_unmatched_placeholder_stays(self) -> None:
        """Placeholders without a param remain literal."""
        assert substitute_params("{0} and {2}", ["x", "y"]) == "x and {2}"

    def test_repeated_placeholder(self) -> None:
        """Every occurrence of a placeholder is replaced."""
        assert substitute_params("{0}-{0}", ["a"]) == "a-a"

    def test_none_and_empty_params(self) -> None:
        """No params leaves the text untouched."""
        assert substitute_params("{0}", None) == "{0}"
        assert substitute_params("{0}", []) == "{0}"

    def test_non_string_params(self) -> None:
        """Params are converted with str()."""
        assert substitute_params("{0} items", [3]) == "3 items"

    def test_replacement_is_sequential(self) -> None:
        """A param value containing a later placeholder is replaced too."""
        assert substitute_params("{0}", ["{1}", "x"]) == "x"

    @given(st.lists(st.text(alphabet="abc ", max_size=5), max_size=5))
    def test_text_without_placeholders_unchanged(self, params: list[str]) -> None:
        """Text without braces is never altered."""
        assert substitute_params("plain text", params) == "plain text"


class TestMissingKeyText:
    """Visible stand-in for missing keys."""

    def test_without_params(self) -> None:
        """The bare key is returned."""
        assert missing_key_text("foo.bar", None) == "foo.bar"

    def test_with_params(self) -> None:
        """Params are appended, |-joined."""
        assert missing_key_text("foo.bar", ["x", "y"]) == "foo.bar|x|y"

    def test_with_empty_params(self) -> None:
        """An empty param list still adds the separator."""
        assert missing_key_text("foo.bar", []) == "foo.bar|"


class TestTextHelpers:
    """html_entities, recode, expand_variables."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("<b>", "&lt;b&gt;"),
            ("a & b", "a &amp; b"),
            ('"q"', "&quot;q&quot;"),
            ("it's", "it&#039;s"),
            ("café", "caf&eacute;"),
            ("5 €", "5 &euro;"),
            ("日本", "日本"),
        ],
    )
    def test_html_entities(self, text: str, expected: str) -> None:
        """Markup characters and named-entity characters are escaped."""
        assert html_entities(text) == expected

    def test_recode_to_ascii(self) -> None:
        """Characters outside the target encoding become references."""
        assert recode("Jänner", "ascii") == "J&#228;nner"

    def test_recode_to_latin1(self) -> None:
        """Characters the encoding can hold pass through."""
        assert recode("ä €", "latin-1") == "ä &#8364;"

    def test_recode_utf8_identity(self) -> None:
        """UTF-8 can represent everything."""
        assert recode("Jänner 日本", "utf-8") == "Jänner 日本"

    def test_expand_known_variable(self) -> None:
        """**name** is replaced from the table."""
        assert expand_variables("Hi **user**!", {"user": "Ann"}) == "Hi Ann!"

    def test_unknown_variable_left_visible(self) -> None:
        """Unknown names stay as written."""
        assert expand_variables("a|**nope**", {}) == "a|**nope**"

    def test_single_star_untouched(self) -> None:
        """Only double-star brackets are variable references."""
        assert expand_variables("*user*", {"user": "Ann"}) == "*user*"


class TestDirectiveVariants:
    """to_directive and classify."""

    def test_string_becomes_literal(self) -> None:
        """Plain strings are Literal directives."""
        assert to_directive("@x") == Literal("@x")

    def test_mapping_becomes_by_locale(self) -> None:
        """Mappings are ByLocale directives."""
        directive = to_directive({"de": "Hallo", "en": "Hello"})
        assert isinstance(directive, ByLocale)
        assert directive.select(["fr", "en"]) == "Hello"

    def test_directive_passthrough(self) -> None:
        """Existing directives are returned unchanged."""
        literal = Literal("x")
        assert to_directive(literal) is literal

    def test_invalid_type(self) -> None:
        """Other types raise TypeError."""
        with pytest.raises(TypeError, match="int"):
            to_directive(42)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("°@x", DirectiveKind.RECODE),
            ("@x", DirectiveKind.LOOKUP),
            ("#x", DirectiveKind.ESCAPE),
            ("x", DirectiveKind.VERBATIM),
            ("", DirectiveKind.VERBATIM),
        ],
    )
    def test_classify(self, text: str, kind: DirectiveKind) -> None:
        """The first character selects the behavior."""
        assert classify(text) == kind


class TestRender:
    """DirectiveRenderer.render dispatch."""

    def test_lookup(self, renderer: DirectiveRenderer) -> None:
        """@key is looked up in the catalog."""
        assert renderer.render("@month.jan") == "January"

    def test_lookup_with_params(self, renderer: DirectiveRenderer) -> None:
        """Params fill placeholders when no inline arguments are given."""
        assert renderer.render("@greet", ["Ann", "3"]) == "Hello Ann, you have 3 items"

    def test_lookup_with_inline_arguments(self, renderer: DirectiveRenderer) -> None:
        """|-arguments fill placeholders."""
        assert renderer.render("@greet|Ann|3") == "Hello Ann, you have 3 items"

    def test_inline_arguments_take_precedence(self, renderer: DirectiveRenderer) -> None:
        """Inline arguments win over params."""
        assert renderer.render("@greet|Ann|3", ["X", "Y"]) == "Hello Ann, you have 3 items"

    def test_inline_variable_arguments(self) -> None:
        """**name** in arguments is resolved from the variable table."""
        renderer = DirectiveRenderer(_CATALOG, "en", variables={"user": "Ann", "n": "3"})
        assert renderer.render("@greet|**user**|**n**") == "Hello Ann, you have 3 items"

    def test_missing_key(self, renderer: DirectiveRenderer) -> None:
        """Missing keys render as the key itself."""
        assert renderer.render("@foo.bar") == "foo.bar"

    def test_missing_key_with_inline_arguments(self, renderer: DirectiveRenderer) -> None:
        """Missing keys show their inline arguments."""
        assert renderer.render("@foo.bar|x|y") == "foo.bar|x|y"

    def test_missing_key_with_params(self, renderer: DirectiveRenderer) -> None:
        """Missing keys show their params."""
        assert renderer.render("@foo.bar", ["x", "y"]) == "foo.bar|x|y"

    def test_escape(self, renderer: DirectiveRenderer) -> None:
        """#text is escaped, not looked up."""
        assert renderer.render("#<b>") == "&lt;b&gt;"
        assert renderer.render("#month.jan") == "month.jan"

    def test_escape_empty(self, renderer: DirectiveRenderer) -> None:
        """A lone # renders as empty text."""
        assert renderer.render("#") == ""

    def test_verbatim(self, renderer: DirectiveRenderer) -> None:
        """Other strings are returned unchanged, without escaping."""
        assert renderer.render("plain text") == "plain text"
        assert renderer.render("<b>bold</b>") == "<b>bold</b>"
        assert renderer.render("") == ""

    def test_recode(self) -> None:
        """°-prefixed text is rendered, then recoded to the output encoding."""
        renderer = DirectiveRenderer(_CATALOG, "en", output_encoding="ascii")
        assert renderer.render("°@umlaut") == "J&#228;nner"
        assert renderer.render("°#<b>") == "&lt;b&gt;"
        assert renderer.render("°Jänner") == "J&#228;nner"

    def test_recode_utf8(self, renderer: DirectiveRenderer) -> None:
        """With UTF-8 output the recode directive changes nothing else."""
        assert renderer.render("°@umlaut") == "Jänner"

    def test_unknown_output_encoding(self) -> None:
        """Unknown codecs are rejected at construction."""
        with pytest.raises(LookupError):
            DirectiveRenderer(_CATALOG, "en", output_encoding="no-such-codec")

    def test_invalid_input_type(self, renderer: DirectiveRenderer) -> None:
        """Non-string, non-mapping input raises TypeError."""
        with pytest.raises(TypeError):
            renderer.render(None)  # type: ignore[arg-type]


class TestLocaleMaps:
    """Locale-keyed input selects the entry for the active locale."""

    def test_active_locale_selected(self) -> None:
        """The entry for the active locale is rendered as a directive."""
        renderer = DirectiveRenderer(_CATALOG, "de")
        assert renderer.render({"de": "@month.jan", "en": "Hi"}) == "January"

    def test_fallback_locales(self) -> None:
        """Without an entry for the active locale, fallbacks are tried in order."""
        renderer = DirectiveRenderer(_CATALOG, "de_AT", fallback_locales=["de_AT", "de"])
        assert renderer.render({"de": "Servus", "en": "Hi"}) == "Servus"

    def test_no_entry(self, caplog: pytest.LogCaptureFixture) -> None:
        """A map without a usable entry renders empty and logs a warning."""
        renderer = DirectiveRenderer(_CATALOG, "fr")
        with caplog.at_level(logging.WARNING, logger="propl10n.runtime.directives"):
            assert renderer.render({"de": "Hallo"}) == ""
        assert "no entry for fr" in caplog.text

    def test_nested_map(self) -> None:
        """A selected entry that is itself a locale map is resolved again."""
        renderer = DirectiveRenderer(_CATALOG, "en")
        assert renderer.render({"en": {"en": "@month.jan"}}) == "January"

    def test_nested_map_uses_fallbacks(self) -> None:
        """Inner maps fall back along the same locale order."""
        renderer = DirectiveRenderer(_CATALOG, "de_AT", fallback_locales=["de_AT", "de"])
        nested = {"de_AT": {"de": "#<i>", "en": "Hi"}, "en": "Hello"}
        assert renderer.render(nested) == "&lt;i&gt;"

    def test_nested_map_without_entry(self) -> None:
        """An inner map without a usable entry renders empty."""
        renderer = DirectiveRenderer(_CATALOG, "en")
        assert renderer.render({"en": {"de": "Hallo"}}) == ""

    def test_nested_map_with_params(self) -> None:
        """Params reach lookups inside nested maps."""
        renderer = DirectiveRenderer(_CATALOG, "en")
        assert renderer.render({"en": {"en": "@greet"}}, ["Ann", "3"]) == (
            "Hello Ann, you have 3 items"
        )

    def test_by_locale_is_read_only(self) -> None:
        """ByLocale copies and freezes its mapping."""
        texts = {"en": "Hi"}
        directive = ByLocale(texts)
        texts["en"] = "changed"
        assert directive.texts["en"] == "Hi"
        with pytest.raises(TypeError):
            directive.texts["de"] = "Hallo"  # type: ignore[index]


class TestRendererExtras:
    """get, render_sequence and the missing-key callback."""

    def test_get(self, renderer: DirectiveRenderer) -> None:
        """get looks up keys directly, without directive parsing."""
        assert renderer.get("greet", ["Ann", "3"]) == "Hello Ann, you have 3 items"
        assert renderer.get("@month.jan") == "@month.jan"

    def test_render_sequence(self, renderer: DirectiveRenderer) -> None:
        """Rendered elements are concatenated."""
        assert renderer.render_sequence(["@month.jan", " ", "#<i>"]) == "January &lt;i&gt;"

    def test_on_missing_callback(self) -> None:
        """The callback receives each missing key."""
        seen: list[MissingKeyInfo] = []
        renderer = DirectiveRenderer(_CATALOG, "en", on_missing=seen.append)
        renderer.render("@nope")
        renderer.render("@month.jan")
        assert seen == [MissingKeyInfo(key="nope", locale="en")]

    def test_properties(self, renderer: DirectiveRenderer) -> None:
        """locale and output_encoding are exposed read-only."""
        assert renderer.locale == "en"
        assert renderer.output_encoding == "utf-8"

from __future__ import annotations

from fontfetch.core.template import render, render_filename


def test_render_substitutes_known_placeholders() -> None:
    values = {"family": "Open Sans", "weight": "400", "ext": "woff2"}

    assert render("{family}-{weight}.{ext}", values) == "Open Sans-400.woff2"


def test_render_leaves_unknown_placeholders_untouched() -> None:
    assert render("{family}-{style}", {"family": "Lato"}) == "Lato-{style}"


def test_render_substitutes_empty_values() -> None:
    assert render("{family}-{comment}{i}", {"family": "Lato", "comment": "", "i": 3}) == "Lato-3"
    assert render("[{comment}]", {"comment": None}) == "[]"


def test_doubled_braces_collapse_to_literal_braces() -> None:
    values = {"family": "Lato"}

    assert render("{{family}}", values) == "{family}"
    assert render("{{{family}}}", values) == "{Lato}"
    assert render("a}}b{{c", values) == "a}b{c"


def test_placeholder_names_accept_dashes_and_mixed_case() -> None:
    values = {"_family": "Open_Sans", "sub-set": "latin", "Weight": "700"}

    assert render("{_family}/{sub-set}/{Weight}", values) == "Open_Sans/latin/700"
    assert render("{weight}", values) == "{weight}"


def test_placeholders_with_other_characters_are_not_templates() -> None:
    assert render("{fam ily}-{a.b}", {"fam ily": "x", "a.b": "y"}) == "{fam ily}-{a.b}"


def test_render_filename_trims_dot_left_by_empty_extension() -> None:
    values = {"family": "Lato", "ext": ""}

    assert render_filename("{family}.{ext}", values) == "Lato"
    assert render_filename("{family}.{ext}", {"family": "Lato", "ext": "ttf"}) == "Lato.ttf"


def test_render_is_deterministic_and_counter_disambiguates() -> None:
    template = "{_family}-{i}.{ext}"
    first = {"_family": "Roboto", "ext": "woff2", "i": 1}
    second = {"_family": "Roboto", "ext": "woff2", "i": 2}

    assert render(template, first) == render(template, dict(first))
    assert render(template, first) != render(template, second)

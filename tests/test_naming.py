from __future__ import annotations

import pytest

from kiln.naming import kebab_case, pascal_case, snake_case, split_words


@pytest.mark.parametrize(
    "value, expected",
    [
        ("my-project", ["my", "project"]),
        ("MyProject", ["My", "Project"]),
        ("HTTPServer", ["HTTP", "Server"]),
        ("my_app2", ["my", "app2"]),
        ("  spaced   out  ", ["spaced", "out"]),
        ("Café au lait", ["Café", "au", "lait"]),
        ("v2Beta", ["v2", "Beta"]),
        ("", []),
    ],
)
def test_split_words(value, expected):
    assert split_words(value) == expected


@pytest.mark.parametrize(
    "value, kebab, pascal, snake",
    [
        ("MyProject", "my-project", "MyProject", "my_project"),
        ("my project", "my-project", "MyProject", "my_project"),
        ("my_app", "my-app", "MyApp", "my_app"),
        ("XMLHttpRequest", "xml-http-request", "XmlHttpRequest", "xml_http_request"),
        ("", "", "", ""),
    ],
)
def test_case_conversions(value, kebab, pascal, snake):
    assert kebab_case(value) == kebab
    assert pascal_case(value) == pascal
    assert snake_case(value) == snake


def test_non_string_input_is_coerced():
    assert kebab_case(42) == "42"
    assert snake_case(3.5) == "3_5"


@pytest.mark.parametrize(
    "transform, value",
    [
        (kebab_case, "my-project"),
        (snake_case, "my_project"),
        (pascal_case, "MyProject"),
    ],
)
def test_conversions_are_idempotent(transform, value):
    assert transform(value) == value


@pytest.mark.parametrize("value", ["My Cool-App", "HTTPServer v2", "alreadyCamel", "snake_case_name"])
def test_kebab_and_snake_share_words(value):
    assert snake_case(kebab_case(value)).split("_") == kebab_case(snake_case(value)).split("-")


@pytest.mark.parametrize(
    "value, kebab, pascal, snake",
    [
        ("日本語", "日本語", "日本語", "日本語"),
        ("日本語 プロジェクト", "日本語-プロジェクト", "日本語プロジェクト", "日本語_プロジェクト"),
        ("straße weg", "straße-weg", "StraßeWeg", "straße_weg"),
        ("José Müller", "josé-müller", "JoséMüller", "josé_müller"),
        ("ÉcoleNormale", "école-normale", "ÉcoleNormale", "école_normale"),
    ],
)
def test_non_ascii_letters_are_kept(value, kebab, pascal, snake):
    assert kebab_case(value) == kebab
    assert pascal_case(value) == pascal
    assert snake_case(value) == snake


def test_decomposed_accents_stay_in_their_word():
    assert snake_case("Jose\u0301 Mu\u0308ller") == "jos\u00e9_m\u00fcller"

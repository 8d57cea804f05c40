"""
Unit tests for the prefix template compiler in daslog.core.compiler.
"""

import pytest
from datetime import datetime

from daslog.core.compiler import (
    TIME_PLACEHOLDERS,
    PLACEHOLDERS,
    compile_prefix,
    is_template,
)
from daslog.infrastructure.error_handler import (
    PrefixError,
    TemplateSyntaxError,
    UnknownPlaceholderError,
)
from daslog.models import CompiledPrefix, UrgencyLevel


MOMENT = datetime(2016, 1, 4, 16, 52, 36)


# ---- Template detection ----------------------------------------------------

@pytest.mark.parametrize("raw, expected", [
    ("", False),
    ("plain prefix: ", False),
    ("{{ not a command }}", False),
    ("{{.F}}", True),
    ("{{ .Y }} ", True),
    ("[{{.z}}]", True),
])
def test_is_template(raw, expected):
    assert is_template(raw) is expected


def test_literal_prefix_is_not_compiled():
    compiled = compile_prefix("app: ")
    assert compiled == CompiledPrefix.literal("app: ")
    assert compiled.is_template is False
    assert compiled.time_layout == "app: "


def test_literal_prefix_with_unmatched_braces_stays_literal():
    """Without any {{.X}} command the text is never parsed."""
    compiled = compile_prefix("{{ oops ")
    assert compiled.is_template is False
    assert compiled.render(MOMENT) == "{{ oops "


# ---- Token table -----------------------------------------------------------

@pytest.mark.parametrize("token, expected", [
    ("F", "2016-01-04"),
    ("T", "16:52:36"),
    ("r", "4:52:36 PM"),
    ("Y", "2016"),
    ("y", "16"),
    ("m", "01"),
    ("b", "Jan"),
    ("B", "January"),
    ("d", "04"),
    ("a", "Mon"),
    ("A", "Monday"),
    ("H", "16"),
    ("I", "04"),
    ("M", "52"),
    ("S", "36"),
    ("p", "PM"),
    ("O", "2016-01-04 16:52:36"),
])
def test_single_token_renders_expected_text(token, expected):
    compiled = compile_prefix("{{.%s}} " % token)
    assert compiled.is_template is True
    assert compiled.has_urgency is False
    assert compiled.render(MOMENT) == expected + " "


def test_token_table_is_closed():
    assert PLACEHOLDERS == frozenset("FTrYymbBdaAHIMSpOQ")
    assert "Q" not in TIME_PLACEHOLDERS


def test_whitespace_inside_command_is_ignored():
    assert compile_prefix("{{ .Y }}").render(MOMENT) == "2016"
    assert compile_prefix("{{.Y  }}").render(MOMENT) == "2016"


def test_repeated_and_mixed_tokens():
    compiled = compile_prefix("{{.Y}}/{{.m}}/{{.d}} {{.Y}}")
    assert compiled.render(MOMENT) == "2016/01/04 2016"


# ---- Urgency placeholder ---------------------------------------------------

def test_urgency_placeholder_resolved_per_call():
    compiled = compile_prefix("{{.O}} [{{.Q}}]: ")
    assert compiled.has_urgency is True
    assert compiled.render(MOMENT, UrgencyLevel.INFO) == "2016-01-04 16:52:36 [info]: "
    assert compiled.render(MOMENT, UrgencyLevel.CRITICAL) == "2016-01-04 16:52:36 [critical]: "


def test_urgency_only_prefix():
    compiled = compile_prefix("{{.Q}}: ")
    assert compiled.layout_parts == ("", ": ")
    assert compiled.render(MOMENT, UrgencyLevel.NOTICE) == "notice: "


def test_time_layout_uses_sentinel_for_urgency():
    compiled = compile_prefix("{{.F}} {{.Q}} {{.Q}}")
    assert compiled.time_layout == "%Y-%m-%d <{Q}> <{Q}>"
    assert compiled.render(MOMENT, UrgencyLevel.ERROR) == "2016-01-04 error error"


def test_sentinel_text_in_literal_is_not_substituted():
    compiled = compile_prefix("<{Q}> {{.Q}} ")
    assert compiled.render(MOMENT, UrgencyLevel.INFO) == "<{Q}> info "


# ---- Literal text ----------------------------------------------------------

def test_percent_signs_in_literal_text_survive():
    compiled = compile_prefix("100% {{.Y}} %Y ")
    assert compiled.render(MOMENT) == "100% 2016 %Y "


def test_closing_braces_outside_command_are_literal():
    compiled = compile_prefix("}} {{.H}}")
    assert compiled.render(MOMENT) == "}} 16"


# ---- Errors ----------------------------------------------------------------

def test_unknown_placeholder():
    with pytest.raises(UnknownPlaceholderError) as exc_info:
        compile_prefix("{{.F}} {{.z}} ")

    assert exc_info.value.name == "z"
    assert str(exc_info.value) == "daslog: unknown format variable in prefix: {{.z}}"


def test_unknown_placeholder_alone():
    with pytest.raises(UnknownPlaceholderError) as exc_info:
        compile_prefix("{{.z}}")
    assert exc_info.value.name == "z"


def test_unknown_multi_letter_field():
    with pytest.raises(UnknownPlaceholderError) as exc_info:
        compile_prefix("{{.F}} {{.Or}}")
    assert exc_info.value.name == "Or"


@pytest.mark.parametrize("raw", [
    "{{.F}} {{",
    "{{.F}} {{.T",
    "{{.F}} {{}}",
    "{{.F}} {{ if }}",
    "{{.F}} {{ F }}",
])
def test_malformed_template(raw):
    with pytest.raises(TemplateSyntaxError) as exc_info:
        compile_prefix(raw)
    assert str(exc_info.value).startswith("daslog: prefix error: ")


def test_prefix_errors_are_value_errors():
    with pytest.raises(ValueError):
        compile_prefix("{{.x}}")
    assert issubclass(TemplateSyntaxError, PrefixError)
    assert issubclass(UnknownPlaceholderError, PrefixError)


# ---- Purity ----------------------------------------------------------------

def test_compiling_twice_renders_identically():
    raw = "{{.A}}, {{.B}} {{.d}} {{.r}} [{{.Q}}] "
    first = compile_prefix(raw)
    compile_prefix.cache_clear()
    second = compile_prefix(raw)

    assert first is not second
    assert first == second
    assert first.render(MOMENT, UrgencyLevel.INFO) == second.render(MOMENT, UrgencyLevel.INFO)


def test_compiled_prefix_is_immutable():
    compiled = compile_prefix("{{.T}} ")
    with pytest.raises(AttributeError):
        compiled.raw = "other"


@pytest.mark.parametrize("moment, expected", [
    (datetime(2016, 1, 4, 23, 11, 4), "11:11:04 PM"),
    (datetime(2016, 1, 4, 0, 5, 9), "12:05:09 AM"),
    (datetime(2016, 1, 4, 9, 0, 0), "9:00:00 AM"),
])
def test_twelve_hour_clock_has_no_leading_zero(moment, expected):
    assert compile_prefix("{{.r}}").render(moment) == expected


def test_render_failure_is_reported_at_compile_time(monkeypatch):
    from daslog.core import compiler

    def failing(moment, layout):
        raise UnicodeEncodeError("utf-8", layout, 0, 1, "surrogates not allowed")

    monkeypatch.setattr(compiler, "format_moment", failing)

    with pytest.raises(TemplateSyntaxError) as exc_info:
        compile_prefix("{{.T}} render check ")

    assert isinstance(exc_info.value.original_error, UnicodeEncodeError)


def test_surrogate_in_literal_text_compiles_and_renders():
    compiled = compile_prefix("{{.T}} \ud800 ")
    assert compiled.render(MOMENT) == "16:52:36 \ud800 "

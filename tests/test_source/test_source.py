"""Tests for program parsing, literal discovery, classification and rewriting."""

import pytest

from mimicss.errors import ParseError
from mimicss.model import UsageIndex
from mimicss.source import (
    NO_CHANGE,
    FullRewrite,
    PartialRewrite,
    StringLiteral,
    TemplateLiteral,
    classify,
    iter_literals,
    parse_program,
    rewrite_program,
    scan_usage,
)
from mimicss.source.escapes import cook, escape_string, escape_template

MAP = {"flex": "a", "block": "b", "hidden": "h", "items-center": "i"}


def _rewrite(code, mapping=MAP):
    return rewrite_program(parse_program(code), mapping)


def _literals(code):
    return list(iter_literals(parse_program(code)))


# ---------------------------------------------------------------------------
# Escapes
# ---------------------------------------------------------------------------


class TestEscapes:
    def test_cook_plain(self):
        assert cook("flex block") == "flex block"

    def test_cook_sequences(self):
        assert cook(r"a\nb\tc\'d") == "a\nb\tc'd"
        assert cook(r"\x41B\u{43}") == "ABC"

    def test_cook_line_continuation(self):
        assert cook("flex \\\nblock") == "flex block"

    def test_escape_string_quote(self):
        assert escape_string("it's \"x\"", "'") == "it\\'s \"x\""
        assert escape_string("it's \"x\"", '"') == "it's \\\"x\\\""

    def test_escape_string_newline(self):
        assert escape_string("a\nb", '"') == "a\\nb"

    def test_escape_template(self):
        assert escape_template("a`b${c}\\") == "a\\`b\\${c}\\\\"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseProgram:
    def test_parses_modern_syntax(self):
        program = parse_program("const f = async (x) => x?.y ?? `z`;")
        assert program.root.type == "program"

    def test_parses_jsx(self):
        program = parse_program('const el = <div className="flex">hi</div>;')
        assert not program.root.has_error

    def test_syntax_error(self):
        with pytest.raises(ParseError) as exc:
            parse_program("const x = ;")
        assert exc.value.kind == "program"
        assert exc.value.line == 1

    def test_error_line_reported(self):
        with pytest.raises(ParseError) as exc:
            parse_program("const a = 1;\nconst b = (;\n")
        assert exc.value.line == 2


# ---------------------------------------------------------------------------
# Literal discovery
# ---------------------------------------------------------------------------


class TestIterLiterals:
    def test_plain_string(self):
        [lit] = _literals('const c = "flex";')
        assert isinstance(lit, StringLiteral)
        assert lit.span.value == "flex"
        assert lit.span.quote == '"'
        assert not lit.span.join_left and not lit.span.join_right
        assert not lit.protected

    def test_concatenation_edges(self):
        first, last = _literals('const c = "a" + x + "b";')
        assert (first.span.join_left, first.span.join_right) == (False, True)
        assert (last.span.join_left, last.span.join_right) == (True, False)

    def test_middle_operand_joined_both_sides(self):
        _, middle, _ = _literals('const c = "x" + "m" + "y";')
        assert (middle.span.join_left, middle.span.join_right) == (True, True)

    def test_parenthesized_operand(self):
        [lit] = _literals('const c = ("flex") + x;')
        assert lit.span.join_right

    def test_augmented_assignment(self):
        [lit] = _literals('cls += "flex";')
        assert lit.span.join_left
        assert not lit.span.join_right

    def test_template_chunks(self):
        [lit] = _literals("const c = `flex ${c} items-center`;")
        assert isinstance(lit, TemplateLiteral)
        assert [chunk.value for chunk in lit.chunks] == ["flex ", " items-center"]
        assert [(c.join_left, c.join_right) for c in lit.chunks] == [(False, True), (True, False)]

    def test_template_operand(self):
        [lit] = _literals("const c = x + `flex`;")
        assert lit.chunks[0].join_left

    def test_tagged_template_protected(self):
        [lit] = _literals("const s = css`.flex { color: red }`;")
        assert lit.tagged and lit.protected

    def test_import_source_protected(self):
        lits = _literals('import x from "flex";\nexport { y } from "block";\nimport("hidden");')
        assert [lit.protected for lit in lits] == [True, True, True]

    def test_directive_protected(self):
        [lit] = _literals('"use client";')
        assert lit.protected

    def test_style_object_protected(self):
        lits = _literals('const p = { className: "flex", style: { display: "flex" } };')
        assert [lit.protected for lit in lits] == [False, True]

    def test_jsx_strings_are_raw(self):
        lits = _literals('const el = <div className="flex" style="display: flex" />;')
        assert [(lit.span.raw, lit.protected) for lit in lits] == [(True, False), (True, True)]

    def test_nested_in_interpolation_after_template(self):
        lits = _literals('const c = `flex ${on ? "block" : "hidden"}`;')
        assert isinstance(lits[0], TemplateLiteral)
        assert [lit.span.value for lit in lits[1:]] == ["block", "hidden"]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestClassify:
    def test_full_rewrite_collapses_whitespace(self):
        assert classify("  flex\n block ", MAP) == FullRewrite("a b")

    def test_unknown_tokens_kept(self):
        assert classify("flex items-center custom-animation", MAP) == FullRewrite(
            "a i custom-animation"
        )

    def test_no_known_tokens(self):
        assert classify("hello world", MAP) is NO_CHANGE

    def test_empty(self):
        assert classify("   ", MAP) is NO_CHANGE
        assert classify("", MAP, join_left=True, join_right=True) is NO_CHANGE

    def test_joined_right_keeps_separator(self):
        assert classify("flex", MAP, join_right=True) == FullRewrite("a ")
        assert classify("flex   ", MAP, join_right=True) == FullRewrite("a ")

    def test_joined_left_keeps_separator(self):
        assert classify("   block", MAP, join_left=True) == FullRewrite(" b")

    def test_glued_unknown_edge_stays_glued(self):
        assert classify("-lg flex", MAP, join_left=True) == FullRewrite("-lg a")

    def test_partial_suffix(self):
        assert classify("flex fi-", MAP, join_right=True) == PartialRewrite("a fi-", "fi-")

    def test_partial_suffix_requires_known_prefix_tokens(self):
        assert classify("custom fi-", MAP, join_right=True) is NO_CHANGE
        assert classify("fi-", MAP, join_right=True) is NO_CHANGE

    def test_partial_suffix_only_when_glued(self):
        assert classify("flex fi- ", MAP, join_right=True) == FullRewrite("a fi- ")

    def test_identity_mapping_is_unchanged_text(self):
        assert classify("fi fi-", {"fi": "fi"}, join_right=True) == PartialRewrite("fi fi-", "fi-")


# ---------------------------------------------------------------------------
# Program rewriting
# ---------------------------------------------------------------------------


class TestRewriteProgram:
    def test_string_literal(self):
        assert _rewrite('const c = "flex    block";') == 'const c = "a b";'

    def test_quote_style_and_comments_preserved(self):
        code = "// flex here\nconst c = 'flex'; /* block */"
        assert _rewrite(code) == "// flex here\nconst c = 'a'; /* block */"

    def test_reescapes_for_quote(self):
        assert _rewrite("const c = 'flex it\\'s';") == "const c = 'a it\\'s';"

    def test_concatenation(self):
        assert _rewrite('const c = "flex" + y + "block";') == 'const c = "a " + y + " b";'

    def test_augmented_assignment(self):
        assert _rewrite('cls += "flex";') == 'cls += " a";'

    def test_template_boundaries(self):
        code = "const c = `flex ${cond} items-center`;"
        assert _rewrite(code) == "const c = `a ${cond} i`;"

    def test_template_glued_prefix_gets_space(self):
        code = "const c = `flex${suffix}`;"
        assert _rewrite(code) == "const c = `a ${suffix}`;"

    def test_template_multiline_collapses(self):
        code = "const c = `\n  flex\n  block\n  hidden\n`;"
        assert _rewrite(code) == "const c = `a b h`;"

    def test_dynamic_suffix_kept(self):
        code = "const c = `flex icon-${name}`;"
        assert _rewrite(code) == "const c = `a icon-${name}`;"

    def test_style_values_untouched(self):
        code = 'const p = { className: "flex", style: { display: "flex" } };'
        assert _rewrite(code) == 'const p = { className: "a", style: { display: "flex" } };'

    def test_jsx(self):
        code = 'const el = <div className="flex hidden" style="flex">flex</div>;'
        assert _rewrite(code) == 'const el = <div className="a h" style="flex">flex</div>;'

    def test_protected_literals_untouched(self):
        code = '"use client";\nimport x from "flex";\nconst s = css`flex`;'
        assert _rewrite(code) == code

    def test_unknown_strings_untouched(self):
        code = 'fetch("/api/flex-data", { method: "POST" });'
        assert _rewrite(code) == code

    def test_non_ascii_offsets(self):
        code = 'const label = "héllo wörld"; const c = "flex";'
        assert _rewrite(code) == 'const label = "héllo wörld"; const c = "a";'

    def test_empty_map_is_identity(self):
        code = 'const c = "flex";'
        assert _rewrite(code, {}) == code


# ---------------------------------------------------------------------------
# Usage scanning
# ---------------------------------------------------------------------------


class TestScanUsage:
    def test_counts_strings_and_template_chunks(self):
        usage = UsageIndex()
        scan_usage(parse_program('const a = "flex block"; const b = `flex ${x}`;'), usage)
        assert usage.count("flex") == 2
        assert usage.count("block") == 1

    def test_template_prefix(self):
        usage = UsageIndex()
        scan_usage(parse_program("const c = `fi fi-${code}`;"), usage)
        assert usage.dynamic_prefixes == {"fi-"}

    def test_concatenation_prefix(self):
        usage = UsageIndex()
        scan_usage(parse_program('const c = "icon-" + name;'), usage)
        assert usage.has_dynamic_prefix("icon-home")

    def test_no_prefix_when_separated(self):
        usage = UsageIndex()
        scan_usage(parse_program('const c = "btn- " + x; const d = "btn" + x;'), usage)
        assert not usage.dynamic_prefixes

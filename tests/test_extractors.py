"""Unit tests for the reference-list and definition-list sub-parsers."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from policy_doc.parsing.extractors import (
    extract_definitions,
    extract_references,
    first_match,
    match_definition_line,
    match_definition_row,
    match_reference_line,
    match_reference_row,
)
from policy_doc.parsing.schema import Definition, Reference

# ===========================================================================
# first_match tests
# ===========================================================================


class TestFirstMatch:

    def test_first_accepting_matcher_wins(self):
        assert first_match("x", lambda _: None, lambda _: "b", lambda _: "c") == "b"

    def test_no_matcher_accepts(self):
        assert first_match("x", lambda _: None) is None

    def test_no_matchers(self):
        assert first_match("x") is None

    def test_later_matchers_not_called(self):
        calls = []

        def record(line):
            calls.append(line)

        first_match("x", lambda _: "a", record)
        assert not calls


# ===========================================================================
# Reference matcher tests
# ===========================================================================


class TestMatchReferenceRow:

    def test_basic_row(self):
        assert match_reference_row("| SOP-001 | Cleaning Procedure |") == Reference(ref_no="SOP-001", title="Cleaning Procedure")

    def test_header_row_skipped(self):
        assert match_reference_row("| Reference No. | Title |") is None

    def test_header_check_needs_both_cells(self):
        result = match_reference_row("| Reference No. | Scope |")
        assert result == Reference(ref_no="Reference No.", title="Scope")

    def test_rule_cell_skipped(self):
        assert match_reference_row("| --- | Cleaning |") is None

    def test_needs_two_non_empty_cells(self):
        assert match_reference_row("| SOP-001 | |") is None

    def test_cells_markup_cleaned(self):
        assert match_reference_row("| **SOP-002** | **Pest** Control |") == Reference(ref_no="SOP-002", title="Pest Control")

    def test_not_a_row(self):
        assert match_reference_row("SOP-001 - Cleaning") is None


class TestMatchReferenceLine:

    def test_dash_separator(self):
        assert match_reference_line("SOP-001 - Cleaning Procedure") == Reference(ref_no="SOP-001", title="Cleaning Procedure")

    def test_colon_separator(self):
        assert match_reference_line("FORM.12: Receiving Log") == Reference(ref_no="FORM.12", title="Receiving Log")

    def test_pipe_separator(self):
        assert match_reference_line("SOP-001 | Cleaning Procedure") == Reference(ref_no="SOP-001", title="Cleaning Procedure")

    def test_parenthetical_suffix(self):
        result = match_reference_line("21CFR117 (Subpart B) - Current Good Manufacturing Practice")
        assert result == Reference(ref_no="21CFR117 (Subpart B)", title="Current Good Manufacturing Practice")

    def test_case_insensitive(self):
        assert match_reference_line("sop-9 - lower case") == Reference(ref_no="sop-9", title="lower case")

    def test_header_line_does_not_match(self):
        assert match_reference_line("Reference No. | Title") is None

    def test_prose_does_not_match(self):
        assert match_reference_line("See the attached procedures.") is None


# ===========================================================================
# extract_references tests
# ===========================================================================


class TestExtractReferences:

    def test_header_excluded(self):
        text = "Reference No. | Title\nSOP-001 | Cleaning Procedure"
        assert extract_references(text) == [Reference(ref_no="SOP-001", title="Cleaning Procedure")]

    def test_pipe_rows(self):
        text = "| Reference No. | Title |\n|---|---|\n| SOP-001 | Cleaning |\n| SOP-002 | Sanitation |"
        assert extract_references(text) == [
            Reference(ref_no="SOP-001", title="Cleaning"),
            Reference(ref_no="SOP-002", title="Sanitation"),
        ]

    def test_mixed_lines_in_order(self):
        text = "SOP-001 - Cleaning\n\n| SOP-002 | Sanitation |\nunrelated prose here"
        assert [ref.ref_no for ref in extract_references(text)] == ["SOP-001", "SOP-002"]

    def test_single_cell_row_ignored(self):
        assert extract_references("| SOP-001 |") == []

    def test_bold_cleaned_before_matching(self):
        assert extract_references("**SOP-003** - **Allergen** Control") == [Reference(ref_no="SOP-003", title="Allergen Control")]

    def test_empty(self):
        assert extract_references("") == []
        assert extract_references("nothing to see") == []


# ===========================================================================
# Definition matcher tests
# ===========================================================================


class TestMatchDefinitionLine:

    def test_basic(self):
        assert match_definition_line("CCP - Critical Control Point") == Definition(term="CCP", description="Critical Control Point")

    def test_term_upper_cased(self):
        assert match_definition_line("haccp: Hazard Analysis") == Definition(term="HACCP", description="Hazard Analysis")

    def test_en_dash(self):
        assert match_definition_line("SOP – Standard Operating Procedure") == Definition(term="SOP", description="Standard Operating Procedure")

    def test_term_too_long(self):
        assert match_definition_line("ALLERGEN - a protein") is None

    def test_term_too_short(self):
        assert match_definition_line("A - single letter") is None

    def test_pipe_row_not_a_line(self):
        assert match_definition_line("| CCP | Critical Control Point |") is None


class TestMatchDefinitionRow:

    def test_basic(self):
        assert match_definition_row("| CCP | Critical Control Point |") == Definition(term="CCP", description="Critical Control Point")

    def test_term_kept_as_written(self):
        assert match_definition_row("| Allergen | A protein |") == Definition(term="Allergen", description="A protein")

    def test_header_row_skipped(self):
        assert match_definition_row("| Definition | Meaning |") is None
        assert match_definition_row("| Term Definitions | Meaning |") is None

    def test_empty_cells_skipped(self):
        assert match_definition_row("| CCP | |") is None
        assert match_definition_row("| | text |") is None

    def test_single_cell(self):
        assert match_definition_row("| CCP") is None

    def test_cells_markup_cleaned(self):
        assert match_definition_row("| **GMP** | Good **Manufacturing** Practice |") == Definition(term="GMP", description="Good Manufacturing Practice")


# ===========================================================================
# extract_definitions tests
# ===========================================================================


class TestExtractDefinitions:

    def test_dash_lines(self):
        text = "AID - Allergen Ingredient Disclosure\nFORM - Standard Form"
        assert extract_definitions(text) == [
            Definition(term="AID", description="Allergen Ingredient Disclosure"),
            Definition(term="FORM", description="Standard Form"),
        ]

    def test_table_rows_with_header_and_rule(self):
        text = "| Term | Definition |\n|---|---|\n| Allergen | A protein |"
        assert extract_definitions(text) == [
            Definition(term="Term", description="Definition"),
            Definition(term="Allergen", description="A protein"),
        ]

    def test_rule_lines_dropped(self):
        assert extract_definitions("CCP - Critical Control Point\n---\nGMP --- x") == [
            Definition(term="CCP", description="Critical Control Point"),
        ]

    def test_line_shape_checked_before_row_shape(self):
        # Pipes after a "TERM -" prefix stay in the description
        assert extract_definitions("CCP - Critical | Control | Point |") == [
            Definition(term="CCP", description="Critical | Control | Point |"),
        ]

    def test_mixed_lines_and_rows(self):
        text = "CCP - Critical Control Point\n| GMP | Good Manufacturing Practice |"
        assert [d.term for d in extract_definitions(text)] == ["CCP", "GMP"]

    def test_indented_definition_line_not_matched(self):
        assert extract_definitions("  AID - Allergen Ingredient Disclosure") == []

    def test_indented_pipe_row_still_read(self):
        assert extract_definitions("  | GMP | Good Manufacturing Practice |") == [
            Definition(term="GMP", description="Good Manufacturing Practice"),
        ]

    def test_prose_yields_nothing(self):
        assert extract_definitions("Definitions are listed in the appendix.") == []

    def test_empty(self):
        assert extract_definitions("") == []

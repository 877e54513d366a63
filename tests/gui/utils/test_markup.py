"""Tests for inline formula rendering."""

from quiz_runner.gui.utils.markup import render_formula, render_markup


class TestRenderMarkup:
    
    def test_plain_text_is_escaped(self):
        assert render_markup("a < b & c") == "a &lt; b &amp; c"
    
    def test_empty_input_returns_empty_string(self):
        assert render_markup(None) == ""
        assert render_markup("") == ""
    
    def test_formula_wrapped_in_math_span(self):
        html = render_markup("Solve $x + 1$ now")
        assert html.startswith("Solve <span class=\"math\"")
        assert "x + 1</span>" in html
        assert html.endswith(" now")
    
    def test_tex_commands_mapped_to_unicode(self):
        html = render_markup("$2\\pi \\times 3^\\circ$")
        assert "2π × 3<sup>°</sup>" in html
    
    def test_superscript_and_subscript(self):
        html = render_formula("x^{10} + a_1")
        assert "x<sup>10</sup>" in html
        assert "a<sub>1</sub>" in html
    
    def test_unmatched_dollar_left_as_text(self):
        assert render_markup("costs $5") == "costs $5"
    
    def test_render_formula_empty(self):
        assert render_formula(None) == ""
    
    def test_fraction_keeps_numerator_and_denominator(self):
        html = render_markup(r"$a = \frac{F}{m}$")
        assert "a = <sup>F</sup>⁄<sub>m</sub>" in html
        assert "frac" not in html
    
    def test_square_root_groups_radicand(self):
        html = render_formula(r"\sqrt{2gh}")
        assert '√<span style="text-decoration: overline;">2gh</span>' in html
    
    def test_fraction_inside_root(self):
        html = render_formula(r"v = \sqrt{\frac{2E}{m}}")
        assert 'v = √<span style="text-decoration: overline;"><sup>2E</sup>⁄<sub>m</sub></span>' in html
    
    def test_root_index_shown_as_superscript(self):
        html = render_formula(r"\sqrt[3]{8}")
        assert "<sup>3</sup>√" in html
    
    def test_multi_letter_subscript(self):
        assert "F<sub>net</sub> = ma" in render_formula("F_{net} = ma")
    
    def test_roman_text_macro_unwrapped(self):
        assert "5 kg" in render_formula(r"5 \mathrm{kg}")
    
    def test_formula_text_is_escaped(self):
        assert "a &lt; b" in render_formula("a < b")
    
    def test_dangling_script_marker_kept(self):
        assert "x^</span>" in render_formula("x^")

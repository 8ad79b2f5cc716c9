import pytest
from pydantic import ValidationError

from cptask.core.extractor import (
    classify_heading,
    ensure_trailing_newline,
    extract_index,
    normalize_pre,
    parse_samples,
    require_samples,
)
from cptask.data.models import SampleKind, SamplePair
from cptask.errors import NoSamplesError


def section(title, body):
    return f"<section><h3>{title}</h3>{body}</section>"


def page(*sections):
    return "<html><body>" + "".join(sections) + "</body></html>"


class TestClassifyHeading:
    @pytest.mark.parametrize("title", ["Sample Input 1", "入力例 1", "  Sample Input 3  "])
    def test_input_markers(self, title):
        assert classify_heading(title) is SampleKind.INPUT

    @pytest.mark.parametrize("title", ["Sample Output 1", "出力例 2"])
    def test_output_markers(self, title):
        assert classify_heading(title) is SampleKind.OUTPUT

    @pytest.mark.parametrize("title", ["Input", "Output", "Constraints", "入力", "出力", "Sample"])
    def test_other_headings(self, title):
        assert classify_heading(title) is None


class TestExtractIndex:
    def test_same_index_in_both_languages(self):
        assert extract_index("Sample Input 2") == 2
        assert extract_index("入力例 2") == 2

    def test_trailing_whitespace_allowed(self):
        assert extract_index("Sample Output 12 \n") == 12

    def test_only_trailing_run_counts(self):
        assert extract_index("Sample Input 1 (explanation)") is None
        assert extract_index("Sample 3 Input 45") == 45

    def test_missing_or_zero(self):
        assert extract_index("Sample Input") is None
        assert extract_index("Sample Input 0") is None
        assert extract_index("Sample Input 00") is None

    def test_non_ascii_digits_rejected(self):
        assert extract_index("入力例 １") is None
        assert extract_index("Sample Output ３") is None


class TestNormalization:
    def test_crlf_becomes_lf(self):
        assert normalize_pre("1 2\r\n3 4\r\n") == "1 2\n3 4\n"

    def test_trailing_newline_added_once(self):
        assert ensure_trailing_newline("5") == "5\n"
        assert ensure_trailing_newline("5\n") == "5\n"
        assert ensure_trailing_newline("") == "\n"

    @pytest.mark.parametrize("text", ["", "a", "a\n", "a\n\n", "1 2\n3"])
    def test_trailing_newline_idempotent(self, text):
        once = ensure_trailing_newline(text)
        assert ensure_trailing_newline(once) == once


class TestParseSamples:
    def test_single_pair(self, simple_sample_html):
        samples = parse_samples(simple_sample_html)
        assert samples == {1: SamplePair(input="3\n", output="9\n")}

    def test_bilingual_page(self, atcoder_task_html):
        samples = parse_samples(atcoder_task_html)
        assert list(samples) == [1, 2, 3]
        assert samples[1] == SamplePair(input="3\n1 2 3\n", output="6\n")
        assert samples[2] == SamplePair(input="1\n5\n", output="5\n")
        assert samples[3] == SamplePair(input="2\n10 20\n", output="30\n")

    def test_n_sections_give_n_pairs(self):
        sections = []
        for i in range(1, 6):
            sections.append(section(f"Sample Input {i}", f"<pre>{i}</pre>"))
            sections.append(section(f"Sample Output {i}", f"<pre>{i * i}</pre>"))
        samples = parse_samples(page(*sections))
        assert len(samples) == 5
        for i, pair in samples.items():
            assert pair.input == f"{i}\n"
            assert pair.output == f"{i * i}\n"

    def test_ascending_order_regardless_of_document_order(self):
        html = page(
            section("Sample Input 3", "<pre>c</pre>"),
            section("Sample Output 3", "<pre>C</pre>"),
            section("Sample Input 1", "<pre>a</pre>"),
            section("Sample Output 1", "<pre>A</pre>"),
            section("Sample Output 2", "<pre>B</pre>"),
            section("Sample Input 2", "<pre>b</pre>"),
        )
        samples = parse_samples(html)
        assert list(samples) == [1, 2, 3]
        assert samples[2] == SamplePair(input="b\n", output="B\n")

    def test_non_sample_sections_ignored(self):
        html = page(
            section("Constraints", "<pre>1 2 3</pre>"),
            section("Sample Input 1", "<pre>1</pre>"),
            section("Notes 1", "<pre>ignored</pre>"),
            section("Sample Output 1", "<pre>2</pre>"),
        )
        assert parse_samples(html) == {1: SamplePair(input="1\n", output="2\n")}

    def test_input_without_output_dropped(self):
        html = page(
            section("Sample Input 1", "<pre>1</pre>"),
            section("Sample Output 1", "<pre>1</pre>"),
            section("Sample Input 2", "<pre>2</pre>"),
        )
        assert list(parse_samples(html)) == [1]

    def test_output_without_input_dropped(self):
        html = page(
            section("Sample Output 4", "<pre>4</pre>"),
            section("Sample Input 1", "<pre>1</pre>"),
            section("Sample Output 1", "<pre>1</pre>"),
        )
        assert list(parse_samples(html)) == [1]

    def test_section_without_pre_ignored(self):
        html = page(
            section("Sample Input 1", "<p>no block</p>"),
            section("Sample Output 1", "<pre>1</pre>"),
        )
        assert parse_samples(html) == {}

    def test_heading_without_index_ignored(self):
        html = page(
            section("Sample Input", "<pre>1</pre>"),
            section("Sample Output", "<pre>1</pre>"),
            section("Sample Input 0", "<pre>0</pre>"),
            section("Sample Output 0", "<pre>0</pre>"),
        )
        assert parse_samples(html) == {}

    def test_later_section_overwrites_earlier(self):
        html = page(
            section("入力例 1", "<pre>old</pre>"),
            section("出力例 1", "<pre>OLD</pre>"),
            section("Sample Input 1", "<pre>new</pre>"),
            section("Sample Output 1", "<pre>NEW</pre>"),
        )
        assert parse_samples(html) == {1: SamplePair(input="new\n", output="NEW\n")}

    def test_first_pre_only(self):
        html = page(
            section("Sample Input 1", "<pre>first</pre><pre>second</pre>"),
            section("Sample Output 1", "<pre>out</pre>"),
        )
        assert parse_samples(html)[1].input == "first\n"

    def test_internal_whitespace_preserved(self):
        html = page(
            section("Sample Input 1", "<pre>  1  2\n\n3 </pre>"),
            section("Sample Output 1", "<pre>6\n\n</pre>"),
        )
        pair = parse_samples(html)[1]
        assert pair.input == "  1  2\n\n3 \n"
        assert pair.output == "6\n\n"

    def test_crlf_blocks(self):
        html = page(
            section("Sample Input 1", "<pre>\r\n1 2\r\n3\r\n</pre>"),
            section("Sample Output 1", "<pre>6\r\n</pre>"),
        )
        assert parse_samples(html) == {1: SamplePair(input="1 2\n3\n", output="6\n")}

    def test_full_width_index_skipped(self):
        html = page(
            section("入力例 ３", "<pre>1</pre>"),
            section("出力例 ３", "<pre>2</pre>"),
        )
        assert parse_samples(html) == {}

    def test_leading_newline_after_pre_tag(self):
        html = page(
            section("Sample Input 1", "<pre>\n4 5\n</pre>"),
            section("Sample Output 1", "<pre>9</pre>"),
        )
        assert parse_samples(html)[1].input == "4 5\n"

    def test_markup_inside_pre_flattened(self):
        html = page(
            section("Sample Input 1", "<pre><var>N</var> = 3\n</pre>"),
            section("Sample Output 1", "<pre>&lt;ok&gt;</pre>"),
        )
        pair = parse_samples(html)[1]
        assert pair.input == "N = 3\n"
        assert pair.output == "<ok>\n"

    def test_pairs_are_immutable(self, simple_sample_html):
        pair = parse_samples(simple_sample_html)[1]
        with pytest.raises(ValidationError):
            pair.input = "changed"


class TestRequireSamples:
    def test_no_samples_is_an_error(self, no_sample_html):
        with pytest.raises(NoSamplesError, match="no samples found"):
            require_samples(no_sample_html)

    def test_returns_samples(self, simple_sample_html):
        assert len(require_samples(simple_sample_html)) == 1

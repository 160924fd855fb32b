import pytest

from yamlstream.buffered import BufferedInput
from yamlstream.input import CommentSeparationError, SkipTabs, WhitespaceSkip
from yamlstream.str_input import StrInput


def test_bufmaxlen_is_sixteen():
    assert BufferedInput("abc").bufmaxlen() == 16


def test_lookahead_pads_with_nul():
    inp = BufferedInput("ab")
    inp.lookahead(4)
    assert inp.buflen() == 4
    assert [inp.peek_nth(i) for i in range(4)] == ["a", "b", "\0", "\0"]


def test_lookahead_never_shrinks_buffer():
    inp = BufferedInput("abcdef")
    inp.lookahead(3)
    inp.lookahead(1)
    assert inp.buflen() == 3


def test_lookahead_overflow_raises():
    inp = BufferedInput("x" * 40)
    with pytest.raises(OverflowError):
        inp.lookahead(17)


def test_lookahead_up_to_capacity():
    inp = BufferedInput("x" * 40)
    inp.lookahead(inp.bufmaxlen())
    assert inp.buflen() == inp.bufmaxlen()


def test_peek_on_empty_buffer_raises():
    with pytest.raises(IndexError):
        BufferedInput("abc").peek()


def test_skip_and_skip_n():
    inp = BufferedInput("abcde")
    inp.lookahead(5)
    inp.skip()
    assert inp.peek() == "b"
    inp.skip_n(2)
    assert inp.peek() == "d"
    assert inp.buflen() == 2


def test_skip_on_empty_buffer_is_noop():
    inp = BufferedInput("ab")
    inp.skip()
    assert inp.buf_is_empty()
    assert inp.look_ch() == "a"


def test_skip_n_beyond_buffer_raises():
    inp = BufferedInput("abc")
    inp.lookahead(2)
    with pytest.raises(ValueError):
        inp.skip_n(3)


def test_raw_read_bypasses_buffer():
    inp = BufferedInput("abc")
    inp.lookahead(1)
    assert inp.raw_read_ch() == "b"
    assert inp.peek() == "a"
    assert inp.raw_read_ch() == "c"
    assert inp.raw_read_ch() == "\0"


def test_raw_read_non_breakz_buffers_break():
    inp = BufferedInput("a\nb")
    assert inp.raw_read_non_breakz_ch() == "a"
    assert inp.raw_read_non_breakz_ch() is None
    assert inp.buflen() == 1
    assert inp.peek() == "\n"


def test_raw_read_non_breakz_at_end():
    inp = BufferedInput("")
    assert inp.raw_read_non_breakz_ch() is None
    assert inp.buf_is_empty()


def test_accepts_generators():
    inp = BufferedInput(c for c in "xyz")
    assert inp.look_ch() == "x"
    inp.skip()
    assert inp.look_ch() == "y"


def test_next_2_are_requires_lookahead():
    inp = BufferedInput("ab")
    with pytest.raises(ValueError):
        inp.next_2_are("a", "b")
    inp.lookahead(2)
    assert inp.next_2_are("a", "b")


@pytest.mark.parametrize(
    "text, start, end",
    [("---\n", True, False), ("---", True, False), ("...\n", False, True), ("... ", False, True)],
)
def test_document_indicators(text, start, end):
    inp = BufferedInput(text)
    inp.lookahead(4)
    assert inp.next_is_document_start() is start
    assert inp.next_is_document_end() is end
    assert inp.next_is_document_indicator()


@pytest.mark.parametrize(
    "text, skip_tabs",
    [
        ("  # comment\nx", SkipTabs.YES),
        ("\t \tvalue", SkipTabs.YES),
        ("\t value", SkipTabs.NO),
        ("   ", SkipTabs.YES),
        ("", SkipTabs.NO),
        (" \t# c", SkipTabs.NO),
    ],
)
def test_skip_ws_to_eol_matches_str_input(text, skip_tabs):
    buffered = BufferedInput(text)
    plain = StrInput(text)
    assert buffered.skip_ws_to_eol(skip_tabs) == plain.skip_ws_to_eol(skip_tabs)
    assert buffered.look_ch() == plain.look_ch()


def test_skip_ws_to_eol_result():
    inp = BufferedInput("  # note\nrest")
    consumed, found = inp.skip_ws_to_eol(SkipTabs.YES)
    assert consumed == len("  # note")
    assert found == WhitespaceSkip(found_tabs=False, has_valid_yaml_ws=True)
    assert inp.look_ch() == "\n"


def test_skip_ws_to_eol_unseparated_comment():
    inp = BufferedInput("#x")
    with pytest.raises(CommentSeparationError) as info:
        inp.skip_ws_to_eol(SkipTabs.YES)
    assert info.value.consumed == 0


@pytest.mark.parametrize("text", ["ab-c_9 rest", "", "你好", "word\nnext"])
def test_fetch_while_is_alpha_matches_str_input(text):
    buffered = BufferedInput(text)
    plain = StrInput(text)
    assert buffered.fetch_while_is_alpha() == plain.fetch_while_is_alpha()
    assert buffered.look_ch() == plain.look_ch()


@pytest.mark.parametrize("text", ["abc\ndef", "  \t x", "", "line"])
def test_skip_helpers_match_str_input(text):
    b1, s1 = BufferedInput(text), StrInput(text)
    assert b1.skip_while_blank() == s1.skip_while_blank()
    assert b1.look_ch() == s1.look_ch()
    b2, s2 = BufferedInput(text), StrInput(text)
    assert b2.skip_while_non_breakz() == s2.skip_while_non_breakz()
    assert b2.look_ch() == s2.look_ch()
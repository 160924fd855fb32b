import pytest

from yamlstream.input import CommentSeparationError, SkipTabs, WhitespaceSkip
from yamlstream.str_input import StrInput


def test_is_document_start():
    inp = StrInput("---\n")
    assert inp.next_is_document_start()
    assert inp.next_is_document_indicator()
    inp = StrInput("---")
    assert inp.next_is_document_start()
    assert inp.next_is_document_indicator()
    inp = StrInput("...\n")
    assert not inp.next_is_document_start()
    assert inp.next_is_document_indicator()
    inp = StrInput("--- ")
    assert inp.next_is_document_start()
    assert inp.next_is_document_indicator()


def test_is_document_end():
    inp = StrInput("...\n")
    assert inp.next_is_document_end()
    assert inp.next_is_document_indicator()
    inp = StrInput("...")
    assert inp.next_is_document_end()
    assert inp.next_is_document_indicator()
    inp = StrInput("---\n")
    assert not inp.next_is_document_end()
    assert inp.next_is_document_indicator()
    inp = StrInput("... ")
    assert inp.next_is_document_end()
    assert inp.next_is_document_indicator()


@pytest.mark.parametrize("text", ["----", "--", "---x", "-.-", ""])
def test_not_document_indicator(text):
    inp = StrInput(text)
    assert not inp.next_is_document_indicator()
    assert not inp.next_is_document_start()
    assert not inp.next_is_document_end()


def test_document_indicator_after_skip():
    inp = StrInput("a\n---")
    inp.skip_n(2)
    assert inp.next_is_document_start()


def test_peek_past_end_returns_nul():
    inp = StrInput("ab")
    assert inp.peek() == "a"
    assert inp.peek_nth(1) == "b"
    assert inp.peek_nth(2) == "\0"
    inp.skip_n(10)
    assert inp.peek() == "\0"
    assert inp.next_is_z()
    assert inp.next_is_breakz()


def test_lookahead_and_buflen():
    inp = StrInput("abc")
    assert inp.buf_is_empty()
    inp.lookahead(4)
    inp.lookahead(2)
    assert inp.buflen() == 4
    assert inp.bufmaxlen() == 128


def test_look_ch_does_not_consume():
    inp = StrInput("xy")
    assert inp.look_ch() == "x"
    assert inp.look_ch() == "x"
    assert inp.buflen() == 1


def test_raw_read_ch():
    inp = StrInput("你a")
    assert inp.raw_read_ch() == "你"
    assert inp.raw_read_ch() == "a"
    assert inp.raw_read_ch() == "\0"


def test_raw_read_non_breakz_ch():
    inp = StrInput("a\nb")
    assert inp.raw_read_non_breakz_ch() == "a"
    assert inp.raw_read_non_breakz_ch() is None
    assert inp.peek() == "\n"
    assert StrInput("").raw_read_non_breakz_ch() is None


def test_next_2_and_3_are():
    inp = StrInput("abc")
    assert inp.next_2_are("a", "b")
    assert not inp.next_2_are("a", "c")
    assert inp.next_3_are("a", "b", "c")
    assert not StrInput("ab").next_3_are("a", "b", "c")
    assert inp.next_char_is("a")
    assert inp.nth_char_is(2, "c")


def test_skip_ws_to_eol_with_comment():
    inp = StrInput("  # comment\nx")
    consumed, found = inp.skip_ws_to_eol(SkipTabs.YES)
    assert consumed == len("  # comment")
    assert found == WhitespaceSkip(found_tabs=False, has_valid_yaml_ws=True)
    assert inp.peek() == "\n"


def test_skip_ws_to_eol_tabs():
    inp = StrInput("\t\tvalue")
    consumed, found = inp.skip_ws_to_eol(SkipTabs.YES)
    assert consumed == 2
    assert found.found_tabs
    assert not found.has_valid_yaml_ws
    assert inp.peek() == "v"


def test_skip_ws_to_eol_without_tabs_stops_at_tab():
    inp = StrInput(" \tvalue")
    consumed, found = inp.skip_ws_to_eol(SkipTabs.NO)
    assert consumed == 1
    assert found == WhitespaceSkip(found_tabs=False, has_valid_yaml_ws=True)
    assert inp.peek() == "\t"


def test_skip_ws_to_eol_comment_after_tab():
    inp = StrInput("\t# c")
    consumed, found = inp.skip_ws_to_eol(SkipTabs.YES)
    assert consumed == len("\t# c")
    assert found.found_tabs
    assert inp.next_is_z()


def test_skip_ws_to_eol_unseparated_comment():
    inp = StrInput("#comment")
    with pytest.raises(CommentSeparationError) as info:
        inp.skip_ws_to_eol(SkipTabs.YES)
    assert info.value.consumed == 0
    assert inp.peek() == "#"


@pytest.mark.parametrize(
    "text, in_flow, expected",
    [
        (": ", False, False),
        (":", False, False),
        (":\n", False, False),
        (":a", False, True),
        (":,", True, False),
        (":,", False, True),
        (",", True, False),
        (",", False, True),
        ("a", True, True),
    ],
)
def test_next_can_be_plain_scalar(text, in_flow, expected):
    assert StrInput(text).next_can_be_plain_scalar(in_flow) is expected


@pytest.mark.parametrize(
    "text, blank, brk, flow, digit, alpha",
    [
        (" ", True, False, False, False, False),
        ("\n", False, True, False, False, False),
        ("[", False, False, True, False, False),
        ("7", False, False, False, True, True),
        ("q", False, False, False, False, True),
        ("", False, False, False, False, False),
    ],
)
def test_next_is_predicates(text, blank, brk, flow, digit, alpha):
    inp = StrInput(text)
    assert inp.next_is_blank() is blank
    assert inp.next_is_break() is brk
    assert inp.next_is_blank_or_break() is (blank or brk)
    assert inp.next_is_flow() is flow
    assert inp.next_is_digit() is digit
    assert inp.next_is_alpha() is alpha


def test_blank_or_breakz_at_end():
    inp = StrInput("")
    assert inp.next_is_blank_or_breakz()
    assert not inp.next_is_blank_or_break()


def test_skip_while_non_breakz():
    inp = StrInput("你好 x\r\nrest")
    assert inp.skip_while_non_breakz() == len("你好 x")
    assert inp.peek() == "\r"


def test_skip_while_blank():
    inp = StrInput(" \t  x")
    assert inp.skip_while_blank() == 4
    assert inp.peek() == "x"
    assert inp.skip_while_blank() == 0


def test_fetch_while_is_alpha():
    inp = StrInput("ab-c_9 rest")
    assert inp.fetch_while_is_alpha() == "ab-c_9"
    assert inp.peek() == " "
    assert inp.fetch_while_is_alpha() == ""


def test_fetch_while_is_alpha_to_end():
    inp = StrInput("word")
    assert inp.fetch_while_is_alpha() == "word"
    assert inp.next_is_z()
"""Tests for prompt framing helpers."""

from vlc_rc_mcp.protocol.framing import (
    LINE_TERMINATOR,
    PROMPT,
    decode,
    encode_command,
    is_artifact,
    trim_output,
)


def test_prompt_byte():
    assert PROMPT == b">"
    assert LINE_TERMINATOR == b"\n"


def test_encode_command_appends_one_terminator():
    assert encode_command("volume 50") == b"volume 50\n"


def test_decode_replaces_invalid_bytes():
    """Invalid UTF-8 must never raise."""
    text = decode(b"caf\xff\r\n")
    assert text.startswith("caf")
    assert "\ufffd" in text


def test_trim_prompt_and_space():
    assert trim_output("> 25") == "25"


def test_trim_repeated_prompts():
    """Prompts left by several earlier replies are all removed."""
    assert trim_output(">  >25") == "25"
    assert trim_output("> > > 25\r\n") == "25\r\n"


def test_trim_keeps_inner_text():
    """Only the front of the line is trimmed."""
    assert trim_output("a > b ") == "a > b "


def test_trim_long_run_of_artifacts():
    """Trimming does not recurse, so a long run of prompts is fine."""
    assert trim_output("> " * 10000 + "7") == "7"


def test_trim_empty():
    assert trim_output("") == ""
    assert trim_output("> ") == ""


def test_is_artifact():
    assert is_artifact(">")
    assert is_artifact(" > \r\n>")
    assert not is_artifact("> +----[ Playlist - playlist ]")
